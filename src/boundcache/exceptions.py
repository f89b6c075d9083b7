"""Custom exceptions for boundcache."""


class BoundCacheError(Exception):
    """Base exception for all boundcache errors."""

    pass


class EmptyCacheError(BoundCacheError):
    """Raised when an operation needs an element but the cache holds none."""

    def __init__(
        self, message: str = "Cache is empty.", operation: str | None = None
    ) -> None:
        """Initialize EmptyCacheError.

        Args:
            message: Error message
            operation: Name of the cache operation that failed
        """
        super().__init__(message)
        self.operation = operation


class CacheConfigurationError(BoundCacheError):
    """Raised when a cache is built or configured with invalid settings."""

    pass


class CursorExhaustedError(BoundCacheError):
    """Raised when a cursor is dereferenced past the last element."""

    pass
