"""Tests for the exceptions module."""

import pytest

from boundcache.exceptions import (
    BoundCacheError,
    CacheConfigurationError,
    CursorExhaustedError,
    EmptyCacheError,
)


class TestBoundCacheError:
    """Test cases for BoundCacheError base exception."""

    def test_bound_cache_error_creation(self) -> None:
        """Test creating BoundCacheError."""
        error = BoundCacheError("Test error message")
        assert str(error) == "Test error message"
        assert isinstance(error, Exception)

    def test_bound_cache_error_inheritance(self) -> None:
        """Test that all custom exceptions inherit from BoundCacheError."""
        assert issubclass(EmptyCacheError, BoundCacheError)
        assert issubclass(CacheConfigurationError, BoundCacheError)
        assert issubclass(CursorExhaustedError, BoundCacheError)


class TestEmptyCacheError:
    """Test cases for EmptyCacheError."""

    def test_default_message(self) -> None:
        """Test the default message and operation."""
        error = EmptyCacheError()
        assert str(error) == "Cache is empty."
        assert error.operation is None

    def test_with_operation(self) -> None:
        """Test creating EmptyCacheError with the failing operation."""
        error = EmptyCacheError("nothing to evict", operation="evict_oldest")
        assert str(error) == "nothing to evict"
        assert error.operation == "evict_oldest"

    def test_catch_as_base(self) -> None:
        """Test catching EmptyCacheError as BoundCacheError."""
        with pytest.raises(BoundCacheError):
            raise EmptyCacheError(operation="pop")


class TestCacheConfigurationError:
    """Test cases for CacheConfigurationError."""

    def test_configuration_error_raise(self) -> None:
        """Test raising CacheConfigurationError."""
        with pytest.raises(CacheConfigurationError) as exc_info:
            raise CacheConfigurationError("Capacity must be a non-negative integer")
        assert "non-negative" in str(exc_info.value)
