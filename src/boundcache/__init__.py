"""boundcache: a bounded, insertion-ordered cache with high/low tracking."""

from .cache import BoundedOrderedCache
from .cursor import CacheCursor, cursors_differ, cursors_equal
from .display import print_cache, render
from .exceptions import (
    BoundCacheError,
    CacheConfigurationError,
    CursorExhaustedError,
    EmptyCacheError,
)
from .ordering import by_key, greater_than, less_than, resolve_order

__all__: list[str] = [
    "BoundCacheError",
    "BoundedOrderedCache",
    "CacheConfigurationError",
    "CacheCursor",
    "CursorExhaustedError",
    "EmptyCacheError",
    "by_key",
    "cursors_differ",
    "cursors_equal",
    "greater_than",
    "less_than",
    "print_cache",
    "render",
    "resolve_order",
]
