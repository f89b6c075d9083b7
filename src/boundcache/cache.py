"""Cache module for boundcache."""

import functools
import itertools
import logging
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from sortedcontainers import SortedKeyList

from .cursor import CacheCursor
from .exceptions import CacheConfigurationError, EmptyCacheError
from .ordering import Order, less_than

logger: logging.Logger = logging.getLogger(name=__name__)

T = TypeVar("T")


class BoundedOrderedCache(Generic[T]):
    """A container that holds at most ``capacity`` items and drops the oldest when full.

    Items are kept newest first. Alongside the items the cache tracks a
    ``high`` and a ``low`` value, updated from each inserted item only. They
    describe the best values seen since the cache last went from empty to
    non-empty, so evicting the item that set them leaves them unchanged.
    Caches built with ``track_resident=True`` additionally keep a sorted index
    of the current occupants and can report their true extrema.

    The cache is not thread-safe.
    """

    def __init__(
        self,
        capacity: int,
        order: Order = less_than,
        *,
        factory: Callable[..., T] | None = None,
        track_resident: bool = False,
    ) -> None:
        """Initialize the BoundedOrderedCache.

        Args:
            capacity: Maximum number of items to hold
            order: Predicate returning True when its first argument strictly
                precedes its second
            factory: Callable used by ``emplace`` to build items
            track_resident: Keep a sorted index for ``resident_high``/``resident_low``

        Raises:
            CacheConfigurationError: If capacity is not a non-negative int or
                order is not callable
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise CacheConfigurationError(
                f"Capacity must be a non-negative integer, got {capacity!r}"
            )
        if not callable(order):
            raise CacheConfigurationError(f"Order must be callable, got {order!r}")

        self._capacity: int = capacity
        self._order: Order = order
        self._factory: Callable[..., T] | None = factory
        self._elements: deque[T] = deque()
        self._high: T | None = None
        self._low: T | None = None
        self._seen: bool = False

        self._track_resident: bool = track_resident
        if track_resident:
            sort_key = functools.cmp_to_key(self._compare)
            self._sequence: Iterator[int] = itertools.count()
            # Entries are (item, sequence) so equal items stay distinct.
            self._entries: deque[tuple[T, int]] = deque()
            self._resident: SortedKeyList = SortedKeyList(
                key=lambda entry: (sort_key(entry[0]), entry[1])
            )

    @property
    def capacity(self) -> int:
        """Maximum number of items the cache can hold."""
        return self._capacity

    @property
    def order(self) -> Order:
        """The ordering predicate."""
        return self._order

    def insert(self, value: T) -> None:
        """Insert a value as the newest item, evicting the oldest if full.

        All comparisons run before the cache is modified, so an order that
        raises leaves the cache as it was.

        Args:
            value: Item to store
        """
        if self._capacity == 0:
            logger.debug(f"Dropping {value!r}: cache has zero capacity")
            return

        # The value will be the only item: empty now, or evicting the last one.
        occupying = not self._elements or self._capacity == 1
        high, low = self._next_extrema(value, occupying)

        entry: tuple[T, int] | None = None
        if self._track_resident:
            entry = (value, next(self._sequence))
            self._resident.add(entry)

        if len(self._elements) == self._capacity:
            try:
                self.evict_oldest()
            except Exception:
                if entry is not None:
                    self._discard_resident(entry)
                raise

        self._elements.appendleft(value)
        if entry is not None:
            self._entries.appendleft(entry)

        if occupying:
            logger.debug(f"Cache occupied, high and low reset to {value!r}")
        elif high is not self._high:
            logger.debug(f"New high {value!r} (was {self._high!r})")
        elif low is not self._low:
            logger.debug(f"New low {value!r} (was {self._low!r})")
        self._high, self._low, self._seen = high, low, True

    def build(self, *args: Any, **kwargs: Any) -> T:
        """Build an item with the cache's factory without inserting it.

        Raises:
            CacheConfigurationError: If the cache has no factory
        """
        if self._factory is None:
            raise CacheConfigurationError("Cache has no factory to build items with")
        return self._factory(*args, **kwargs)

    def emplace(self, *args: Any, **kwargs: Any) -> None:
        """Build an item from the given arguments and insert it.

        Errors raised while building propagate and leave the cache unchanged.
        """
        self.insert(self.build(*args, **kwargs))

    def evict_oldest(self) -> T:
        """Remove the oldest item.

        Returns:
            The evicted item

        Raises:
            EmptyCacheError: If the cache is empty
            ValueError: If the resident index cannot locate the item, which
                happens when the order is not a strict weak order (e.g. NaN
                under ``less_than``). The cache is left unchanged.
        """
        if not self._elements:
            raise EmptyCacheError("Cannot evict from an empty cache.", operation="evict_oldest")

        if self._track_resident:
            self._resident.remove(self._entries[-1])
            self._entries.pop()
        value = self._elements.pop()

        logger.debug(f"Evicted {value!r}, {len(self._elements)} item(s) left")
        return value

    pop = evict_oldest

    def count(self) -> int:
        """Number of items currently held."""
        return len(self._elements)

    def is_empty(self) -> bool:
        """Whether the cache holds no items."""
        return not self._elements

    def get_high(self) -> T:
        """The highest value seen since the cache last became non-empty.

        Raises:
            EmptyCacheError: If nothing was ever inserted
        """
        if not self._seen:
            raise EmptyCacheError("Cache has never held a value.", operation="get_high")
        return self._high  # type: ignore[return-value]

    def get_low(self) -> T:
        """The lowest value seen since the cache last became non-empty.

        Raises:
            EmptyCacheError: If nothing was ever inserted
        """
        if not self._seen:
            raise EmptyCacheError("Cache has never held a value.", operation="get_low")
        return self._low  # type: ignore[return-value]

    def resident_high(self) -> T:
        """The highest item currently held.

        Raises:
            CacheConfigurationError: If the cache does not track residents
            EmptyCacheError: If the cache is empty
        """
        return self._resident_entry(-1, "resident_high")

    def resident_low(self) -> T:
        """The lowest item currently held.

        Raises:
            CacheConfigurationError: If the cache does not track residents
            EmptyCacheError: If the cache is empty
        """
        return self._resident_entry(0, "resident_low")

    def newest(self) -> T:
        """The most recently inserted item.

        Raises:
            EmptyCacheError: If the cache is empty
        """
        if not self._elements:
            raise EmptyCacheError("Cache is empty.", operation="newest")
        return self._elements[0]

    def oldest(self) -> T:
        """The item that will be evicted next.

        Raises:
            EmptyCacheError: If the cache is empty
        """
        if not self._elements:
            raise EmptyCacheError("Cache is empty.", operation="oldest")
        return self._elements[-1]

    def traverse(self) -> Iterator[T]:
        """Iterate over the items from newest to oldest.

        Each call returns a fresh iterator. Mutating the cache while
        iterating raises RuntimeError.
        """
        yield from self._elements

    def begin(self) -> CacheCursor[T]:
        """A cursor positioned at the newest item."""
        return CacheCursor(self._elements)

    def end(self) -> CacheCursor[T]:
        """A cursor positioned past the oldest item."""
        return CacheCursor(())

    def __iter__(self) -> Iterator[T]:
        """Iterate over the items from newest to oldest."""
        return self.traverse()

    def __len__(self) -> int:
        """Number of items currently held."""
        return len(self._elements)

    def __contains__(self, value: object) -> bool:
        """Check whether an equal item is held."""
        return value in self._elements

    def __repr__(self) -> str:
        """Show the capacity and the items, newest first."""
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self._elements)!r})"

    def _next_extrema(self, value: T, occupying: bool) -> tuple[T, T]:
        """Return high and low as they will be once value is inserted."""
        if occupying:
            return value, value
        if self._order(self._high, value):
            return value, self._low  # type: ignore[return-value]
        if self._order(value, self._low):
            return self._high, value  # type: ignore[return-value]
        return self._high, self._low  # type: ignore[return-value]

    def _discard_resident(self, entry: tuple[T, int]) -> None:
        """Drop an entry from the resident index by identity."""
        for index, resident in enumerate(self._resident):
            if resident is entry:
                del self._resident[index]
                return

    def _compare(self, a: T, b: T) -> int:
        if self._order(a, b):
            return -1
        if self._order(b, a):
            return 1
        return 0

    def _resident_entry(self, index: int, operation: str) -> T:
        if not self._track_resident:
            raise CacheConfigurationError(
                f"{operation} needs a cache built with track_resident=True"
            )
        if not self._elements:
            raise EmptyCacheError("Cache is empty.", operation=operation)
        return self._resident[index][0]
