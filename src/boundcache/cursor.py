"""Read-only forward cursors over cache contents."""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from .exceptions import CursorExhaustedError

T = TypeVar("T")

_END: Any = object()


class CacheCursor(Generic[T]):
    """A forward cursor that can be dereferenced, advanced and compared.

    The cursor is also a regular Python iterator, so it can be handed to
    anything that consumes iterables.
    """

    def __init__(self, items: Iterable[T]) -> None:
        """Initialize the cursor at the first element of ``items``.

        Args:
            items: Elements to walk over, in traversal order
        """
        self._items: Iterator[T] = iter(items)
        self._current: Any = _END
        self.advance()

    @property
    def exhausted(self) -> bool:
        """Whether the cursor has moved past the last element."""
        return self._current is _END

    @property
    def value(self) -> T:
        """The element the cursor points at.

        Raises:
            CursorExhaustedError: If the cursor is past the last element
        """
        if self.exhausted:
            raise CursorExhaustedError("Cannot dereference an exhausted cursor.")
        return self._current

    def advance(self) -> "CacheCursor[T]":
        """Move to the next element and return the cursor itself."""
        self._current = next(self._items, _END)
        return self

    def __iter__(self) -> "CacheCursor[T]":
        return self

    def __next__(self) -> T:
        if self.exhausted:
            raise StopIteration
        current = self._current
        self.advance()
        return current

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheCursor):
            return NotImplemented
        return cursors_equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, CacheCursor):
            return NotImplemented
        return cursors_differ(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.exhausted:
            return "CacheCursor(<end>)"
        return f"CacheCursor({self._current!r})"


def cursors_equal(left: CacheCursor[Any], right: CacheCursor[Any]) -> bool:
    """Compare two cursors by the values they point at.

    Two exhausted cursors are equal; an exhausted cursor never equals a live one.
    """
    if left.exhausted or right.exhausted:
        return left.exhausted and right.exhausted
    return bool(left.value == right.value)


def cursors_differ(left: CacheCursor[Any], right: CacheCursor[Any]) -> bool:
    """Negation of :func:`cursors_equal`."""
    return not cursors_equal(left, right)
