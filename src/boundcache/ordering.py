"""Ordering predicates for boundcache.

An ordering is any callable ``order(a, b)`` returning True when ``a``
strictly precedes ``b``. The cache only ever calls it with two arguments, so
plain functions, lambdas and ``operator`` functions all work.
"""

import operator
from collections.abc import Callable
from typing import Any, TypeVar

from .exceptions import CacheConfigurationError

T = TypeVar("T")

Order = Callable[[Any, Any], bool]

less_than: Order = operator.lt
greater_than: Order = operator.gt


def by_key(key: Callable[[T], Any]) -> Order:
    """Build an ordering that compares ``key(a) < key(b)``.

    Args:
        key: Function extracting the comparison key from an element

    Returns:
        Ordering predicate
    """

    def order(a: T, b: T) -> bool:
        return key(a) < key(b)

    return order


ORDERS: dict[str, Order] = {
    "ascending": less_than,
    "descending": greater_than,
}


def resolve_order(name: str) -> Order:
    """Look up a named ordering.

    Args:
        name: "ascending" or "descending"

    Returns:
        The matching ordering predicate

    Raises:
        CacheConfigurationError: If the name is unknown
    """
    try:
        return ORDERS[name.lower()]
    except (KeyError, AttributeError):
        raise CacheConfigurationError(
            f"Unknown ordering {name!r}, expected one of: {', '.join(ORDERS)}"
        ) from None
