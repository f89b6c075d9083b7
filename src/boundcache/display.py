"""Display helpers for boundcache."""

import sys
from collections.abc import Iterable
from typing import Any, TextIO


def render(cache: Iterable[Any]) -> str:
    """Render the cache contents, newest first, separated by spaces.

    Args:
        cache: A cache, or anything else that iterates in traversal order

    Returns:
        The rendered contents, an empty string for an empty cache
    """
    return " ".join(str(item) for item in cache)


def print_cache(cache: Iterable[Any], file: TextIO | None = None) -> None:
    """Print the cache contents on one line.

    Args:
        cache: A cache, or anything else that iterates in traversal order
        file: Stream to write to, stdout by default
    """
    print(render(cache), file=file if file is not None else sys.stdout)
