"""Main entry point for boundcache."""

import logging
import sys
from typing import Any, TextIO

from .cache import BoundedOrderedCache
from .config import Configuration
from .display import print_cache

logger: logging.Logger = logging.getLogger(name="boundcache.main")


def read_tokens(stream: TextIO) -> list[str]:
    """Split a stream into whitespace-separated tokens."""
    return stream.read().split()


def fill_cache(cache: BoundedOrderedCache[Any], tokens: list[str]) -> list[str]:
    """Build every token with the cache factory and insert the ones that parse.

    Args:
        cache: Cache with a factory that parses tokens
        tokens: Raw input tokens, oldest first

    Returns:
        The tokens the factory rejected
    """
    rejected: list[str] = []
    for token in tokens:
        try:
            value = cache.build(token)
        except (TypeError, ValueError) as err:
            logger.warning(f"Skipping {token!r}: {err}")
            rejected.append(token)
            continue
        cache.insert(value)
    return rejected


def report(cache: BoundedOrderedCache[Any], out: TextIO, resident: bool = False) -> None:
    """Write the cache contents and its extrema to ``out``."""
    if cache.is_empty():
        print("(empty)", file=out)
        return

    print_cache(cache, file=out)
    print(f"high: {cache.get_high()}", file=out)
    print(f"low: {cache.get_low()}", file=out)
    if resident:
        print(f"resident high: {cache.resident_high()}", file=out)
        print(f"resident low: {cache.resident_low()}", file=out)


def main(exec_args: list[str] | None = None) -> None:
    """Main entry point for boundcache."""
    config = Configuration(exec_args=exec_args)

    try:
        cache: BoundedOrderedCache[Any] = BoundedOrderedCache(
            config.capacity,
            config.order,
            factory=config.factory,
            track_resident=config.track_resident,
        )
        tokens = config.values if config.values else read_tokens(sys.stdin)
        logger.info(f"Inserting {len(tokens)} value(s) into a cache of capacity {cache.capacity}")

        for token in fill_cache(cache, tokens):
            print(f"Skipped invalid {config.value_type} value: {token}", file=sys.stderr)

        report(cache, sys.stdout, resident=config.track_resident)
    except KeyboardInterrupt:
        # Handle Ctrl+C gracefully
        logger.info(msg="Interrupted by user (Ctrl+C)")
        print("\nExiting boundcache...")
    except Exception as e:
        logger.exception(msg=f"Error: {e}")
        print(f"Error: {e}")
        print(f"See logs for details (at {config.log_file})")
        sys.exit(1)


if __name__ == "__main__":
    main()
