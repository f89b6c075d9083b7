"""Configuration module for boundcache."""

import argparse
import logging
import math
import sys
from collections.abc import Callable
from importlib import metadata
from pathlib import Path
from typing import Any

import toml

from .exceptions import CacheConfigurationError
from .ordering import Order, resolve_order
from .utils.logging import setup_logging

logger: logging.Logger = logging.getLogger(name=__name__)

# Default configuration content
DEFAULT_CONFIG = """[cache]
# Maximum number of values the cache holds before evicting the oldest
capacity = 10
# Ordering used for high/low tracking (ascending or descending)
order = "ascending"
# Keep a sorted index to report the extrema of the values currently held
track_resident = false

[values]
# How input tokens are parsed (int, float or str)
type = "int"
"""


def ordered_float(token: str) -> float:
    """Parse a float, rejecting NaN since it has no place in an ordering."""
    value = float(token)
    if math.isnan(value):
        raise ValueError(f"NaN cannot be ordered: {token!r}")
    return value


VALUE_TYPES: dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": ordered_float,
    "str": str,
}


class Configuration:
    """A class to handle configuration values."""

    def __init__(self, exec_args=None) -> None:
        """Initialize the configuration.

        Args:
            exec_args: Command line arguments
        """
        if exec_args is None:
            arguments: list[str] = sys.argv[1:]
        else:
            arguments = exec_args

        # Use argparse to add arguments
        arg_parser = argparse.ArgumentParser(
            description="Feed values through a bounded, insertion-ordered cache."
        )
        config_file_location: Path = Path.home() / ".boundcache.toml"
        arg_parser.add_argument(
            "values",
            nargs="*",
            help="Values to insert, oldest first (read from stdin when omitted)",
        )
        arg_parser.add_argument(
            "--config",
            dest="config",
            help="Path to the config file",
            default=config_file_location,
        )
        arg_parser.add_argument(
            "--create-config",
            dest="create_config",
            help="Create a default configuration file at the specified path",
            metavar="PATH",
        )
        arg_parser.add_argument(
            "--version",
            action="store_true",
            dest="version",
            help="Show version and exit",
            default=False,
        )
        arg_parser.add_argument(
            "--debug",
            action="store_true",
            dest="debug",
            help="Enable debug logging",
            default=False,
        )
        arg_parser.add_argument(
            "--info",
            action="store_true",
            dest="info",
            help="Enable info logging",
            default=False,
        )
        args: argparse.Namespace = arg_parser.parse_args(args=arguments)

        log_dir: Path = Path.home() / ".boundcache" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        # Configure the log file path
        self.log_file: Path = log_dir / "boundcache.log"

        log_level = logging.WARNING
        if args.info:
            log_level = logging.INFO
        if args.debug:
            log_level = logging.DEBUG
        setup_logging(level=log_level, log_file=self.log_file)
        logger.debug("Debug log enabled")

        # Handle version argument
        if args.version:
            try:
                version: str = metadata.version(distribution_name="boundcache")
                print(f"boundcache version: {version}")
                sys.exit(0)
            except Exception as e:
                print(f"Error getting version: {e}")
                sys.exit(1)

        # Handle create-config argument
        if args.create_config:
            self.create_default_config(config_path=args.create_config)
            print(f"Created default configuration at: {args.create_config}")
            print("Edit this file to change the cache settings.")
            sys.exit(0)

        self.values: list[str] = args.values

        # Load and validate the configuration file
        self.config: dict[str, Any] = self.load_config_file(config_file=args.config)

        cache_config = self.config["cache"]
        self.capacity: int = cache_config["capacity"]
        self.order_name: str = cache_config["order"]
        self.track_resident: bool = cache_config["track_resident"]
        self.value_type: str = self.config["values"]["type"]

        self.order: Order = resolve_order(self.order_name)
        self.factory: Callable[[str], Any] = self.resolve_value_type(self.value_type)

        # Get version
        try:
            self.version: str = metadata.version(distribution_name="boundcache")
        except Exception:
            self.version = "0.1.0"  # Default version if not installed

    @staticmethod
    def resolve_value_type(name: str) -> Callable[[str], Any]:
        """Map a value type name to the callable that parses it.

        Args:
            name: "int", "float" or "str"

        Returns:
            The parsing callable

        Raises:
            CacheConfigurationError: If the name is unknown
        """
        try:
            return VALUE_TYPES[name]
        except (KeyError, TypeError):
            raise CacheConfigurationError(
                f"Unknown value type {name!r}, expected one of: {', '.join(VALUE_TYPES)}"
            ) from None

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> dict[str, Any]:
        """Fill in defaults and check every setting.

        Args:
            config: Parsed TOML document

        Returns:
            A copy with "cache" and "values" sections holding every setting

        Raises:
            CacheConfigurationError: If a section or setting is invalid
        """
        sections: dict[str, dict[str, Any]] = {}
        for section in ("cache", "values"):
            table = config.get(section, {})
            if not isinstance(table, dict):
                raise CacheConfigurationError(f"[{section}] must be a table")
            sections[section] = dict(table)

        cache_config = sections["cache"]
        cache_config.setdefault("capacity", 10)
        cache_config.setdefault("order", "ascending")
        cache_config.setdefault("track_resident", False)
        sections["values"].setdefault("type", "int")

        capacity = cache_config["capacity"]
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise CacheConfigurationError(
                f"capacity must be a non-negative integer, got {capacity!r}"
            )
        if not isinstance(cache_config["track_resident"], bool):
            raise CacheConfigurationError(
                f"track_resident must be true or false, got {cache_config['track_resident']!r}"
            )
        resolve_order(cache_config["order"])
        cls.resolve_value_type(sections["values"]["type"])

        return {**config, **sections}

    def load_config_file(self, config_file: str) -> dict[str, Any]:
        """Load the configuration from the TOML file and validate it.

        A missing file is created from DEFAULT_CONFIG and the program exits so
        the user can review it. Unreadable or invalid files exit with status 1.

        Args:
            config_file: Path to the config file

        Returns:
            Validated configuration dictionary
        """
        config_path = Path(config_file)

        if not config_path.exists():
            print(f"Config file {config_file} not found. Creating with default settings.")
            self.create_default_config(config_path=config_file)
            print(f"Created {config_file} with default settings. Review it and run again.")
            sys.exit(1)

        try:
            return self.validate_config(toml.loads(s=config_path.read_text()))
        except (OSError, toml.TomlDecodeError) as err:
            logger.error(f"Error reading configuration file {config_file}: {err}")
            print(f"Error reading configuration file: {err}")
            sys.exit(1)
        except CacheConfigurationError as err:
            logger.error(f"Error reading configuration: {err}")
            print(f"Error reading configuration: {err}")
            sys.exit(1)

    def create_default_config(self, config_path: str) -> None:
        """Create a default configuration file at the specified path.

        Missing parent directories are created.

        Args:
            config_path: Path where the configuration file should be created
        """
        path = Path(config_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(data=DEFAULT_CONFIG)
        except OSError as e:
            logger.error(f"Error creating config file {path}: {e}")
            print(f"Error creating config file: {e}")
            sys.exit(1)
