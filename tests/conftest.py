"""Shared pytest fixtures for boundcache tests."""

from pathlib import Path

import pytest
import tomli_w

from boundcache import BoundedOrderedCache


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at a temporary directory so logs and configs stay local."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a TOML config file and return its path."""

    def _write(data: dict, name: str = "config.toml") -> Path:
        config_path = tmp_path / name
        config_path.write_text(tomli_w.dumps(data))
        return config_path

    return _write


@pytest.fixture
def sample_config_data():
    """Create sample configuration data."""
    return {
        "cache": {"capacity": 3, "order": "ascending", "track_resident": False},
        "values": {"type": "int"},
    }


@pytest.fixture
def filled_cache() -> BoundedOrderedCache[int]:
    """A capacity-3 cache holding 9 (newest), 2 and 5 (oldest)."""
    cache: BoundedOrderedCache[int] = BoundedOrderedCache(3)
    for value in (5, 2, 9):
        cache.insert(value)
    return cache


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test."""
    import logging

    # Get the root logger
    logger = logging.getLogger()

    # Remove all handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Reset to WARNING level
    logger.setLevel(logging.WARNING)
    logging.getLogger("boundcache").setLevel(logging.NOTSET)

    yield

    # Cleanup after test
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
