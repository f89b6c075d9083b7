"""Tests for the ordering module."""

import pytest

from boundcache.exceptions import CacheConfigurationError
from boundcache.ordering import by_key, greater_than, less_than, resolve_order


class TestPredicates:
    """Test cases for the ordering predicates."""

    def test_less_than(self) -> None:
        """Test the default ascending ordering."""
        assert less_than(1, 2)
        assert not less_than(2, 1)
        assert not less_than(2, 2)

    def test_greater_than(self) -> None:
        """Test the descending ordering."""
        assert greater_than(2, 1)
        assert not greater_than(1, 2)
        assert not greater_than(2, 2)

    def test_by_key(self) -> None:
        """Test ordering by an extracted key."""
        by_length = by_key(len)
        assert by_length("ab", "abc")
        assert not by_length("abc", "xyz")
        assert not by_length("abcd", "a")


class TestResolveOrder:
    """Test cases for resolve_order."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ascending", less_than),
            ("descending", greater_than),
            ("Descending", greater_than),
        ],
    )
    def test_known_names(self, name: str, expected) -> None:
        """Test resolving known ordering names."""
        assert resolve_order(name) is expected

    def test_unknown_name(self) -> None:
        """Test that an unknown name raises CacheConfigurationError."""
        with pytest.raises(CacheConfigurationError) as exc_info:
            resolve_order("sideways")
        assert "sideways" in str(exc_info.value)

    def test_non_string_name(self) -> None:
        """Test that a non-string name raises CacheConfigurationError."""
        with pytest.raises(CacheConfigurationError):
            resolve_order(3)  # type: ignore[arg-type]
