"""Tests for the display module."""

import io

from boundcache.cache import BoundedOrderedCache
from boundcache.display import print_cache, render
from boundcache.ordering import by_key


class TestRender:
    """Test cases for render."""

    def test_render(self, filled_cache: BoundedOrderedCache[int]) -> None:
        """Test that items are joined by spaces, newest first."""
        assert render(filled_cache) == "9 2 5"

    def test_render_empty(self) -> None:
        """Test rendering an empty cache."""
        assert render(BoundedOrderedCache(3)) == ""

    def test_render_uses_str(self) -> None:
        """Test that items are rendered with str()."""
        cache: BoundedOrderedCache[object] = BoundedOrderedCache(2, by_key(str))
        cache.insert("b")
        cache.insert(1.5)
        assert render(cache) == "1.5 b"


class TestPrintCache:
    """Test cases for print_cache."""

    def test_print_to_stdout(self, filled_cache: BoundedOrderedCache[int], capsys) -> None:
        """Test printing to stdout by default."""
        print_cache(filled_cache)
        captured = capsys.readouterr()
        assert captured.out == "9 2 5\n"

    def test_print_to_stream(self, filled_cache: BoundedOrderedCache[int]) -> None:
        """Test printing to a given stream."""
        out = io.StringIO()
        print_cache(filled_cache, file=out)
        assert out.getvalue() == "9 2 5\n"
