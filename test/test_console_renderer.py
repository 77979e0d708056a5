"""Tests for console text rendering."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MuleSearch.core.models import SearchHit
from MuleSearch.renderers.console import format_size, render_text


class TestFormatSize(unittest.TestCase):
    def test_bytes_are_not_scaled(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(1023), "1023 B")

    def test_binary_units(self) -> None:
        self.assertEqual(format_size(1024), "1.0 KiB")
        self.assertEqual(format_size(700 * 1024 * 1024), "700.0 MiB")
        self.assertEqual(format_size(3 * 1024**3 // 2), "1.5 GiB")

    def test_largest_unit_is_not_exceeded(self) -> None:
        self.assertEqual(format_size(2048 * 1024**4), "2048.0 TiB")


class TestRenderText(unittest.TestCase):
    def test_empty_result(self) -> None:
        self.assertEqual(render_text([]), "No results\n")

    def test_hits_are_numbered(self) -> None:
        hits = [
            SearchHit(hash="h1", size=2048, name="a.avi", sources=3),
            SearchHit(hash="h2", size=10, sources=1),
        ]
        self.assertEqual(
            render_text(hits).splitlines(),
            [
                "1. a.avi",
                "   Size: 2.0 KiB  Sources: 3",
                "   Hash: h1",
                "",
                "2. -",
                "   Size: 10 B  Sources: 1",
                "   Hash: h2",
            ],
        )


if __name__ == "__main__":
    unittest.main()
