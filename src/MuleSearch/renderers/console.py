"""Console text output renderers.

Renders a list of `SearchHit` into human-friendly text.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from MuleSearch.core.models import SearchHit
from MuleSearch.renderers.base import OutputWriter
from MuleSearch.utils.log import log

_SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def format_size(size: int) -> str:
    """Format a byte count with a binary unit, e.g. ``700.0 MiB``."""
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in _SIZE_UNITS[1:-1]:
        value /= 1024
        if value < 1024:
            return f"{value:.1f} {unit}"
    return f"{value / 1024:.1f} {_SIZE_UNITS[-1]}"


def render_text(hits: Iterable[SearchHit]) -> str:
    """Render hits into a human-readable text block.

    Args:
        hits: Iterable of hits.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, hit in enumerate(hits, start=1):
        lines.append(f"{idx}. {hit.name or '-'}")
        lines.append(f"   Size: {format_size(hit.size)}  Sources: {hit.sources}")
        lines.append(f"   Hash: {hit.hash}")
        lines.append("")
    if not lines:
        return "No results\n"
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_search_result(self, hits: Sequence[SearchHit], query: str) -> None:
        log.info("Results for '%s':", query)
        for line in render_text(hits).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
