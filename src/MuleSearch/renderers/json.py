"""JSON output renderers.

Renders hits into JSON-serializable records and provides JsonFileWriter.
Files written here can be read back by the ``dump`` source.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Sequence

from MuleSearch.core.models import SearchHit
from MuleSearch.renderers.base import OutputWriter
from MuleSearch.sources.records import hit_to_record
from MuleSearch.utils.log import log


def render_json(hits: Iterable[SearchHit]) -> list[dict[str, Any]]:
    """Render hits into JSON-serializable records."""
    return [hit_to_record(hit) for hit in hits]


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []
        self.last_path: Path | None = None

    def write_search_result(self, hits: Sequence[SearchHit], query: str) -> None:
        self.all_results.append({"query": query, "hits": render_json(hits)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        self.last_path = output_path
        log.info("JSON saved to %s", output_path)
