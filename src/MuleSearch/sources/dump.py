"""Offline hit source backed by a JSON dump of captured results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from MuleSearch.core.models import SearchHit
from MuleSearch.core.query import compile_query, has_extension
from MuleSearch.sources.records import parse_hit_record
from MuleSearch.utils.log import log


class DumpSource:
    """Serve hits from a JSON file as if they came from the network.

    The file holds either a list of hit records, or a list of result blocks
    ``{"query": ..., "hits": [...]}`` as written by the JSON output writer.
    Names are matched against the query locally.
    """

    name = "dump"
    remote = True

    def __init__(self, path: str | Path) -> None:
        """Initialize the dump source.

        Args:
            path: Location of the JSON dump.
        """
        self.path = Path(path)
        self._cache: list[SearchHit] | None = None

    def is_available(self) -> bool:
        """Return True when the dump file exists."""
        return self.path.is_file()

    def search(self, query: str, *, extension: str | None = None) -> list[SearchHit]:
        """Return dumped hits whose name satisfies ``query``.

        Args:
            query: Search expression in the MuleSearch query language.
            extension: Optional file extension filter.

        Returns:
            Matching hits in file order.
        """
        predicate = compile_query(query)
        return [hit for hit in self._load() if has_extension(hit.name, extension) and predicate(hit.name)]

    def close(self) -> None:
        """Drop the cached file contents."""
        self._cache = None

    def _load(self) -> list[SearchHit]:
        if self._cache is None:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self._cache = load_hit_records(data, str(self.path))
            log.debug("Loaded %d hits from %s", len(self._cache), self.path)
        return self._cache


def load_hit_records(data: Any, location: str) -> list[SearchHit]:
    """Parse the decoded contents of a dump file.

    Args:
        data: Decoded JSON document.
        location: File path or other label used in error messages.

    Returns:
        Hits in document order.

    Raises:
        TypeError: If the document is not a list or holds malformed records.
        ValueError: If a record misses a required field.
    """
    if not isinstance(data, list):
        raise TypeError(f"{location} must contain a JSON list")

    hits: list[SearchHit] = []
    for idx, item in enumerate(data):
        if isinstance(item, dict) and "hits" in item:
            block = item["hits"]
            if not isinstance(block, list):
                raise TypeError(f"{location}[{idx}].hits must be a list")
            hits.extend(
                parse_hit_record(record, f"{location}[{idx}].hits[{jdx}]") for jdx, record in enumerate(block)
            )
        else:
            hits.append(parse_hit_record(item, f"{location}[{idx}]"))
    return hits
