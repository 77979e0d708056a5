"""Command implementations for MuleSearch CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from MuleSearch.config import AppConfig
from MuleSearch.core.query import compile_query
from MuleSearch.renderers import OutputWriter
from MuleSearch.services.search import HitSearchService
from MuleSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one search through the pipeline and hand results to the writer."""

    config: AppConfig
    search_service: HitSearchService
    output_writer: OutputWriter

    def execute(self, query: str, extension: str | None = None) -> int:
        """Execute the search.

        Args:
            query: Search expression typed by the user.
            extension: Extension filter; falls back to ``search.extension``.

        Returns:
            Number of aggregated hits.
        """
        extension = extension or self.config.search.extension
        log.debug("Running search query=%r extension=%s sources=%s", query, extension, self.config.search.sources)

        hits = self.search_service.search(query, extension=extension)
        self.output_writer.write_search_result(hits, query)
        return len(hits)


def filter_names(query: str, names: Iterable[str]) -> Iterator[str]:
    """Yield the names that satisfy ``query``, in input order."""
    predicate = compile_query(query)
    for name in names:
        if predicate(name):
            yield name
