"""Base classes for output writers.

Provides abstraction for writing search results to console or files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from MuleSearch.core.models import SearchHit


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_search_result(self, hits: Sequence[SearchHit], query: str) -> None:
        """Write results of a single search.

        Args:
            hits: Aggregated hits to display.
            query: The query that produced these results.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_search_result(self, hits: Sequence[SearchHit], query: str) -> None:
        for writer in self.writers:
            writer.write_search_result(hits, query)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
