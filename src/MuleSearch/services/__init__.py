"""Search service layer for MuleSearch.

Provides the multi-source search pipeline, the hit aggregator and a factory
that wires configured sources together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from MuleSearch.services.aggregate import aggregate_hits
from MuleSearch.services.search import HitSearchService, HitSource
from MuleSearch.sources.registry import build_source

if TYPE_CHECKING:
    from MuleSearch.config import AppConfig
    from MuleSearch.storage.known import KnownHitStore


def create_search_service(
    config: AppConfig,
    known_store: KnownHitStore | None = None,
) -> HitSearchService:
    """Create a search service with configured hit sources.

    Args:
        config: Application configuration containing source settings.
        known_store: Optional history store; remote hits are tracked in it
            and it backs the ``known`` source.

    Returns:
        Configured HitSearchService instance.
    """
    sources = tuple(
        build_source(source_name, config=config, known_store=known_store) for source_name in config.search.sources
    )
    return HitSearchService(
        sources=sources,
        known_store=known_store,
        sanitize_names=config.search.sanitize_names,
        max_workers=config.search.max_workers,
    )


__all__ = [
    "HitSearchService",
    "HitSource",
    "aggregate_hits",
    "create_search_service",
]
