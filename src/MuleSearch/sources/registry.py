"""Source registry and builders for hit sources."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from MuleSearch.config import AppConfig
    from MuleSearch.services.search import HitSource
    from MuleSearch.storage.known import KnownHitStore

SourceBuilder = Callable[["AppConfig", "KnownHitStore | None"], "HitSource"]


def build_source(
    source_name: str,
    *,
    config: AppConfig,
    known_store: KnownHitStore | None,
) -> HitSource:
    """Build a hit source instance from its registered name.

    Args:
        source_name: Source identifier from ``search.sources``.
        config: Parsed application configuration.
        known_store: History store, required by the ``known`` source.

    Returns:
        HitSource: Initialized source implementation for the given name.

    Raises:
        ValueError: If ``source_name`` is not registered, or its
            prerequisites are not configured.
    """
    builder = _source_builders().get(source_name)
    if builder is None:
        raise ValueError(f"Unsupported source in config.search.sources: {source_name}")
    return builder(config, known_store)


def supported_source_names() -> tuple[str, ...]:
    """Return all source names that can be built by the registry.

    Returns:
        tuple[str, ...]: Source names in registry order.
    """
    return tuple(_source_builders().keys())


def _source_builders() -> dict[str, SourceBuilder]:
    return {
        "known": _build_known_source,
        "dump": _build_dump_source,
    }


def _build_known_source(config: AppConfig, known_store: KnownHitStore | None) -> HitSource:
    """Build the history source."""
    del config
    from MuleSearch.sources.known import KnownSource

    if known_store is None:
        raise ValueError("Source 'known' requires storage.enabled=true")
    return KnownSource(known_store)


def _build_dump_source(config: AppConfig, known_store: KnownHitStore | None) -> HitSource:
    """Build the JSON dump source."""
    del known_store
    from MuleSearch.sources.dump import DumpSource

    return DumpSource(config.dump.path)
