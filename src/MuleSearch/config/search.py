"""Search domain configuration: sources and pipeline behavior."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MuleSearch.config.common import (
    expect_bool,
    expect_int,
    expect_names,
    expect_optional_str,
    expect_str,
    read_section,
)
from MuleSearch.sources.registry import supported_source_names

_ALLOWED_SOURCES = frozenset(supported_source_names())


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search pipeline settings."""

    sources: tuple[str, ...]
    max_workers: int
    sanitize_names: bool
    extension: str | None


@dataclass(frozen=True, slots=True)
class DumpConfig:
    """Settings of the offline ``dump`` source."""

    path: str


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or a source is unknown.
    """
    section = read_section(raw, "search", required=True)
    extension = expect_optional_str(section.get("extension", None), section.key("extension"))
    return SearchConfig(
        sources=_parse_sources(section.get("sources", ["known"])),
        max_workers=expect_int(section.get("max_workers", 4), section.key("max_workers")),
        sanitize_names=expect_bool(section.get("sanitize_names", True), section.key("sanitize_names")),
        extension=(extension.strip().lstrip(".") or None) if extension else None,
    )


def load_dump(raw: Mapping[str, Any]) -> DumpConfig:
    """Load the optional ``dump`` section."""
    section = read_section(raw, "dump", required=False)
    return DumpConfig(path=expect_str(section.get("path", ""), section.key("path")))


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if config.max_workers <= 0:
        raise ValueError("search.max_workers must be positive")
    if not config.sources:
        raise ValueError("search.sources must include at least one source")


def _parse_sources(value: Any) -> tuple[str, ...]:
    """Parse and normalize configured source names.

    Returns:
        Normalized, unique source names in configured order.

    Raises:
        TypeError: If value is not a string list.
        ValueError: If list is empty after normalization or contains unknown sources.
    """
    normalized: list[str] = []
    seen: set[str] = set()
    for source in expect_names(value, "search.sources"):
        if source not in _ALLOWED_SOURCES:
            raise ValueError(f"search.sources has unknown source: {source}")
        if source in seen:
            continue
        seen.add(source)
        normalized.append(source)

    if not normalized:
        raise ValueError("search.sources must include at least one source")

    return tuple(normalized)
