"""Merge duplicate hits reported by several sources."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from MuleSearch.core.models import SearchHit


def aggregate_hits(hits: Iterable[SearchHit]) -> list[SearchHit]:
    """Merge hits that describe the same content.

    Hits are grouped by content key (see ``hash_group_key``). Every hit of a
    group is given the summed source count of the whole group, then only the
    first hit of each distinct name is kept. Groups appear in first-seen
    order, and so do the names inside a group.

    Args:
        hits: Raw hits from all sources, in source order.

    Returns:
        A new list; the input hits are left untouched.
    """
    out: list[SearchHit] = []
    for members in group_by_content(hits).values():
        summed = total_sources(members)
        seen_names: set[str] = set()
        for hit in members:
            if hit.name in seen_names:
                continue
            seen_names.add(hit.name)
            out.append(replace(hit, sources=summed))
    return out


def group_by_content(hits: Iterable[SearchHit]) -> dict[str, list[SearchHit]]:
    """Partition hits by content key, preserving first-appearance order."""
    groups: dict[str, list[SearchHit]] = {}
    for hit in hits:
        groups.setdefault(hash_group_key(hit), []).append(hit)
    return groups


def hash_group_key(hit: SearchHit) -> str:
    """Build the content key of a hit.

    The key is the hash text immediately followed by the decimal size, so
    ``("12", 3)`` and ``("1", 23)`` share a key.
    """
    return f"{hit.hash}{hit.size}"


def total_sources(hits: Sequence[SearchHit]) -> int:
    """Sum the source counts of ``hits``."""
    return sum(hit.sources for hit in hits)


def with_group_sources(hits: Iterable[SearchHit], groups_from: Iterable[SearchHit]) -> list[SearchHit]:
    """Give each of ``hits`` the summed source count of its content group.

    Groups are formed over ``groups_from``; a hit whose key is absent there
    keeps its own count.
    """
    totals = {key: total_sources(members) for key, members in group_by_content(groups_from).items()}
    return [replace(hit, sources=totals.get(hash_group_key(hit), hit.sources)) for hit in hits]
