from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One search result as returned by a hit source.

    This is the unified format every source maps its raw results to.

    Attributes:
        hash: Content hash (ed2k hash as hex text).
        size: File size in bytes.
        name: Display name of the file. May be empty.
        sources: Number of peers/sources that announced the content.
        extra: Opaque provider-specific fields, passed through unchanged.
    """

    hash: str
    size: int
    name: str = ""
    sources: int = 0
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy of the passthrough fields.
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
