"""Conversion between raw hit records and ``SearchHit``."""

from __future__ import annotations

from typing import Any, Mapping

from MuleSearch.core.models import SearchHit

_CORE_KEYS = ("hash", "size", "name", "sources")


def parse_hit_record(record: Any, record_key: str = "hit") -> SearchHit:
    """Parse one raw record into a SearchHit.

    Args:
        record: Mapping with ``hash`` and ``size``, optional ``name`` and
            ``sources``; every other key is kept in ``extra``.
        record_key: Location of the record, used in error messages.

    Returns:
        Parsed hit.

    Raises:
        TypeError: If the record or one of its core fields has the wrong type.
        ValueError: If ``hash`` or ``size`` is missing or negative.
    """
    if not isinstance(record, Mapping):
        raise TypeError(f"{record_key} must be an object")
    for key in ("hash", "size"):
        if key not in record:
            raise ValueError(f"{record_key} is missing required field: {key}")

    hash_ = record["hash"]
    if not isinstance(hash_, str):
        raise TypeError(f"{record_key}.hash must be a string")
    size = _expect_count(record["size"], f"{record_key}.size")

    name = record.get("name")
    if name is None:
        name = ""
    elif not isinstance(name, str):
        raise TypeError(f"{record_key}.name must be a string")

    sources = record.get("sources")
    sources = 0 if sources is None else _expect_count(sources, f"{record_key}.sources")

    extra = {k: v for k, v in record.items() if k not in _CORE_KEYS}
    return SearchHit(hash=hash_, size=size, name=name, sources=sources, extra=extra)


def hit_to_record(hit: SearchHit) -> dict[str, Any]:
    """Flatten a hit back into a JSON-serializable record."""
    record: dict[str, Any] = {
        "hash": hit.hash,
        "size": hit.size,
        "name": hit.name,
        "sources": hit.sources,
    }
    for key, value in hit.extra.items():
        record.setdefault(key, value)
    return record


def _expect_count(value: Any, record_key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{record_key} must be an integer")
    if value < 0:
        raise ValueError(f"{record_key} must not be negative")
    return value
