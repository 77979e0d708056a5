"""Storage domain configuration for the known-hits history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MuleSearch.config.common import expect_bool, expect_str, read_section


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Storage configuration."""

    enabled: bool
    db_path: str


def load_storage(raw: Mapping[str, Any]) -> StorageConfig:
    """Load storage domain config from raw mapping."""
    section = read_section(raw, "storage", required=True)
    return StorageConfig(
        enabled=expect_bool(section.require("enabled"), section.key("enabled")),
        db_path=expect_str(section.get("db_path", "database/known.db"), section.key("db_path")),
    )


def check_storage(config: StorageConfig) -> None:
    """Validate storage domain constraints."""
    if config.enabled and not config.db_path.strip():
        raise ValueError("storage.db_path must not be empty")
