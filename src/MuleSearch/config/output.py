"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MuleSearch.config.common import expect_names, expect_str, read_section

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = read_section(raw, "output", required=False)
    return OutputConfig(
        base_dir=expect_str(section.get("base_dir", "output"), section.key("base_dir")),
        formats=tuple(expect_names(section.get("formats", ["console"]), section.key("formats"))),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If formats are empty or unknown.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = sorted(set(config.formats) - _ALLOWED_FORMATS)
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {unknown}")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
