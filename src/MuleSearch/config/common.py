"""Shared helpers for reading and type-checking config sections.

Every error message names the dotted key path (``search.max_workers``) so a
bad YAML file can be fixed without reading code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Section:
    """One top-level config mapping together with its name."""

    name: str
    values: Mapping[str, Any]

    def key(self, field: str) -> str:
        return f"{self.name}.{field}"

    def require(self, field: str) -> Any:
        if field not in self.values:
            raise ValueError(f"Missing required config: {self.key(field)}")
        return self.values[field]

    def get(self, field: str, default: Any) -> Any:
        return self.values.get(field, default)


def read_section(raw: Mapping[str, Any], name: str, *, required: bool) -> Section:
    """Pick section ``name`` out of the root mapping.

    An optional section that is absent (or null in YAML) reads as empty.

    Raises:
        ValueError: If a required section is missing.
        TypeError: If the section is not a mapping.
    """
    values = raw.get(name)
    if values is None:
        if required:
            raise ValueError(f"Missing required config: {name}")
        return Section(name, {})
    if not isinstance(values, Mapping):
        raise TypeError(f"{name} must be an object")
    return Section(name, values)


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_optional_str(value: Any, config_key: str) -> str | None:
    return None if value is None else expect_str(value, config_key)


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Accept a YAML integer; ``true``/``false`` are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_names(value: Any, config_key: str) -> list[str]:
    """Read a list of identifiers such as source or format names.

    Items are stripped and lowercased; blank items are dropped.

    Raises:
        TypeError: If ``value`` is not a list of strings.
    """
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    names: list[str] = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
        if item.strip():
            names.append(item.strip().lower())
    return names
