"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from MuleSearch.config.output import OutputConfig, check_output, load_output
from MuleSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from MuleSearch.config.search import DumpConfig, SearchConfig, check_search, load_dump, load_search
from MuleSearch.config.storage import StorageConfig, check_storage, load_storage

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    search: SearchConfig
    dump: DumpConfig
    storage: StorageConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    search = load_search(raw)
    dump = load_dump(raw)
    storage = load_storage(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_search(search)
    check_storage(storage)
    check_output(output)

    config = AppConfig(
        runtime=runtime,
        search=search,
        dump=dump,
        storage=storage,
        output=output,
    )
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load config by deep-merging an override file onto the defaults."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def check_cross_domain(config: AppConfig) -> None:
    """Validate constraints spanning several sections."""
    if "known" in config.search.sources and not config.storage.enabled:
        raise ValueError("search.sources includes 'known' which requires storage.enabled=true")
    if "dump" in config.search.sources and not config.dump.path.strip():
        raise ValueError("search.sources includes 'dump' which requires dump.path")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
