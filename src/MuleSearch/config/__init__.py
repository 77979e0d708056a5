"""Public configuration API for MuleSearch."""

from __future__ import annotations

from MuleSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from MuleSearch.config.output import OutputConfig
from MuleSearch.config.runtime import RuntimeConfig
from MuleSearch.config.search import DumpConfig, SearchConfig
from MuleSearch.config.storage import StorageConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "SearchConfig",
    "DumpConfig",
    "StorageConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "check_cross_domain",
]
