"""Output renderers for command results.

Provides the OutputWriter abstraction, console and JSON implementations,
and a factory that instantiates writers from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from MuleSearch.renderers.base import MultiOutputWriter, OutputWriter
from MuleSearch.renderers.console import ConsoleOutputWriter, render_text
from MuleSearch.renderers.json import JsonFileWriter, render_json

if TYPE_CHECKING:
    from MuleSearch.config import AppConfig


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Raises:
        ValueError: If no writer is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
