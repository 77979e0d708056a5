"""CLI package for MuleSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from MuleSearch.cli.runner import CommandRunner
from MuleSearch.cli.ui import cli


def main() -> None:
    """Run MuleSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
