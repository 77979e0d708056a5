"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

import click

from MuleSearch.cli.commands import SearchCommand
from MuleSearch.config import AppConfig
from MuleSearch.renderers import create_output_writer
from MuleSearch.services import create_search_service
from MuleSearch.storage import create_storage
from MuleSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def configure_logging(self, action: str) -> None:
        """Install log handlers as configured for ``action``."""
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_search(self, action: str, query: str, extension: str | None = None) -> int:
        """Execute the search command with full resource management.

        Args:
            action: The CLI command name (e.g., 'search').
            query: Search expression.
            extension: Optional extension filter.

        Returns:
            Number of results.

        Raises:
            click.Abort: When the search fails.
        """
        self.configure_logging(action)
        db_manager = None
        try:
            db_manager, known_store = create_storage(self.config)
            search_service = create_search_service(self.config, known_store=known_store)
            output_writer = create_output_writer(self.config)
            command = SearchCommand(
                config=self.config,
                search_service=search_service,
                output_writer=output_writer,
            )

            try:
                count = command.execute(query, extension)
                output_writer.finalize(action)
            finally:
                search_service.close()
            return count

        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
        finally:
            if db_manager is not None:
                db_manager.close()
