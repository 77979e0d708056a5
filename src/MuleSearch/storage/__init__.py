"""Storage layer for MuleSearch.

Provides the shared SQLite connection, schema migrations and the
known-hits history store.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from MuleSearch.storage.db import DatabaseManager
from MuleSearch.storage.known import KnownHitStore
from MuleSearch.storage.migration import run_migrations, schema_version
from MuleSearch.utils.log import log

if TYPE_CHECKING:
    from MuleSearch.config import AppConfig


def create_storage(config: AppConfig) -> tuple[DatabaseManager | None, KnownHitStore | None]:
    """Create the database manager and known-hits store.

    Args:
        config: Application configuration containing storage settings.

    Returns:
        Tuple of (db_manager, known_store); both are None when storage is
        disabled.
    """
    if not config.storage.enabled:
        return None, None

    db_path = Path(config.storage.db_path)
    db_manager = DatabaseManager(db_path)
    log.info("History storage enabled: %s", db_path)
    return db_manager, KnownHitStore(db_manager)


__all__ = [
    "DatabaseManager",
    "KnownHitStore",
    "run_migrations",
    "schema_version",
    "create_storage",
]
