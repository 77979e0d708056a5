"""SQLite database utilities."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from MuleSearch.storage.migration import run_migrations


class DatabaseManager:
    """Shared database connection manager.

    Only one connection is created per process. Opening a manager applies
    pending schema migrations. Supports the context manager protocol for
    automatic connection cleanup.
    """

    _instance = None

    def __new__(cls, db_path: Path):
        """Create or return the existing DatabaseManager instance.

        Args:
            db_path: Absolute path or project-relative path to database file.

        Returns:
            DatabaseManager singleton instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.db_path = db_path
            cls._instance.conn = ensure_db(db_path)
            run_migrations(cls._instance.conn)
        return cls._instance

    def get_connection(self) -> sqlite3.Connection:
        """Return the shared database connection."""
        return self.conn

    def close(self) -> None:
        """Close the connection and reset the singleton.

        A later ``DatabaseManager(path)`` opens a fresh connection, possibly
        to a different file.
        """
        if getattr(self, "conn", None):
            self.conn.close()
            self.conn = None
        type(self)._instance = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def ensure_db(db_path: Path) -> sqlite3.Connection:
    """Ensure the database file's directory exists and return a connection.

    The connection may be used from worker threads of the search pipeline,
    so same-thread checking is disabled.

    Args:
        db_path: Absolute path or project-relative path to database file.

    Returns:
        SQLite connection.

    Raises:
        OSError: If directory creation fails.
        sqlite3.Error: If database connection fails.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(str(db_path), check_same_thread=False)
