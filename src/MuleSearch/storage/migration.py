"""Versioned schema of the known-hits history database.

``PRAGMA user_version`` holds the number of the last applied migration. A
pending migration runs in one transaction together with its version bump,
so a failing statement leaves both the tables and the version untouched.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from MuleSearch.utils.log import log

# KnownHitStore.track needs INSERT ... ON CONFLICT DO UPDATE.
UPSERT_SQLITE_VERSION = (3, 24, 0)


@dataclass(frozen=True)
class Migration:
    """One schema step.

    Attributes:
        version: Position in ``MIGRATIONS``, counting from 1.
        description: Logged when the step is applied.
        statements: SQL statements, executed in order.
    """

    version: int
    description: str
    statements: tuple[str, ...]


# Append new steps at the end; released steps are never edited.
MIGRATIONS: list[Migration] = [
    Migration(
        version=1,
        description="known_hits table",
        statements=(
            """
            CREATE TABLE known_hits (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              hash TEXT NOT NULL,
              size INTEGER NOT NULL,
              name TEXT NOT NULL DEFAULT '',
              sources INTEGER NOT NULL DEFAULT 0,
              first_seen_at INTEGER NOT NULL DEFAULT (CAST(strftime('%s','now') AS INTEGER)),
              last_seen_at INTEGER NOT NULL DEFAULT (CAST(strftime('%s','now') AS INTEGER)),
              UNIQUE(hash, size, name)
            )
            """,
            "CREATE INDEX idx_known_last_seen ON known_hits(last_seen_at DESC)",
        ),
    ),
]


def schema_version(conn: sqlite3.Connection) -> int:
    """Return the applied migration number, 0 for a new database."""
    return conn.execute("PRAGMA user_version").fetchone()[0]


def run_migrations(conn: sqlite3.Connection) -> None:
    """Bring the database behind ``conn`` up to the latest schema.

    Raises:
        RuntimeError: If the linked SQLite library has no upsert support.
        ValueError: If ``MIGRATIONS`` is not numbered 1, 2, 3, ...
        sqlite3.Error: If a statement fails; that migration is rolled back.
    """
    if sqlite3.sqlite_version_info < UPSERT_SQLITE_VERSION:
        raise RuntimeError(f"SQLite >= 3.24.0 is required (found {sqlite3.sqlite_version})")

    numbers = [m.version for m in MIGRATIONS]
    if numbers != list(range(1, len(numbers) + 1)):
        raise ValueError(f"MIGRATIONS version gap: expected 1..{len(numbers)} in order, got {numbers}")

    current = schema_version(conn)
    if current > len(MIGRATIONS):
        log.warning("Database schema v%d is newer than the latest known v%d", current, len(MIGRATIONS))
        return

    for migration in MIGRATIONS[current:]:
        _apply(conn, migration)
        log.info("Applied schema v%d: %s", migration.version, migration.description)


def _apply(conn: sqlite3.Connection, migration: Migration) -> None:
    conn.execute("BEGIN")
    try:
        for statement in migration.statements:
            conn.execute(statement)
        conn.execute(f"PRAGMA user_version = {int(migration.version)}")
    except sqlite3.Error:
        conn.execute("ROLLBACK")
        raise
    conn.execute("COMMIT")
