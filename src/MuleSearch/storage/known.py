"""History store of hits previously seen on the network."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from MuleSearch.core.models import SearchHit
from MuleSearch.core.query import compile_query, has_extension
from MuleSearch.utils.log import log

if TYPE_CHECKING:
    from MuleSearch.storage.db import DatabaseManager


class KnownHitStore:
    """SQLite-backed store of known hits, keyed by ``(hash, size, name)``."""

    def __init__(self, db_manager: DatabaseManager):
        """Initialize the store.

        Args:
            db_manager: Shared database manager instance.
        """
        log.debug("Initializing KnownHitStore")
        self.conn = db_manager.get_connection()

    def track(self, hits: Sequence[SearchHit]) -> None:
        """Record hits, refreshing source count and last-seen time of known ones.

        Args:
            hits: Hits to remember.
        """
        if not hits:
            return

        self.conn.executemany(
            """
            INSERT INTO known_hits (hash, size, name, sources)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(hash, size, name) DO UPDATE SET
                sources = excluded.sources,
                last_seen_at = CAST(strftime('%s','now') AS INTEGER)
            """,
            [(hit.hash, hit.size, hit.name, hit.sources) for hit in hits],
        )
        self.conn.commit()
        log.debug("Tracked %d known hits", len(hits))

    def search(self, query: str, *, extension: str | None = None) -> list[SearchHit]:
        """Return known hits whose name satisfies ``query``.

        Args:
            query: Search expression in the MuleSearch query language.
            extension: Optional file extension filter.

        Returns:
            Matching hits, most recently seen first.
        """
        predicate = compile_query(query)
        cursor = self.conn.execute(
            """
            SELECT hash, size, name, sources, first_seen_at, last_seen_at
            FROM known_hits
            ORDER BY last_seen_at DESC, id ASC
            """
        )
        hits: list[SearchHit] = []
        for hash_, size, name, sources, first_seen_at, last_seen_at in cursor:
            if not has_extension(name, extension) or not predicate(name):
                continue
            hits.append(
                SearchHit(
                    hash=hash_,
                    size=size,
                    name=name,
                    sources=sources,
                    extra={"first_seen_at": first_seen_at, "last_seen_at": last_seen_at},
                )
            )
        log.debug("Known hits matching %r: %d", query, len(hits))
        return hits

    def count(self) -> int:
        """Return the number of stored hits."""
        row = self.conn.execute("SELECT COUNT(*) FROM known_hits").fetchone()
        return int(row[0]) if row else 0
