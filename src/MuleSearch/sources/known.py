"""Hit source that searches the local known-hits history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from MuleSearch.core.models import SearchHit

if TYPE_CHECKING:
    from MuleSearch.storage.known import KnownHitStore


class KnownSource:
    """Expose ``KnownHitStore.search`` through the hit source protocol."""

    name = "known"
    remote = False

    def __init__(self, store: KnownHitStore) -> None:
        self.store = store

    def search(self, query: str, *, extension: str | None = None) -> list[SearchHit]:
        return self.store.search(query, extension=extension)

    def close(self) -> None:
        # The store's connection belongs to the DatabaseManager.
        return
