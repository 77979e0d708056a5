"""Search service layer for multi-source hit aggregation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol, Sequence

from MuleSearch.core.models import SearchHit
from MuleSearch.services.aggregate import aggregate_hits, with_group_sources
from MuleSearch.utils.log import log
from MuleSearch.utils.sanitize import sanitize_filename

if TYPE_CHECKING:
    from MuleSearch.storage.known import KnownHitStore


class HitSource(Protocol):
    """Protocol for a provider of raw search hits.

    Sources may also define ``is_available() -> bool``; unavailable sources
    are skipped for the current search.
    """

    name: str
    remote: bool

    def search(self, query: str, *, extension: str | None = None) -> Sequence[SearchHit]:
        """Search hits using this source."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by source."""
        raise NotImplementedError


@dataclass(slots=True)
class HitSearchService:
    """Application service that searches hits across configured sources."""

    sources: tuple[HitSource, ...]
    known_store: KnownHitStore | None = None
    sanitize_names: bool = True
    max_workers: int = 4

    def search(self, query: str | None, *, extension: str | None = None) -> list[SearchHit]:
        """Search every available source and merge the results.

        Args:
            query: Search expression typed by the user.
            extension: Optional file extension filter passed to sources.

        Returns:
            Aggregated hits, in configured source order.

        Raises:
            RuntimeError: If no source is configured, or every queried
                source failed.
        """
        if not query:
            return []
        if not self.sources:
            raise RuntimeError("No search sources are configured")

        active = [source for source in self.sources if _is_available(source)]
        if not active:
            log.warning("No search source is available for query '%s'", query)
            return []

        results, failed_sources = self._run_sources(active, query, extension)
        if len(failed_sources) == len(active):
            raise RuntimeError(f"All search sources failed: {', '.join(failed_sources)}")

        remote_hits: list[SearchHit] = []
        all_hits: list[SearchHit] = []
        for source in active:
            hits = [self._post_process(hit) for hit in results.get(id(source), ())]
            if getattr(source, "remote", False):
                remote_hits.extend(hits)
            all_hits.extend(hits)

        aggregated = aggregate_hits(all_hits)

        if self.known_store is not None and remote_hits:
            # History keeps the source count summed across every source.
            self.known_store.track(with_group_sources(remote_hits, all_hits))

        log.info("Search '%s' finished with %d results", query, len(aggregated))
        return aggregated

    def close(self) -> None:
        """Close all sources and release external resources."""
        failed_sources: list[str] = []
        for source in self.sources:
            close_func = getattr(source, "close", None)
            if callable(close_func):
                source_name = getattr(source, "name", "unknown")
                try:
                    close_func()
                except Exception as error:  # noqa: BLE001 - close failure must be isolated
                    failed_sources.append(source_name)
                    log.warning("Search source close failed: source=%s error=%s", source_name, error)
        if failed_sources:
            log.warning("Search service close completed with failures: %s", ", ".join(failed_sources))

    def _run_sources(
        self,
        sources: Sequence[HitSource],
        query: str,
        extension: str | None,
    ) -> tuple[dict[int, Sequence[SearchHit]], list[str]]:
        """Query sources concurrently and wait for all of them.

        Returns:
            Hits keyed by ``id(source)``, and names of failed sources.
        """
        results: dict[int, Sequence[SearchHit]] = {}
        failed_sources: list[str] = []

        with ThreadPoolExecutor(max_workers=max(1, min(self.max_workers, len(sources)))) as executor:
            future_to_source = {
                executor.submit(source.search, query, extension=extension): source for source in sources
            }
            for future in as_completed(future_to_source):
                source = future_to_source[future]
                source_name = getattr(source, "name", "unknown")
                try:
                    hits = future.result()
                except Exception as error:  # noqa: BLE001 - source failure must be isolated
                    failed_sources.append(source_name)
                    log.warning("Search source failed: source=%s error=%s", source_name, error)
                    continue
                log.info("Search source completed: source=%s count=%d", source_name, len(hits))
                results[id(source)] = hits

        return results, failed_sources

    def _post_process(self, hit: SearchHit) -> SearchHit:
        if not self.sanitize_names:
            return hit
        return replace(hit, name=sanitize_filename(hit.name))


def _is_available(source: HitSource) -> bool:
    """Return the source's availability, treating sources without a check as up."""
    check = getattr(source, "is_available", None)
    if not callable(check):
        return True
    try:
        available = bool(check())
    except Exception as error:  # noqa: BLE001 - availability probe must not abort the search
        log.warning("Search source availability check failed: source=%s error=%s", source.name, error)
        return False
    if not available:
        log.debug("Search source unavailable, skipped: source=%s", source.name)
    return available
