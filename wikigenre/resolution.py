"""Concurrent resolution of query batches with per-key deduplication."""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Sequence, Tuple

from .dataclasses import BatchResult, Query, QueryRecord, ResolutionError
from .errors import NoGenresFound, WikigenreError

logger = logging.getLogger(__name__)

# Resolves (artist, album) to genres, raising WikigenreError on failure
Lookup = Callable[[str, str], Awaitable[List[str]]]

_IN_PROGRESS = object()


class ResolutionTable:
    """Per-batch map from query key to resolved genres.

    All access goes through atomic operations guarded by one lock; the lock
    is never held while a lookup is running.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._entries: Dict[Tuple[str, str], object] = {}
        self._errors: List[ResolutionError] = []
        self._not_found: List[str] = []

    async def claim(self, record: QueryRecord) -> bool:
        """Mark the record's key as in progress.

        Returns False if the key is already in progress or done, in which
        case the caller must not look it up again.
        """
        async with self._lock:
            if record.key in self._entries:
                return False
            self._entries[record.key] = _IN_PROGRESS
            return True

    async def complete(self, record: QueryRecord, genres: List[str]) -> None:
        async with self._lock:
            self._entries[record.key] = list(genres)

    async def add_error(self, raw_key: str, error: Exception) -> None:
        async with self._lock:
            self._errors.append(ResolutionError(raw_key, error))

    async def add_not_found(self, raw_key: str) -> None:
        async with self._lock:
            self._not_found.append(raw_key)

    def genres_for(self, query: Query) -> List[str]:
        if not query.is_valid:
            return []
        entry = self._entries.get(query.key)
        if entry is None or entry is _IN_PROGRESS:
            return []
        return list(entry)

    def to_result(self, queries: Sequence[Query]) -> BatchResult:
        """Project resolved genres back onto input order."""
        return BatchResult(
            genres=[self.genres_for(query) for query in queries],
            errors=list(self._errors),
            not_found=list(self._not_found),
        )


async def _resolve_one(table: ResolutionTable, query: Query, lookup: Lookup) -> None:
    if not query.is_valid:
        return

    if not await table.claim(query):
        logger.debug(f"Already resolving {query.raw_key}, skipping duplicate")
        return

    genres: List[str] = []
    try:
        genres = await lookup(query.artist, query.album) or []
    except NoGenresFound:
        await table.add_not_found(query.raw_key)
    except WikigenreError as e:
        await table.add_error(query.raw_key, e)

    await table.complete(query, genres)


async def resolve_batch(queries: Sequence[Query], lookup: Lookup) -> BatchResult:
    """Resolve every query concurrently and return genres in input order.

    One task is started per query, duplicates included; only the first task
    to claim a key performs the lookup. Failures are collected per unique
    key and never abort the batch.
    """
    table = ResolutionTable()
    await asyncio.gather(*(_resolve_one(table, query, lookup) for query in queries))
    return table.to_result(queries)
