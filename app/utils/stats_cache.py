"""In-memory TTL cache for player stats lookups.

Entries expire lazily: a stale entry is reported as a miss on read and left
in place until the next ``put`` for the same key overwrites it. Nothing sweeps
in the background. Callers that want bounded memory can call
``purge_expired()`` explicitly.

There is no capacity bound or LRU policy. Key cardinality is driven by human
request volume, which keeps the store small; a high-cardinality caller would
need a bounded cache instead.

The cache is not thread-safe. It is meant to be used from a single event
loop, where reads and writes are never preempted mid-operation.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from app.schemas.stats import PlayerStats

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Cached value with its absolute expiry on the cache clock."""

    value: PlayerStats
    expires_at: float


class StatsCache:
    """TTL keyed store mapping a lookup key to its last fetched stats.

    Attributes:
        ttl_seconds: Time-to-live applied to every entry at write time.
    """

    def __init__(
        self,
        ttl_seconds: float = 60.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")

        self._ttl = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return (
            f"StatsCache(ttl_seconds={self._ttl}, size={len(self._store)}, "
            f"hits={self._hits}, misses={self._misses})"
        )

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> PlayerStats | None:
        """Return the cached value if present and not yet expired.

        An entry is fresh strictly before ``expires_at``; at or after that
        instant it is a miss. Expired entries are not removed here.

        Args:
            key: Lookup key.

        Returns:
            The exact object last stored for ``key``, or None.
        """

        entry = self._store.get(key)
        if entry is None:
            self._misses += 1
            logger.debug("cache.miss", extra={"player_id": key, "reason": "not_found"})
            return None

        if self._clock() >= entry.expires_at:
            self._misses += 1
            logger.debug("cache.miss", extra={"player_id": key, "reason": "expired"})
            return None

        self._hits += 1
        logger.debug("cache.hit", extra={"player_id": key})
        return entry.value

    def put(self, key: str, value: PlayerStats) -> None:
        """Store ``value`` under ``key``, replacing any previous entry.

        Args:
            key: Lookup key.
            value: Freshly fetched stats.
        """

        self._store[key] = CacheEntry(value=value, expires_at=self._clock() + self._ttl)
        logger.debug(
            "cache.put",
            extra={"player_id": key, "size": len(self._store), "ttl_s": self._ttl},
        )

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""

        now = self._clock()
        expired = [k for k, entry in self._store.items() if entry.expires_at <= now]
        for key in expired:
            del self._store[key]
        if expired:
            logger.debug("cache.purge", extra={"removed": len(expired), "size": len(self._store)})
        return len(expired)

    def clear(self) -> None:
        """Remove all cached entries and reset counters."""

        self._store.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> dict[str, int | float]:
        """Return lightweight cache metrics without exposing values."""

        return {
            "ttl_seconds": self._ttl,
            "entries": len(self._store),
            "hits": self._hits,
            "misses": self._misses,
        }
