"""Player stats service: the fetch-cache-throttle core.

A lookup is served from the TTL cache when fresh. Otherwise the caller waits
its turn at the process-wide rate gate, a single upstream call is made, and a
successful result is cached. Failures are reported uniformly as
``UpstreamError`` and never touch the cache.

Known limitations:
- No single-flight: concurrent misses for the same key each reach upstream,
  and the last successful write wins.
- One error kind: callers cannot tell a network failure from an HTTP error
  status or a malformed body.
"""

import asyncio
import logging

from app.adapters.stats.base import AbstractStatsClient
from app.core.errors import UpstreamError, ValidationAppError
from app.schemas.stats import PlayerStats
from app.utils.rate_gate import RateGate
from app.utils.stats_cache import StatsCache

logger = logging.getLogger(__name__)


class StatsService:
    """Fetches player stats while shielding the upstream API.

    Attributes:
        client: Adapter issuing the outbound HTTP call.
        cache: TTL cache keyed by player ID.
        gate: Process-wide minimum-interval throttle.
    """

    def __init__(
        self,
        client: AbstractStatsClient,
        cache: StatsCache,
        gate: RateGate,
    ) -> None:
        self.client = client
        self.cache = cache
        self.gate = gate
        # Fetch tasks outlive cancelled callers; hold references until done
        self._pending: set[asyncio.Task[PlayerStats]] = set()

    async def fetch_stats(self, player_id: str) -> PlayerStats:
        """Return stats for ``player_id``, from cache when fresh.

        If the awaiting caller is cancelled, the outbound call and cache write
        still run to completion in the background.

        Args:
            player_id: Non-empty lookup key.

        Returns:
            PlayerStats: The cached object on a hit, else the fresh result.

        Raises:
            ValidationAppError: If player_id is empty or blank.
            UpstreamError: If the upstream call fails for any reason.
        """
        if not player_id or not player_id.strip():
            raise ValidationAppError(
                code="invalid_player_id",
                message="Player ID must be a non-empty string.",
            )

        cached = self.cache.get(player_id)
        if cached is not None:
            return cached

        task = asyncio.create_task(self._fetch_and_store(player_id))
        self._pending.add(task)
        task.add_done_callback(self._on_fetch_done)
        return await asyncio.shield(task)

    def _on_fetch_done(self, task: asyncio.Task[PlayerStats]) -> None:
        self._pending.discard(task)
        # Failures are logged in _fetch_and_store; mark retrieved for abandoned callers
        if not task.cancelled():
            task.exception()

    async def _fetch_and_store(self, player_id: str) -> PlayerStats:
        await self.gate.await_turn()

        logger.info("stats.fetch", extra={"player_id": player_id})
        try:
            raw = await self.client.fetch_player_stats(player_id)
            stats = PlayerStats.model_validate(raw)
        except Exception as exc:
            logger.warning(
                "stats.upstream_failed",
                extra={
                    "player_id": player_id,
                    "error_type": type(exc).__name__,
                    "error_msg": str(exc),
                },
            )
            raise UpstreamError(
                code="upstream_error",
                message="Failed to fetch player stats from upstream API.",
                details={"player_id": player_id},
            ) from exc

        self.cache.put(player_id, stats)
        return stats

    async def aclose(self) -> None:
        """Wait for background fetches, then close the client."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        await self.client.aclose()
