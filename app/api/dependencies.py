"""Process-wide wiring of the stats service for FastAPI routes.

The cache and rate gate must be shared across requests, so one service
instance is built lazily and kept in-module. Tests replace it through
``app.dependency_overrides[get_stats_service]``.
"""

from __future__ import annotations

import logging

from app.adapters.stats.factory import create_stats_client
from app.core.config import StatsApiSettings, settings
from app.services.stats_service import StatsService
from app.utils.rate_gate import RateGate
from app.utils.stats_cache import StatsCache

logger = logging.getLogger(__name__)


_service: StatsService | None = None


def build_stats_service(stats_settings: StatsApiSettings | None = None) -> StatsService:
    """Assemble client, cache and gate from settings.

    Args:
        stats_settings: Optional override; defaults to the global settings.

    Returns:
        StatsService: A new, independent service instance.
    """

    cfg = stats_settings or settings.stats_api
    return StatsService(
        client=create_stats_client(cfg),
        cache=StatsCache(ttl_seconds=cfg.cache_ttl_seconds),
        gate=RateGate(min_interval=cfg.min_interval_seconds),
    )


def get_stats_service() -> StatsService:
    """Return the process-wide stats service, building it on first use."""

    global _service

    if _service is None:
        _service = build_stats_service()
        logger.info(
            "stats_service.created",
            extra={
                "cache_ttl_s": _service.cache.ttl_seconds,
                "min_interval_s": _service.gate.min_interval,
            },
        )

    return _service


async def close_stats_service() -> None:
    """Close the shared service (if any) and forget it."""

    global _service

    if _service is not None:
        await _service.aclose()
        _service = None
