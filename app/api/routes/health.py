from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_stats_service
from app.services.stats_service import StatsService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(
    service: Annotated[StatsService, Depends(get_stats_service)],
) -> dict:
    """Liveness check that also reports cache counters (never cached values)."""

    return {"status": "ok", "cache": service.cache.stats()}
