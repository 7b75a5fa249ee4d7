from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from app.api.dependencies import get_stats_service
from app.core.errors import UpstreamError
from app.schemas.stats import StatsPanel
from app.services.stats_panel import build_failure_message, build_stats_panel
from app.services.stats_service import StatsService

router = APIRouter(tags=["Stats"])


@router.get(
    "/stats/{player_id}",
    response_model=StatsPanel,
    responses={
        status.HTTP_502_BAD_GATEWAY: {
            "description": "Upstream stats API failed",
            "content": {"text/plain": {}},
        },
    },
)
async def get_player_stats(
    player_id: str,
    service: Annotated[StatsService, Depends(get_stats_service)],
) -> StatsPanel | PlainTextResponse:
    """Look up a player's stats and render them as a panel.

    Served from cache when fresh; otherwise throttled and fetched upstream.

    Args:
        player_id: Player ID to look up.
        service: Shared stats service.

    Returns:
        StatsPanel on success, or a plain-text failure message (HTTP 502)
        naming the requested ID when the upstream call fails.

    Raises:
        ValidationAppError: If the player ID is blank (handled globally as 400).
    """
    try:
        stats = await service.fetch_stats(player_id)
    except UpstreamError:
        return PlainTextResponse(
            build_failure_message(player_id),
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    return build_stats_panel(player_id, stats)
