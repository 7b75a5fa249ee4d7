"""Factory for creating the configured stats client."""

from app.adapters.stats.base import AbstractStatsClient
from app.adapters.stats.http_client import HttpStatsClient
from app.core.config import StatsApiSettings, settings
from app.core.errors import ValidationAppError


def create_stats_client(stats_settings: StatsApiSettings | None = None) -> AbstractStatsClient:
    """Instantiate the HTTP stats client from settings.

    Args:
        stats_settings: Optional override; defaults to the global settings.

    Returns:
        AbstractStatsClient: Configured client instance.

    Raises:
        ValidationAppError: If the base URL is not an http(s) URL.
    """
    cfg = stats_settings or settings.stats_api

    if not cfg.api_base.startswith(("http://", "https://")):
        raise ValidationAppError(
            code="stats_invalid_api_base",
            message="FF_API_BASE must be an http:// or https:// URL",
            details={"hint": "Set FF_API_BASE, e.g. https://api.example.com"},
        )

    return HttpStatsClient(
        api_base=cfg.api_base,
        api_key=cfg.api_key,
        stats_path=cfg.stats_path,
    )
