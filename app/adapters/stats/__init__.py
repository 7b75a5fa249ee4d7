"""Stats API adapter layer - abstracts over the upstream HTTP transport."""

from app.adapters.stats.base import AbstractStatsClient
from app.adapters.stats.factory import create_stats_client
from app.adapters.stats.http_client import HttpStatsClient

__all__ = [
    "AbstractStatsClient",
    "HttpStatsClient",
    "create_stats_client",
]
