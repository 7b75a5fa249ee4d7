"""httpx-based client for the upstream player stats API."""

from typing import Any
from urllib.parse import quote

import httpx

from app.adapters.stats.base import AbstractStatsClient


class HttpStatsClient(AbstractStatsClient):
    """Issues a single GET per lookup against ``{api_base}{stats_path}/{id}``.

    The player ID is percent-escaped as one path segment and the API key is
    sent as the ``key`` query parameter. No timeout beyond the httpx default
    is applied and nothing is retried.
    """

    def __init__(
        self,
        api_base: str,
        api_key: str = "",
        stats_path: str = "/ff/stats",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the stats client.

        Args:
            api_base: Base URL of the stats API (scheme and host).
            api_key: API key sent with every request; may be empty.
            stats_path: Fixed path segment before the player ID.
            client: Optional preconfigured AsyncClient (tests inject a
                MockTransport here). Created lazily when omitted.
        """
        self.api_base = api_base.rstrip("/")
        self.api_key = api_key
        self.stats_path = "/" + stats_path.strip("/") if stats_path.strip("/") else ""
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    def build_url(self, player_id: str) -> str:
        """Return the request URL for ``player_id`` without the query string."""
        return f"{self.api_base}{self.stats_path}/{quote(player_id, safe='')}"

    async def fetch_player_stats(self, player_id: str) -> dict[str, Any]:
        """Fetch and decode the stats object for ``player_id``.

        Raises:
            RuntimeError: On transport errors, non-2xx responses, or a body
                that is not a JSON object. The request URL is kept out of
                the message because it carries the API key.
        """
        try:
            response = await self._get_client().get(
                self.build_url(player_id),
                params={"key": self.api_key},
            )
        except httpx.HTTPError as exc:
            raise RuntimeError(f"Stats API transport error: {type(exc).__name__}") from exc

        if not response.is_success:
            raise RuntimeError(f"Stats API returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise RuntimeError("Stats API returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Stats API returned {type(payload).__name__}, expected a JSON object"
            )

        return payload

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
