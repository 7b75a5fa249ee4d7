from abc import ABC, abstractmethod
from typing import Any


class AbstractStatsClient(ABC):
    """Interface for clients that fetch raw player stats from upstream."""

    @abstractmethod
    async def fetch_player_stats(self, player_id: str) -> dict[str, Any]:
        """Fetch the raw stats object for one player.

        Args:
            player_id: Lookup key, embedded in the request target.

        Returns:
            dict[str, Any]: Decoded JSON object returned by the API.

        Raises:
            RuntimeError: If the call fails, returns a non-success status, or
                the body is not a JSON object.
        """
        ...

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""
        return None
