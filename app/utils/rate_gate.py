"""Process-wide throttle for outbound calls to the stats API.

The gate enforces a minimum spacing between consecutive calls, regardless of
which player is being looked up. Callers queue in arrival order behind an
``asyncio.Lock`` held across the wait, so a burst of N simultaneous callers
is released one ``min_interval`` apart rather than all at once.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


class RateGate:
    """Strict FIFO minimum-interval gate.

    Not a token bucket: no burst allowance is accumulated while idle.
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the gate.

        Args:
            min_interval: Minimum seconds between two admitted calls.
            clock: Monotonic time source in seconds.
            sleep: Coroutine used to suspend the caller.

        Raises:
            ValueError: If min_interval is negative.
        """
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")

        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_call_at: float | None = None
        self._lock = asyncio.Lock()

    @property
    def min_interval(self) -> float:
        return self._min_interval

    @property
    def last_call_at(self) -> float | None:
        """Clock reading recorded for the most recent admitted call."""
        return self._last_call_at

    def _compute_wait(self, now: float) -> float:
        if self._last_call_at is None:
            return 0.0
        return max(0.0, self._min_interval - (now - self._last_call_at))

    async def await_turn(self) -> None:
        """Suspend until the caller may issue its outbound call.

        Records the admission time before returning, so the next waiter
        measures its interval from this call.
        """
        async with self._lock:
            wait = self._compute_wait(self._clock())
            if wait > 0:
                logger.debug("rate_gate.wait", extra={"wait_s": round(wait, 3)})
                await self._sleep(wait)
            self._last_call_at = self._clock()
