"""Fixed-rate gate separating the simulation cadence from the frame rate."""

from __future__ import annotations

import time
from collections.abc import Callable


class FixedRateGate:
    """Lets at most one tick through per period of wall-clock time.

    The frame loop calls :meth:`ready` every frame; it returns ``True``
    once a full period has elapsed since the last accepted tick. When the
    loop falls more than a period behind, the schedule is re-based on the
    current time rather than releasing a burst of catch-up ticks.
    """

    def __init__(
        self,
        rate_hz: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rate_hz <= 0:
            raise ValueError("rate_hz must be positive.")
        self.period = 1.0 / rate_hz
        self._clock = clock
        self._deadline = clock() + self.period

    def ready(self) -> bool:
        """Return True if a tick is due, consuming it."""
        now = self._clock()
        if now < self._deadline:
            return False
        self._deadline += self.period
        if self._deadline <= now:
            self._deadline = now + self.period
        return True

    def reset(self) -> None:
        """Restart the schedule from the current time."""
        self._deadline = self._clock() + self.period
