"""Request pacing."""

from __future__ import annotations

import time
from typing import Callable


class MinIntervalThrottler:
    """Keeps at least ``min_interval_seconds`` between consecutive requests."""

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._interval = max(0.0, float(min_interval_seconds))
        self._clock = clock or time.monotonic
        self._sleep = sleeper or time.sleep
        self._previous: float | None = None

    def wait(self) -> float:
        """Block until the next request may go out; return the seconds slept."""

        now = self._clock()
        slept = 0.0
        if self._previous is not None and self._interval > 0:
            remaining = self._interval - (now - self._previous)
            if remaining > 0:
                self._sleep(remaining)
                slept = remaining
                now = self._clock()
        self._previous = now
        return slept


__all__ = [
    "MinIntervalThrottler",
]
