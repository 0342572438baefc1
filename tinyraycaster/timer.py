"""Frame pacing at roughly 60 frames per second."""

from __future__ import annotations

import time
from collections.abc import Callable

__all__ = ["FrameLimiter"]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000.0)


class FrameLimiter:
    """Sleeps out the rest of each ~16.67 ms frame.

    ``clock`` returns milliseconds and ``sleep`` takes milliseconds.
    """

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[int], None] | None = None,
    ) -> None:
        self._clock = clock or _monotonic_ms
        self._sleep = sleep or _sleep_ms
        self.then = int(self._clock())
        self.remainder = 0.0

    def cap(self) -> int:
        """Wait until the current frame is over; return the delay in ms."""
        wait = int(16.0 + self.remainder)
        self.remainder -= int(self.remainder)
        frame_time = int(self._clock()) - self.then
        wait = max(wait - frame_time, 1)
        self._sleep(wait)
        self.remainder += 0.334
        self.then = int(self._clock())
        return wait