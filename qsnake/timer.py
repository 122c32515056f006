"""A tick timer that fires once every move interval."""

from __future__ import annotations

import time
from typing import Callable

DEFAULT_INTERVAL = 0.030


class MoveTimer:
    """Reports when enough time has passed for the next move."""

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.interval = interval
        self.clock = clock
        self._start = clock()
        self._game_start = self._start

    def update(self) -> bool:
        """Return True and restart the interval if it has elapsed, else False."""
        now = self.clock()
        if now - self._start >= self.interval:
            self._start = now
            return True
        return False

    def total_time(self) -> float:
        """Seconds since the timer was created."""
        return self.clock() - self._game_start