"""Millisecond interval timer used to pace the game loop."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Reports when more than a set number of milliseconds have passed."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self.delay = -1
        self._start = self._clock()

    def init(self, value_ms: int) -> None:
        """Start timing an interval of value_ms milliseconds."""
        self.delay = value_ms
        self._start = self._clock()

    def destroy(self) -> None:
        self.delay = -1

    def update(self, value_ms: int) -> None:
        """Restart the timer with a new interval."""
        self.delay = value_ms
        self._start = self._clock()

    def time_diff(self) -> int:
        """Whole milliseconds elapsed since the timer was last started."""
        micros = round((self._clock() - self._start) * 1_000_000)
        return int(micros / 1000)

    def time_over(self) -> bool:
        """True once the interval has been exceeded; restarts the timer then."""
        if self.time_diff() > self.delay:
            self._start = self._clock()
            return True
        return False

    def describe(self) -> str:
        return f"Timer:  {self.time_diff()}"