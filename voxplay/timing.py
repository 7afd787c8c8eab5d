"""Frame timing: delta time and a running frames-per-second average."""

from __future__ import annotations

import time
from typing import Callable

FPS_WINDOW = 60


class FrameClock:
    """Tracks time between frames and averages FPS over up to 60 frames.

    The average covers history slots up to the one just written, so right
    after the slot index wraps it reflects only the newest frames.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()
        self._time = 0.0
        self._delta = 0.0
        self._history = [0] * FPS_WINDOW
        self._frame = 0
        self._fps = 0

    @property
    def time(self) -> float:
        """Time of the last update, in seconds since the clock started."""
        return self._time

    @property
    def delta_time(self) -> float:
        return self._delta

    @property
    def average_fps(self) -> int:
        return self._fps

    def elapsed(self) -> float:
        """Seconds since this clock was created."""
        return self._clock() - self._start

    def update(self, now: float | None = None) -> None:
        """Advance to ``now`` (default: the current elapsed time)."""
        if now is None:
            now = self.elapsed()
        self._delta = now - self._time
        self._time = now
        if self._delta <= 0:
            return
        self._history[self._frame] = int(1.0 / self._delta)
        self._fps = sum(self._history[: self._frame + 1]) // (self._frame + 1)
        self._frame = (self._frame + 1) % FPS_WINDOW