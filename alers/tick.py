"""Frame timing that splits elapsed time into fixed-size steps."""

from __future__ import annotations

import time
from typing import Callable, Optional

_EPSILON = 10e-7


class FixedStep:
    """Hands out elapsed time in steps of at most frame_step seconds."""

    def __init__(self, frame_step, clock: Optional[Callable[[], float]] = None):
        self.frame_step = float(frame_step)
        self._clock = time.monotonic if clock is None else clock
        self._delta_time = 0.0
        self._accumulator = 0.0
        self._previous_time = self._clock()

    def should_tick(self) -> bool:
        """True while any meaningful amount of time remains to be consumed."""
        return self._accumulator >= _EPSILON

    def tick(self) -> None:
        """Consume one step from the accumulated time."""
        if self._accumulator < self.frame_step:
            self._delta_time = self._accumulator
            self._accumulator = 0.0
        else:
            self._delta_time = self.frame_step
            self._accumulator -= self.frame_step

    def prepare_tick(self) -> None:
        """Accumulate the time passed since the previous call."""
        now = self._clock()
        self._accumulator = now - self._previous_time
        self._delta_time = self._accumulator
        self._previous_time = now

    def delta_time(self) -> float:
        return self._delta_time