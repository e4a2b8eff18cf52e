"""
frame_clock.py: Converts wall-clock time into frame deltas for the physics step.
"""

import time
from typing import Callable, Optional

from .constants import TARGET_FPS, MAX_FRAME_DELTA


class FrameClock:
    """
    Measures elapsed time between ticks in units of nominal frames.
    After reset() the next tick reports exactly one frame, so a long pause
    never turns into one giant step.
    """

    def __init__(self, fps: int = TARGET_FPS, max_delta: float = MAX_FRAME_DELTA,
                 now: Callable[[], float] = time.perf_counter):
        self.frame_time = 1.0 / fps
        self.max_delta = max_delta
        self.now = now
        self._last: Optional[float] = None

    def reset(self):
        self._last = None

    def tick(self) -> float:
        current = self.now()
        if self._last is None:
            self._last = current
            return 1.0

        elapsed = current - self._last
        self._last = current
        delta = elapsed / self.frame_time
        return max(0.0, min(delta, self.max_delta))
