"""Wall-clock timer with frame-rate capping."""

from __future__ import annotations

import time
from collections.abc import Callable


class Timer:
    """Measures elapsed and per-frame time and sleeps to hold a frame rate."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        # The last frame starts at the clock's epoch, so the first delta is large.
        self._last_frame = 0.0
        self._start = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart the elapsed-time measurement."""
        self._start = self._clock()

    def elapsed(self) -> float:
        """Seconds since the last reset."""
        return self._clock() - self._start

    def delta_time(self) -> float:
        """Seconds since the previous call, which becomes the new reference."""
        now = self._clock()
        delta = now - self._last_frame
        self._last_frame = now
        return delta

    def cap_frame_rate(self, target_fps: float) -> None:
        """Sleep so that frames come no faster than target_fps; ignored if not positive."""
        if target_fps <= 0.0:
            return
        self.cap_frame_rate_with_delta_time(1.0 / target_fps)

    def cap_frame_rate_with_delta_time(self, frame_time: float) -> None:
        """Sleep for whatever remains of frame_time since the previous frame."""
        delta = self.delta_time()
        if delta < frame_time:
            self._sleep(frame_time - delta)