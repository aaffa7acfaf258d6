"""
scheduler.py
------------
Frame scheduling: who calls the animation's frame callback, and when.

A scheduler holds at most one pending callback. Requesting a frame while
one is pending replaces it; cancel() drops it. Callbacks receive the
current time in milliseconds.
"""

import time

import pygame

from snowfall.core.debug.debug_logger import DebugLogger


class Scheduler:
    """Base frame scheduler holding a single pending callback."""

    def __init__(self):
        self._pending = None

    def request_next_frame(self, callback):
        """Run callback(now_ms) on the next frame."""
        self._pending = callback

    def cancel(self):
        """Drop the pending callback, if any."""
        if self._pending is not None:
            DebugLogger.trace("Pending frame cancelled")
        self._pending = None

    @property
    def pending(self):
        return self._pending is not None

    def _fire(self, now_ms):
        """Run and clear the pending callback. Returns whether one ran."""
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback(now_ms)
        return True


class ClockScheduler(Scheduler):
    """
    Drives frames from a pygame clock.

    The host loop calls run_pending() once per iteration; the clock caps
    the rate at `fps` even while nothing is pending.
    """

    def __init__(self, fps, clock=None, ticks=None):
        """
        Args:
            fps: Frame cap passed to Clock.tick()
            clock: pygame.time.Clock (created if None)
            ticks: Millisecond time source (pygame.time.get_ticks if None)
        """
        super().__init__()
        self.fps = fps
        self.clock = clock or pygame.time.Clock()
        self._ticks = ticks or pygame.time.get_ticks
        self.callback_ms = 0.0

    def run_pending(self):
        """Wait for the next frame slot, then run the pending callback."""
        self.clock.tick(self.fps)

        start = time.perf_counter()
        ran = self._fire(self._ticks())
        # Work time of the callback only, excluding the clock's wait
        self.callback_ms = (time.perf_counter() - start) * 1000 if ran else 0.0
        return ran

    def get_fps(self):
        return self.clock.get_fps()


class ManualScheduler(Scheduler):
    """Deterministic scheduler whose clock only moves when told to."""

    def __init__(self, start_ms=0):
        super().__init__()
        self.now_ms = start_ms

    def advance(self, ms):
        """Move the clock forward by `ms` and run the pending callback."""
        self.now_ms += ms
        return self._fire(self.now_ms)

    def run_frames(self, count, frame_ms=1000 / 60):
        """
        Run up to `count` frames spaced `frame_ms` apart.

        Stops early once nothing is pending. Returns the number run.
        """
        ran = 0
        for _ in range(count):
            if not self.advance(frame_ms):
                break
            ran += 1
        return ran
