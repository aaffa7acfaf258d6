"""
animation_controller.py
-----------------------
Owns the snowfall animation lifecycle: start, stop, resize and per-frame tick.

Each tick is one synchronous pass:
    resize check → delta time → field update → render → present → reschedule
"""

import random

from snowfall.core.debug.debug_logger import DebugLogger
from snowfall.graphics.particles.snow_field import SnowField
from snowfall.graphics.snow_renderer import SnowRenderer


class AnimationController:
    """
    Runs the snow field against a drawing surface under a scheduler.

    The running flag is checked at the top of every tick; a stopped
    controller never schedules another frame.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config, surface, scheduler, renderer=None, rng=None):
        """
        Args:
            config: SnowConfig
            surface: DrawingSurface to size, paint and present
            scheduler: Scheduler delivering frame callbacks
            renderer: SnowRenderer (default colors if None)
            rng: random.Random for flake sampling
        """
        self.config = config
        self.surface = surface
        self.scheduler = scheduler
        self.renderer = renderer or SnowRenderer()
        self.field = SnowField(config, rng=rng or random.Random())

        self._running = False
        self._last_frame_ms = None
        self._frame_count = 0

        DebugLogger.init_entry("AnimationController")
        DebugLogger.init_sub(f"Flakes: {config.flake_count}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def start(self):
        """Begin animating. The first frame after a start has zero delta."""
        if self._running:
            return

        self._running = True
        self._last_frame_ms = None
        self.resize()

        self.scheduler.request_next_frame(self.tick)
        DebugLogger.state("Snowfall started", category="snow")

    def stop(self):
        """Stop animating and drop any scheduled frame."""
        if not self._running:
            return

        self._running = False
        self.scheduler.cancel()
        DebugLogger.state("Snowfall stopped", category="snow")

    def toggle(self):
        """Stop if running, otherwise start."""
        if self._running:
            self.stop()
        else:
            self.start()

    def resize(self):
        """
        Match the buffer to the display and repopulate on change.

        Returns:
            bool: True if the field was regenerated.
        """
        changed = self.surface.resize_to_display_size()
        if not changed and self.field.flake_count == self.config.flake_count:
            return False

        width, height = self.surface.size
        self.field.populate(width, height)
        DebugLogger.system(f"Populated {self.field.flake_count} flakes over {width}x{height}",
                           category="snow")
        return True

    # ===========================================================
    # Frame
    # ===========================================================

    def tick(self, now_ms):
        """
        Frame callback: advance, draw and schedule the next frame.

        Args:
            now_ms: Host timestamp in milliseconds
        """
        if not self._running:
            return

        self.resize()

        if self._last_frame_ms is None:
            dt = 0.0
        else:
            dt = (now_ms - self._last_frame_ms) / 1000.0
        self._last_frame_ms = now_ms

        self.field.update(dt, now_ms / 1000.0)

        buffer = self.surface.buffer
        self.renderer.render(buffer, self.field)
        self.surface.present()

        self._frame_count += 1
        DebugLogger.trace(f"Frame {self._frame_count}: dt={dt:.4f}s")

        self.scheduler.request_next_frame(self.tick)

    # ===========================================================
    # Accessors
    # ===========================================================

    @property
    def running(self):
        return self._running

    @property
    def last_frame_ms(self):
        return self._last_frame_ms

    @property
    def frame_count(self):
        return self._frame_count
