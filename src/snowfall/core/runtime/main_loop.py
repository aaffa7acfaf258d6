"""
main_loop.py
------------
Host loop for the snowfall window.

Responsibilities:
- Initialize pygame and the window
- Pump events (quit, pause toggle, window resize)
- Drive the animation's frame callback through the clock scheduler
- Warn about slow frames
"""

import time

import pygame

from snowfall.core.debug.debug_logger import DebugLogger
from snowfall.core.runtime.animation_controller import AnimationController
from snowfall.core.runtime.scheduler import ClockScheduler
from snowfall.core.runtime.snow_settings import Display, Debug, SnowConfig
from snowfall.core.services.display_manager import DrawingSurface


class MainLoop:
    """Runtime controller for the snowfall window."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config=None, width=Display.WIDTH, height=Display.HEIGHT,
                 fps=Display.FPS):
        """
        Args:
            config: SnowConfig (defaults if None)
            width: Initial window width
            height: Initial window height
            fps: Frame cap
        """
        DebugLogger.section("Initializing MainLoop")

        pygame.init()
        DebugLogger.init_entry("Pygame")

        self.config = config or SnowConfig()
        self.surface = DrawingSurface.open_window(width, height, Display.CAPTION)
        self.scheduler = ClockScheduler(fps)
        self.controller = AnimationController(self.config, self.surface, self.scheduler)

        self.running = True
        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub(f"Frame cap: {fps} FPS", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self, max_frames=None):
        """
        Run until the window closes or `max_frames` frames have rendered.

        Args:
            max_frames: Optional frame limit (headless runs, smoke tests)
        """
        DebugLogger.action("Entering main loop")
        self.controller.start()

        try:
            while self.running:
                self._handle_events()
                if not self.running:
                    break

                if self.scheduler.run_pending():
                    self._check_slow_frame(self.scheduler.callback_ms)

                if max_frames is not None and self.controller.frame_count >= max_frames:
                    DebugLogger.action(f"Frame limit reached ({max_frames})")
                    self.running = False
        finally:
            self.controller.stop()
            pygame.quit()
            DebugLogger.system("Pygame terminated")

        return self.controller.frame_count

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type == pygame.VIDEORESIZE:
                # The per-frame size check repopulates the field
                self.surface.rebind(pygame.display.get_surface())

    def _handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
            DebugLogger.action("Escape pressed", category="input")
        elif key == pygame.K_SPACE:
            self.controller.toggle()
            state = "resumed" if self.controller.running else "paused"
            DebugLogger.action(f"Snowfall {state}", category="input")

    # ===========================================================
    # Diagnostics
    # ===========================================================

    def _check_slow_frame(self, frame_time_ms):
        """Log warning for slow frames (throttled)."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return

        now = time.perf_counter()
        if now - self._last_perf_warn_time > Debug.SLOW_FRAME_WARN_INTERVAL:
            self._last_perf_warn_time = now
            DebugLogger.warn(
                f"Slow frame: {frame_time_ms:.2f}ms "
                f"({self.controller.field.flake_count} flakes, {self.scheduler.get_fps():.0f} FPS)",
                category="timing"
            )
