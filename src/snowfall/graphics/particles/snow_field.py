"""
snow_field.py
-------------
Falling snowflake particles with wind drift, edge wrapping and recycling.

Usage:
    field = SnowField(SnowConfig())
    field.populate(width, height)

    # Once per frame
    field.update(dt, now_seconds)
"""

import math
import random


# ===========================================================
# Wind
# ===========================================================

def sway_wind_speed(t, base, amplitude, frequency):
    """
    Horizontal wind speed (px/s) at time t (seconds).

    A sine sway around a constant base push:
        base + amplitude * sin(2π * frequency * t)
    """
    return base + amplitude * math.sin(2.0 * math.pi * frequency * t)


# ===========================================================
# Single Flake
# ===========================================================

class Snowflake:
    """One falling dot. Radius and speed are fixed at creation."""

    __slots__ = ("x", "y", "radius", "speed")

    def __init__(self, x, y, radius, speed):
        self.x = x
        self.y = y
        self.radius = radius
        self.speed = speed

    def __repr__(self):
        return (f"Snowflake(x={self.x:.2f}, y={self.y:.2f}, "
                f"radius={self.radius:.2f}, speed={self.speed:.2f})")


# ===========================================================
# Snow Field
# ===========================================================

class SnowField:
    """
    Fixed-size collection of snowflakes over a width x height area.

    Flakes are never destroyed. A flake leaving the bottom edge is moved
    back above the top edge at a fresh random x.
    """

    __slots__ = ("config", "flakes", "width", "height", "_rng")

    def __init__(self, config, rng=None):
        """
        Args:
            config: SnowConfig with counts, ranges and wind settings
            rng: random.Random used for all sampling (fresh, unseeded if None)
        """
        self.config = config
        self.flakes = []
        self.width = 0
        self.height = 0
        self._rng = rng or random.Random()

    # ===========================================================
    # Population
    # ===========================================================

    def populate(self, width, height):
        """
        Replace all flakes with a fresh set spread uniformly over the area.

        Args:
            width: Surface width in px
            height: Surface height in px
        """
        cfg = self.config
        rng = self._rng

        self.width = width
        self.height = height
        self.flakes = [
            Snowflake(
                x=rng.random() * width,
                y=rng.random() * height,
                radius=rng.uniform(cfg.radius_min, cfg.radius_max),
                speed=rng.uniform(cfg.speed_min, cfg.speed_max),
            )
            for _ in range(cfg.flake_count)
        ]

    # ===========================================================
    # Update
    # ===========================================================

    def wind_speed(self, t):
        """Current wind speed (px/s); 0 when wind is disabled."""
        cfg = self.config
        if not cfg.wind_enabled:
            return 0.0
        return sway_wind_speed(t, cfg.wind_base, cfg.wind_sway_amplitude,
                               cfg.wind_sway_frequency)

    def update(self, dt, t):
        """
        Advance every flake by one frame.

        Args:
            dt: Seconds since the previous frame
            t: Elapsed wall time in seconds (wind phase)
        """
        wind_enabled = self.config.wind_enabled
        drift = self.wind_speed(t) * dt
        bottom = self.height

        for flake in self.flakes:
            flake.y += flake.speed * dt

            if wind_enabled:
                flake.x += drift
            self._wrap_horizontally(flake)

            if flake.y > bottom + flake.radius:
                self._recycle(flake)

    def _wrap_horizontally(self, flake):
        """Re-enter from the opposite side once fully past an edge."""
        r = flake.radius
        if flake.x < -r:
            flake.x = self.width + r
        elif flake.x > self.width + r:
            flake.x = -r

    def _recycle(self, flake):
        """Move a flake from below the bottom edge to just above the top."""
        flake.y = -flake.radius
        flake.x = self._rng.random() * self.width

    # ===========================================================
    # Accessors
    # ===========================================================

    @property
    def flake_count(self):
        return len(self.flakes)

    def __len__(self):
        return len(self.flakes)

    def __iter__(self):
        return iter(self.flakes)
