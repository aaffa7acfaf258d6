"""
snow_settings.py
----------------
Centralized constants and the snowfall configuration record.
"""

from dataclasses import dataclass, fields

from snowfall.core.debug.debug_logger import DebugLogger


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Snowfall"


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Render colors (RGB)."""
    BACKGROUND: tuple = (15, 26, 51)  # #0f1a33
    FLAKE: tuple = (255, 255, 255)


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Frame timing diagnostics -- not related to logging."""
    FRAME_TIME_WARNING: float = 33.3  # ms
    SLOW_FRAME_WARN_INTERVAL: float = 1.0  # s


# ===========================================================
# Snow Configuration
# ===========================================================

NUMERIC_FIELDS = (
    "radius_min", "radius_max",
    "speed_min", "speed_max",
    "wind_base", "wind_sway_amplitude", "wind_sway_frequency",
)


@dataclass(frozen=True)
class SnowConfig:
    """
    Snowfall tuning values.

    Speeds are in px/s, radii in px, sway frequency in cycles per second.
    Read once at startup; nothing edits a config while the animation runs.
    """

    flake_count: int = 3000

    radius_min: float = 1.0
    radius_max: float = 5.0

    speed_min: float = 10.0
    speed_max: float = 40.0

    # Horizontal drift
    wind_enabled: bool = True
    wind_base: float = 6.0
    wind_sway_amplitude: float = 10.0
    wind_sway_frequency: float = 0.25

    def __post_init__(self):
        # bool is an int subclass, so it is rejected explicitly
        if not isinstance(self.flake_count, int) or isinstance(self.flake_count, bool):
            raise ValueError(f"flake_count must be an integer, got {self.flake_count!r}")
        if not isinstance(self.wind_enabled, bool):
            raise ValueError(f"wind_enabled must be true or false, got {self.wind_enabled!r}")
        for name in NUMERIC_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"{name} must be a number, got {value!r}")

        if self.flake_count < 0:
            raise ValueError(f"flake_count must be >= 0, got {self.flake_count}")
        if self.radius_min < 0 or self.speed_min < 0:
            raise ValueError("radius and speed ranges must be non-negative")
        if self.radius_min > self.radius_max:
            raise ValueError(
                f"radius_min ({self.radius_min}) exceeds radius_max ({self.radius_max})"
            )
        if self.speed_min > self.speed_max:
            raise ValueError(
                f"speed_min ({self.speed_min}) exceeds speed_max ({self.speed_max})"
            )
        if self.wind_sway_frequency < 0:
            raise ValueError(
                f"wind_sway_frequency must be >= 0, got {self.wind_sway_frequency}"
            )

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data):
        """
        Build a config from a plain dict.

        Unknown keys are logged and ignored. Missing keys keep their defaults.

        Raises:
            ValueError: If the resulting values are inconsistent.
        """
        known = set(cls.field_names())
        values = {}
        for key, value in data.items():
            if key not in known:
                DebugLogger.warn(f"Ignoring unknown snow setting '{key}'", category="loading")
                continue
            values[key] = value
        return cls(**values)

    def to_dict(self):
        return {name: getattr(self, name) for name in self.field_names()}
