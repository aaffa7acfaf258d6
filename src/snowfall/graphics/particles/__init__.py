"""
Particle system exports.

Provides the snowflake field and its wind model.
"""

from snowfall.graphics.particles.snow_field import (
    SnowField,
    Snowflake,
    sway_wind_speed,
)

__all__ = [
    'SnowField',
    'Snowflake',
    'sway_wind_speed',
]
