"""
Runtime configuration exports.

Provides settings constants, the snow configuration record and frame
schedulers. The animation controller and main loop are imported from
their own modules.
"""

from snowfall.core.runtime.snow_settings import (
    Display,
    Colors,
    Debug,
    SnowConfig,
)
from snowfall.core.runtime.scheduler import (
    Scheduler,
    ClockScheduler,
    ManualScheduler,
)

__all__ = [
    # Settings
    'Display',
    'Colors',
    'Debug',
    'SnowConfig',
    # Scheduling
    'Scheduler',
    'ClockScheduler',
    'ManualScheduler',
]
