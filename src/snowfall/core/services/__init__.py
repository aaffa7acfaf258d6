"""
Core services exports.

Provides configuration loading and the drawing surface.
"""

from snowfall.core.services.config_manager import load_config, load_snow_config
from snowfall.core.services.display_manager import DrawingSurface

__all__ = [
    'load_config',
    'load_snow_config',
    'DrawingSurface',
]
