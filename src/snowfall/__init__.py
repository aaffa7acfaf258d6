"""
Snowfall: an animated snowfall effect on a pygame drawing surface.
"""

__version__ = "1.0.0"
