"""
snow_renderer.py
----------------
Paints the background and snowflakes onto the drawing buffer.

Flakes are drawn from pre-rendered circle sprites and batched with
Surface.blits() once per frame.
"""

import pygame

from snowfall.core.runtime.snow_settings import Colors


# ===========================================================
# Pre-rendered Sprite Cache
# ===========================================================

class SpriteCache:
    """Pre-renders flake sprites for fast blitting."""

    _cache = {}

    @staticmethod
    def pixel_radius(radius):
        """Whole-pixel sprite radius for a flake radius (at least 1)."""
        return max(1, int(round(radius)))

    @classmethod
    def get_sprite(cls, color, radius):
        """Get or create the cached sprite for a flake radius."""
        key = (tuple(color), cls.pixel_radius(radius))
        if key not in cls._cache:
            cls._cache[key] = cls._create_sprite(*key)
        return cls._cache[key]

    @classmethod
    def _create_sprite(cls, color, size):
        """Create a filled circle of radius `size` on a transparent surface."""
        surf = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
        pygame.draw.circle(surf, (*color, 255), (size, size), size)
        return surf

    @classmethod
    def clear(cls):
        cls._cache.clear()

    @classmethod
    def size(cls):
        return len(cls._cache)


# ===========================================================
# Renderer
# ===========================================================

class SnowRenderer:
    """Draws one frame of snow: solid background, then every flake."""

    def __init__(self, background_color=Colors.BACKGROUND, flake_color=Colors.FLAKE):
        self.background_color = tuple(background_color)
        self.flake_color = tuple(flake_color)

    def render(self, surface, field):
        """
        Render the field onto a surface.

        Args:
            surface: Target pygame surface (the drawing buffer)
            field: SnowField to draw
        """
        surface.fill(self.background_color)

        color = self.flake_color
        batch = []
        for flake in field:
            sprite = SpriteCache.get_sprite(color, flake.radius)
            rect = sprite.get_rect(center=(round(flake.x), round(flake.y)))
            batch.append((sprite, rect))

        if batch:
            surface.blits(batch, doreturn=False)
