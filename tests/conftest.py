"""
conftest.py
-----------
Shared pytest configuration and fixtures for snowfall tests.

Contains:
- Headless SDL setup so pygame surfaces work without a display
- Common fixtures (configs, seeded RNG, windows, schedulers)
- Pytest markers
"""

import os
import random

# Must be set before pygame initializes any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from snowfall.core.debug.debug_logger import LoggerConfig
from snowfall.core.runtime.scheduler import ManualScheduler
from snowfall.core.runtime.snow_settings import SnowConfig
from snowfall.core.services.display_manager import DrawingSurface
from snowfall.graphics.snow_renderer import SpriteCache


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence console logging; tests that check output re-enable it."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture(autouse=True)
def clear_sprite_cache():
    """Sprites are cached per class; start every test empty."""
    SpriteCache.clear()
    yield
    SpriteCache.clear()


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def rng():
    """Seeded random source for reproducible flake layouts."""
    return random.Random(1234)


@pytest.fixture
def small_config():
    """Small flake count with the default ranges and wind."""
    return SnowConfig(flake_count=50)


@pytest.fixture
def calm_config():
    """Wind disabled."""
    return SnowConfig(flake_count=50, wind_enabled=False)


@pytest.fixture
def window():
    """Off-screen stand-in for the display window (800x600)."""
    return pygame.Surface((800, 600))


@pytest.fixture
def surface(window):
    """Drawing surface bound to the off-screen window, without flipping."""
    return DrawingSurface(window)


@pytest.fixture
def scheduler():
    """Deterministic scheduler starting at t=0."""
    return ManualScheduler()


# ===========================================================
# Test Utilities
# ===========================================================

@pytest.fixture
def place_flakes():
    """Install an explicit flake list on a field, bypassing populate()."""
    def _place(field, flakes, width=800, height=600):
        field.width = width
        field.height = height
        field.flakes = list(flakes)
        return field
    return _place


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as unit tests."""
    for item in items:
        if "integration" not in item.nodeid and not item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.unit)
