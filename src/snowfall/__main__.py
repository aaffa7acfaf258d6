"""
__main__.py
-----------
Command-line entry point.

Usage:
    python -m snowfall                          # Default window and settings
    python -m snowfall --config snow.yaml       # Load settings file
    python -m snowfall --width 800 --height 600
    python -m snowfall --frames 300             # Exit after 300 frames
"""

import argparse
import sys

import pygame

from snowfall.core.debug.debug_logger import DebugLogger
from snowfall.core.runtime.snow_settings import Display


def build_parser():
    parser = argparse.ArgumentParser(prog="snowfall",
                                     description="Animated snowfall in a pygame window")
    parser.add_argument("--width", type=int, default=Display.WIDTH,
                        help=f"Initial window width (default {Display.WIDTH})")
    parser.add_argument("--height", type=int, default=Display.HEIGHT,
                        help=f"Initial window height (default {Display.HEIGHT})")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help=f"Frame cap (default {Display.FPS})")
    parser.add_argument("--config", default=None,
                        help="Snow settings file (.yaml, .json or .py)")
    parser.add_argument("--frames", type=int, default=None,
                        help="Exit after this many frames")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Imported here so --help works without touching config or pygame
    from snowfall.core.services.config_manager import load_snow_config
    from snowfall.core.runtime.main_loop import MainLoop

    try:
        config = load_snow_config(args.config, strict=args.config is not None)
    except (FileNotFoundError, ValueError) as e:
        DebugLogger.fail(str(e), category="loading")
        return 2

    try:
        loop = MainLoop(config, width=args.width, height=args.height, fps=args.fps)
        loop.run(max_frames=args.frames)
    except pygame.error as e:
        DebugLogger.fail(f"Display unavailable: {e}", category="display")
        return 1
    except KeyboardInterrupt:
        DebugLogger.action("Interrupted")

    return 0


if __name__ == "__main__":
    sys.exit(main())
