"""
test_main.py
------------
Tests for the command-line entry point and a headless MainLoop run.
"""

from unittest.mock import patch

import pygame
import pytest

from snowfall.__main__ import build_parser, main
from snowfall.core.runtime.main_loop import MainLoop
from snowfall.core.runtime.snow_settings import Display, SnowConfig


class TestArguments:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.width == Display.WIDTH
        assert args.height == Display.HEIGHT
        assert args.fps == Display.FPS
        assert args.config is None
        assert args.frames is None

    def test_overrides(self):
        args = build_parser().parse_args(
            ["--width", "320", "--height", "240", "--fps", "30",
             "--config", "snow.yaml", "--frames", "5"])
        assert (args.width, args.height, args.fps) == (320, 240, 30)
        assert args.config == "snow.yaml"
        assert args.frames == 5


class TestMain:

    def test_missing_config_exits_with_error(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 2

    def test_badly_typed_config_exits_with_error(self, tmp_path):
        path = tmp_path / "snow.yaml"
        path.write_text("flake_count: 100.0\n", encoding="utf-8")

        assert main(["--config", str(path)]) == 2

    def test_display_error_exits_with_error(self):
        with patch("snowfall.core.runtime.main_loop.MainLoop.__init__",
                   side_effect=pygame.error("no display")):
            assert main(["--frames", "1"]) == 1

    @pytest.mark.integration
    def test_headless_run(self):
        assert main(["--width", "64", "--height", "48", "--frames", "2"]) == 0


@pytest.mark.integration
class TestMainLoopHeadless:

    def test_runs_frame_limit(self):
        loop = MainLoop(SnowConfig(flake_count=20), width=64, height=48, fps=0)

        frames = loop.run(max_frames=3)

        assert frames == 3
        assert loop.controller.running is False
        assert loop.controller.field.flake_count == 20

    def test_quit_event_ends_loop(self):
        loop = MainLoop(SnowConfig(flake_count=5), width=64, height=48, fps=0)
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        frames = loop.run(max_frames=100)

        assert frames == 0

    def test_space_toggles_animation(self):
        loop = MainLoop(SnowConfig(flake_count=5), width=64, height=48, fps=0)
        loop.controller.start()

        loop._handle_key(pygame.K_SPACE)
        assert loop.controller.running is False

        loop._handle_key(pygame.K_SPACE)
        assert loop.controller.running is True

        loop._handle_key(pygame.K_ESCAPE)
        assert loop.running is False
        pygame.quit()
