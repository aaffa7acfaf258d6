"""
test_run_tests.py
-----------------
Tests for the watchdog auto-test runner's command building and filtering.
"""

import sys
from types import SimpleNamespace
from unittest.mock import patch

import run_tests


def make_runner(unit_only=False, coverage=False):
    return run_tests.TestRunner(SimpleNamespace(unit_only=unit_only, coverage=coverage))


class TestCommand:

    def test_default_command(self):
        assert make_runner().build_command() == [sys.executable, "-m", "pytest", "-v"]

    def test_unit_only_deselects_integration(self):
        cmd = make_runner(unit_only=True).build_command()
        assert cmd[-2:] == ["-m", "not integration"]

    def test_coverage_targets_package(self):
        assert "--cov=snowfall" in make_runner(coverage=True).build_command()


class TestEvents:

    def test_ignores_directories_and_other_files(self):
        runner = make_runner()
        with patch.object(runner, "run_tests") as run:
            runner.on_modified(SimpleNamespace(is_directory=True, src_path="src"))
            runner.on_modified(SimpleNamespace(is_directory=False, src_path="notes.txt"))
        run.assert_not_called()

    def test_runs_on_source_change_with_debounce(self):
        runner = make_runner()
        with patch.object(runner, "run_tests") as run:
            runner.on_modified(SimpleNamespace(is_directory=False, src_path="src/a.py"))
            runner.on_modified(SimpleNamespace(is_directory=False, src_path="config/snow.yaml"))
        run.assert_called_once()
