"""
config_manager.py
-----------------
Configuration loader for snowfall settings files.

Features:
- Supports .json, .yaml/.yml and .py config files
- Builds file index once for O(1) lookups
- Recursively merges defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
import importlib.util

import yaml

from snowfall.core.debug.debug_logger import DebugLogger
from snowfall.core.runtime.snow_settings import SnowConfig


# ===========================================================
# Configuration
# ===========================================================

CONFIG_ROOT = "config"

SEARCH_DIRS = [
    ".",
    CONFIG_ROOT,
]

CONFIG_EXTENSIONS = (".json", ".yaml", ".yml", ".py")

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or full path (.json, .yaml, .yml or .py)
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename) or os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        if path.endswith(".py"):
            data = _load_py_module(path)
        elif path.endswith((".yaml", ".yml")):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"Top level of {path} must be a mapping")

        return _merge_dicts(default_dict, data)

    except FileNotFoundError as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return default_dict.copy()
    except (json.JSONDecodeError, yaml.YAMLError, ValueError, IOError,
            SyntaxError, ImportError) as e:
        if strict:
            raise ValueError(f"Config unreadable: {filename}: {e}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return default_dict.copy()


def load_snow_config(filename=None, strict=False):
    """
    Load a SnowConfig, merging the file over the built-in defaults.

    Args:
        filename: Config file, or None for the defaults
        strict: If True, raise on missing files and invalid values

    Returns:
        SnowConfig
    """
    defaults = SnowConfig()
    if filename is None:
        return defaults

    data = load_config(filename, default_dict=defaults.to_dict(), strict=strict)
    try:
        config = SnowConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        if strict:
            raise ValueError(f"Invalid snow config in {filename}: {e}") from e
        DebugLogger.warn(f"Invalid snow config in {filename}: {e} - using defaults",
                         category="loading")
        return defaults

    DebugLogger.system(
        f"Snow config: {config.flake_count} flakes, wind {'on' if config.wind_enabled else 'off'}",
        category="loading"
    )
    return config


def build_file_index():
    """Scan config directories and cache all file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        # Top level of "." only; config/ is walked fully
        if directory == ".":
            entries = [(directory, os.listdir(directory))]
        else:
            entries = [(root, files) for root, _, files in os.walk(directory)]
        for root, files in entries:
            for file in files:
                if file.endswith(CONFIG_EXTENSIONS) and file not in _FILE_INDEX:
                    path = os.path.join(root, file)
                    if os.path.isfile(path):
                        _FILE_INDEX[file] = path

    DebugLogger.trace(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def rebuild_file_index():
    """Clear and rebuild index (after the working directory changes)."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


def get_indexed_files():
    """Return copy of file index for debugging."""
    if _FILE_INDEX is None:
        build_file_index()
    return _FILE_INDEX.copy()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """O(1) lookup from pre-built index."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    for ext in CONFIG_EXTENSIONS:
        key = filename + ext
        if key in _FILE_INDEX:
            return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file is an empty mapping."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data if data is not None else {}


def _load_py_module(path):
    """Load Python config file and return DEFAULT_CONFIG if present."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    spec = importlib.util.spec_from_file_location("snow_config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="loading")
    return getattr(module, "DEFAULT_CONFIG", {})


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
