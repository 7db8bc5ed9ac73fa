"""
Helper utilities for anylaunch.

- Settings loading (TOML merged over defaults)
- Environment-derived defaults (search path, data/config locations)
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS = {
    "launcher": {
        "open_command": "xdg-open",
        "max_workers": 4,
    },
    "search": {
        "max_results": 30,
    },
    "web_search": {
        "name": "DuckDuckGo",
        "url": "https://duckduckgo.com/?q={query}",
        "icon": "web-browser",
    },
    "applications": {
        "dirs": [],
    },
    "history": {
        "db_path": "",
    },
    "ranking": {},
}


def settings_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Default settings file: $XDG_CONFIG_HOME/anylaunch/settings.toml"""
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME") or os.path.join(env.get("HOME") or str(Path.home()), ".config")
    return Path(config_home) / "anylaunch" / "settings.toml"


def data_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Default data directory: $XDG_DATA_HOME/anylaunch"""
    env = os.environ if environ is None else environ
    data_home = env.get("XDG_DATA_HOME") or os.path.join(env.get("HOME") or str(Path.home()), ".local", "share")
    return Path(data_home) / "anylaunch"


def path_entries_from_env(environ: Optional[Mapping[str, str]] = None) -> tuple[str, ...]:
    """
    Executable search path, in lookup order.

    A missing or empty PATH gives an empty search path.
    """
    env = os.environ if environ is None else environ
    raw = env.get("PATH") or ""
    return tuple(p for p in raw.split(os.pathsep) if p)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a TOML file.

    Args:
        path: Settings file, defaults to settings_path()

    Returns:
        Dictionary containing settings with defaults applied
    """
    path = Path(path) if path is not None else settings_path()

    if not path.exists():
        logger.debug(f"Settings file not found at {path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {path}: {e}. Using default settings")
        return _deep_merge(DEFAULT_SETTINGS, {})

    return _deep_merge(DEFAULT_SETTINGS, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence). Neither input
        is modified.
    """
    result = {}
    for key, value in base.items():
        result[key] = _deep_merge(value, {}) if isinstance(value, dict) else value

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
