# anylaunch Utilities Package
"""
Shared utility functions for anylaunch.
"""

from .helpers import load_settings, path_entries_from_env

__all__ = ["load_settings", "path_entries_from_env"]
