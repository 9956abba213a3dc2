"""
settings_manager.py
-------------------
Manages persistent user settings (audio volumes, frame rate).
Singleton pattern for application-wide access.
"""

import copy
import json
import os

from corgi_run.core.debug.debug_logger import DebugLogger


# ===========================================================
# Settings Manager
# ===========================================================

class SettingsManager:
    """Manages persistent user settings with safe defaults."""

    SETTINGS_FILE = "settings.json"

    DEFAULTS = {
        "audio": {
            "bgm_volume": 0.4,
            "sfx_volume": 0.6,
            "muted": False
        },
        "graphics": {
            "fps_limit": 60,
            "show_fps": False
        }
    }

    def __init__(self, settings_file=None):
        """
        Initialize settings manager.

        Args:
            settings_file: Optional custom path for settings file
        """
        self.settings_file = settings_file or self.SETTINGS_FILE
        self.settings = self._load()

    # ===========================================================
    # Public API
    # ===========================================================

    def get(self, category, key, default=None):
        """
        Get a setting value.

        Args:
            category: Settings category (audio, graphics)
            key: Setting key
            default: Fallback if not found
        """
        return self.settings.get(category, {}).get(key, default)

    def set(self, category, key, value):
        if category not in self.settings:
            self.settings[category] = {}
        self.settings[category][key] = value

    def save(self):
        """Save current settings to file."""
        try:
            with open(self.settings_file, 'w', encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2)
            DebugLogger.system(f"Saved settings to {self.settings_file}", category="settings")
        except (IOError, OSError, TypeError) as e:
            DebugLogger.warn(f"Failed to save settings: {e}", category="settings")

    def reset_to_defaults(self):
        self.settings = copy.deepcopy(self.DEFAULTS)
        DebugLogger.system("Settings reset to defaults", category="settings")

    # ===========================================================
    # Loading & Merging
    # ===========================================================

    def _load(self):
        """Load settings from file or use defaults."""
        merged_settings = copy.deepcopy(self.DEFAULTS)

        if not os.path.exists(self.settings_file):
            DebugLogger.system("Using default settings", category="settings")
            return merged_settings

        try:
            with open(self.settings_file, 'r', encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("settings root must be an object")
            self._merge_recursive(merged_settings, loaded)
            DebugLogger.system(f"Loaded user settings from {self.settings_file}", category="settings")

        except (json.JSONDecodeError, ValueError, IOError, OSError) as e:
            DebugLogger.warn(f"Failed to load settings: {e}", category="settings")
            return copy.deepcopy(self.DEFAULTS)

        return merged_settings

    def _merge_recursive(self, base, update):
        """
        Recursively merge 'update' dict into 'base' dict.
        Allows partial updates (e.g., only changing one volume).
        """
        for key, value in update.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_recursive(base[key], value)
            else:
                base[key] = value


# ===========================================================
# Singleton Access
# ===========================================================

_SETTINGS = None


def get_settings() -> SettingsManager:
    """Get or create the settings singleton."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = SettingsManager()
    return _SETTINGS


def reset_settings():
    """Reset the singleton. Use for testing or full restart."""
    global _SETTINGS
    _SETTINGS = None
