"""
ui_loader.py
------------
Loads HUD layout configurations from YAML files.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from corgi_run.core.debug.debug_logger import DebugLogger

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


class UILoader:
    """Reads and caches layout files from the package config directory."""

    def __init__(self, base_path=None):
        """
        Args:
            base_path: Directory holding the YAML files (defaults to corgi_run/config)
        """
        self.base_path = Path(base_path) if base_path else CONFIG_DIR
        self.cache: Dict[str, Dict[str, Any]] = {}

    def load(self, filename: str) -> Dict[str, Any]:
        """
        Load a layout file.

        Args:
            filename: Path relative to the base directory, e.g. "hud.yaml"

        Returns:
            dict: Parsed layout sections
        """
        if filename in self.cache:
            return self.cache[filename]

        full_path = self.base_path / filename
        if not full_path.exists():
            raise FileNotFoundError(f"ui config not found: {full_path}")

        with open(full_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise ValueError(f"ui config must be a mapping: {full_path}")

        self.cache[filename] = config
        DebugLogger.trace(f"Loaded layout {filename}", category="loading")
        return config


def load_hud_layout(filename: str = "hud.yaml", base_path=None) -> Dict[str, Any]:
    return UILoader(base_path).load(filename)
