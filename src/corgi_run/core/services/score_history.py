"""
score_history.py
----------------
Persistent list of recent final scores, newest first.

Stored as a JSON array of non-negative integers. Anything else found on
disk is treated as an empty history.
"""

import json
import os

from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Scoring


# ===========================================================
# Score History
# ===========================================================

class ScoreHistory:
    """Bounded most-recent-first score list backed by a JSON file."""

    HISTORY_FILE = "score_history.json"

    def __init__(self, history_file=None, limit: int = Scoring.HISTORY_LIMIT):
        """
        Args:
            history_file: Optional custom path for the history file
            limit: Maximum number of scores kept
        """
        self.history_file = history_file or self.HISTORY_FILE
        self.limit = limit

    # ===========================================================
    # Public API
    # ===========================================================

    def append_score(self, value: int):
        """Insert a score at the front, dropping the oldest beyond the limit."""
        history = self.read_history()
        history.insert(0, int(value))
        del history[self.limit:]
        self._save(history)

    def read_history(self) -> list:
        """Return stored scores, newest first."""
        return self._load()

    def best_score(self) -> int:
        history = self.read_history()
        return max(history) if history else 0

    def clear(self):
        self._save([])

    # ===========================================================
    # Loading & Saving
    # ===========================================================

    def _load(self) -> list:
        if not os.path.exists(self.history_file):
            return []

        try:
            with open(self.history_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError, OSError) as e:
            DebugLogger.warn(f"Failed to read score history: {e}", category="persistence")
            return []

        if not self._is_valid(data):
            DebugLogger.warn(
                f"Ignoring malformed score history in {self.history_file}",
                category="persistence"
            )
            return []

        return data[:self.limit]

    def _save(self, history: list):
        try:
            with open(self.history_file, "w", encoding="utf-8") as f:
                json.dump(history, f)
            DebugLogger.system(f"Saved {len(history)} scores to {self.history_file}",
                               category="persistence")
        except (IOError, OSError) as e:
            DebugLogger.warn(f"Failed to save score history: {e}", category="persistence")

    @staticmethod
    def _is_valid(data) -> bool:
        if not isinstance(data, list):
            return False
        return all(
            isinstance(v, int) and not isinstance(v, bool) and v >= 0
            for v in data
        )
