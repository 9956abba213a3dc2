"""
debug_logger.py
---------------
Console logger for the game: per-category switches, a level threshold,
coloured tags and a short boot report.

Usage:
    DebugLogger.system("Pygame initialized")
    DebugLogger.trace(f"Spawned {obstacle}", category="spawn")
    DebugLogger.init_entry("SoundManager", "FAIL")
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and how verbose the output is."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core
        "system": True,
        "loading": False,
        "settings": True,
        "input": False,

        # Run
        "game_state": True,
        "spawn": False,
        "collision": True,
        "score": True,
        "persistence": True,

        # Output
        "render": False,
        "audio": True,
    }


ANSI = {
    "reset": "\033[0m",
    "white": "\033[97m",
    "green": "\033[92m",
    "magenta": "\033[95m",
    "cyan": "\033[96m",
    "blue": "\033[94m",
    "yellow": "\033[93m",
    "red": "\033[91m",
}

LEVELS = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; every method is safe to call before pygame starts."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    # tag -> (colour, level)
    TAGS = {
        "SYSTEM": ("magenta", "INFO"),
        "STATE": ("cyan", "INFO"),
        "TRACE": ("blue", "VERBOSE"),
        "WARN": ("yellow", "WARN"),
    }

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Class name of the caller, or its module name in CamelCase."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if owner is not None:
            return owner.__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(p.capitalize() for p in module[:-3].split("_"))

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        return LEVELS.get(level, 3) <= LEVELS.get(LoggerConfig.LOG_LEVEL, 3)

    @staticmethod
    def _log(tag: str, message: str, category: str):
        colour, level = DebugLogger.TAGS[tag]
        if not DebugLogger._should_log(category, level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{ANSI[colour]}[{timestamp}] [{source}][{tag}] {message}{ANSI['reset']}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        """Phase transitions."""
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-tick detail; only printed at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    # ===========================================================
    # Boot Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{ANSI['white']}{line}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}\n{ANSI['reset']}")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """One dotted ``> Module ..... [OK]`` line."""
        if LoggerConfig.ENABLE_LOGGING:
            print(DebugLogger._render_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if LoggerConfig.ENABLE_LOGGING:
            print(f"{' ' * (level * 4)}• {ANSI['white']}{detail}{ANSI['reset']}")

    @staticmethod
    def _render_entry(module: str, status: str) -> str:
        colour = {"OK": "green", "FAIL": "red"}.get(status.upper(), "white")
        prefix = f"> {module}"
        label = f"[{status}]"

        pad = max(DebugLogger.STATUS_COLUMN - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - pad - 1 - len(label), 1)
        return (f"{ANSI['white']}{prefix}{' ' * pad}{'.' * dots} "
                f"{ANSI[colour]}{label}{ANSI['reset']}")
