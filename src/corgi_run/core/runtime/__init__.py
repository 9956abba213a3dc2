"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class constants
with no initialization overhead; import the simulation and state machine
from their own modules.
"""

from corgi_run.core.runtime.game_settings import (
    Display,
    Ground,
    Physics,
    PlayerConfig,
    Difficulty,
    Spawn,
    Scoring,
    Dust,
    Bounds,
    Colors,
    Debug,
)

__all__ = [
    'Display',
    'Ground',
    'Physics',
    'PlayerConfig',
    'Difficulty',
    'Spawn',
    'Scoring',
    'Dust',
    'Bounds',
    'Colors',
    'Debug',
]
