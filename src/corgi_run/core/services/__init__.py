"""
Core services: settings, score history, events and input.

Input is not re-exported here because it imports pygame.
"""

from corgi_run.core.services.event_manager import (
    EventManager, BaseEvent, RunStartedEvent, GameOverEvent,
)
from corgi_run.core.services.score_history import ScoreHistory
from corgi_run.core.services.settings_manager import (
    SettingsManager, get_settings, reset_settings,
)

__all__ = [
    'EventManager',
    'BaseEvent',
    'RunStartedEvent',
    'GameOverEvent',
    'ScoreHistory',
    'SettingsManager',
    'get_settings',
    'reset_settings',
]
