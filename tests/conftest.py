"""
conftest.py
-----------
Shared pytest configuration and fixtures for the corgi_run tests.

Contains:
- Headless SDL drivers so pygame works without a display or sound card
- A recording audio port for asserting cues
- Seeded RNG, temporary score history and simulation/controller fixtures
- Pytest configuration and hooks
"""

import os
import random

# Must be set before pygame initializes any subsystem.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from corgi_run.audio.audio_port import AudioPort
from corgi_run.core.debug.debug_logger import LoggerConfig
from corgi_run.core.runtime.game_state import GameController
from corgi_run.core.runtime.run_state import RunState
from corgi_run.core.runtime.simulation import Simulation
from corgi_run.core.services.event_manager import EventManager
from corgi_run.core.services.score_history import ScoreHistory
from corgi_run.entities.entity_types import ObstacleKind
from corgi_run.entities.obstacle import Obstacle
from corgi_run.entities.player import Player


# ===========================================================
# Test Doubles
# ===========================================================

class RecordingAudio(AudioPort):
    """Audio port that remembers every request instead of playing it."""

    def __init__(self):
        self.cues = []
        self.volumes = {}
        self.music_requests = 0

    def play(self, cue):
        self.cues.append(cue)

    def set_volume(self, channel, level):
        self.volumes[channel] = level

    def ensure_music(self):
        self.music_requests += 1


class ScriptedRng:
    """Stands in for ``random``; returns queued values from random()."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output free of game log lines."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for an RNG that replays the given values."""
    return ScriptedRng


@pytest.fixture
def history(tmp_path):
    return ScoreHistory(tmp_path / "score_history.json")


@pytest.fixture
def run_state():
    return RunState()


@pytest.fixture
def player():
    return Player()


@pytest.fixture
def simulation(audio, rng):
    return Simulation(audio=audio, rng=rng)


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def controller(simulation, history, events):
    return GameController(simulation, history, events)


@pytest.fixture
def covering_obstacle():
    """
    Factory for an obstacle placed exactly over the player.

    It stays in contact after a normal frame of scrolling, so the next
    tick is guaranteed to resolve a collision with it.
    """
    def _make(player, kind=ObstacleKind.LOG_HORIZONTAL):
        return Obstacle(kind, player.x, player.y, player.width, player.height)
    return _make


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not explicitly marked integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
