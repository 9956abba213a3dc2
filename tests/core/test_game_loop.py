"""
test_game_loop.py
-----------------
Headless smoke test for the frame driver.
"""

import json

import pygame
import pytest

from corgi_run.core.runtime.game_loop import GameLoop
from corgi_run.core.runtime.game_state import GamePhase
from corgi_run.core.services.score_history import ScoreHistory
from corgi_run.core.services.settings_manager import SettingsManager


@pytest.fixture
def game_loop(tmp_path):
    settings = SettingsManager(tmp_path / "settings.json")
    loop = GameLoop(settings=settings, history=ScoreHistory(tmp_path / "scores.json"))
    yield loop
    pygame.quit()


@pytest.mark.integration
def test_quit_event_stops_loop_and_saves_settings(game_loop, tmp_path):
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    game_loop.run()

    assert not game_loop.running
    saved = json.loads((tmp_path / "settings.json").read_text())
    assert saved["audio"]["bgm_volume"] == 0.4
    assert saved["audio"]["sfx_volume"] == 0.6


@pytest.mark.integration
def test_jump_key_starts_run(game_loop):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    game_loop._handle_events()
    game_loop.controller.tick(1 / 60)
    game_loop._draw()

    assert game_loop.controller.phase is GamePhase.PLAYING
    assert game_loop.hud.hud_visible
