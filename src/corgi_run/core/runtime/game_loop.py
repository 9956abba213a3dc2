"""
game_loop.py
------------
Frame driver: owns the pygame window and runs input -> tick -> render.

Responsibilities
----------------
- Initialize pygame and build the game services
- Clamp frame time before handing it to the controller
- Save settings on exit
"""

import pygame

from corgi_run.audio.audio_port import Channel
from corgi_run.audio.sound_manager import SoundManager
from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Debug, Display, Physics
from corgi_run.core.runtime.game_state import GameController
from corgi_run.core.runtime.simulation import Simulation
from corgi_run.core.services.event_manager import EventManager
from corgi_run.core.services.input_manager import InputManager
from corgi_run.core.services.score_history import ScoreHistory
from corgi_run.core.services.settings_manager import get_settings
from corgi_run.graphics.draw_manager import DrawManager
from corgi_run.ui.hud_manager import HUDManager


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, settings=None, history=None):
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        DebugLogger.init_entry("Pygame")

        self.settings = settings or get_settings()
        self.fps = self.settings.get("graphics", "fps_limit", Display.FPS)
        self.show_fps = self.settings.get("graphics", "show_fps", Debug.SHOW_FPS)

        self.audio = SoundManager(
            sfx_volume=self.settings.get("audio", "sfx_volume", 0.6),
            bgm_volume=self.settings.get("audio", "bgm_volume", 0.4),
            muted=self.settings.get("audio", "muted", False),
        )
        self.events = EventManager()
        self.history = history or ScoreHistory()

        self.controller = GameController(Simulation(self.audio), self.history, self.events)
        self.input_manager = InputManager(self.controller, self.audio, self.settings)
        self.draw_manager = DrawManager(self.screen)
        self.hud = HUDManager(self.events, best_score=self.history.best_score())
        DebugLogger.init_sub("Controller, input, renderer and HUD ready")

        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        DebugLogger.section("Game Loop")

        while self.running:
            frame_time = self.clock.tick(self.fps) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)

            self._handle_events()
            self.controller.tick(frame_time)
            self._draw()

        self.shutdown()

    def _handle_events(self):
        for event in pygame.event.get():
            self.input_manager.handle_event(event)
        if self.input_manager.quit_requested:
            self.running = False

    def _draw(self):
        snapshot = self.controller.snapshot()
        self.draw_manager.render(snapshot)
        self.hud.render(self.screen, snapshot)

        if self.show_fps:
            pygame.display.set_caption(f"{Display.CAPTION} - {self.clock.get_fps():.0f} FPS")

        pygame.display.flip()

    def shutdown(self):
        self.settings.set("audio", "bgm_volume", self.input_manager.volume(Channel.BACKGROUND))
        self.settings.set("audio", "sfx_volume", self.input_manager.volume(Channel.EFFECTS))
        self.settings.save()
        self.audio.stop_music()
        pygame.quit()
        DebugLogger.system("Pygame terminated")
