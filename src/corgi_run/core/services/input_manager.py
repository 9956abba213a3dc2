"""
input_manager.py
----------------
Maps pygame key events to game commands.

Provides:
- Action bindings (two keys for jump, one for slide, volume and quit keys)
- Press / release routing to the GameController
- Lazy background-music start on jump input
"""

import pygame

from corgi_run.audio.audio_port import Channel
from corgi_run.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "jump": [pygame.K_SPACE, pygame.K_UP],
    "slide": [pygame.K_DOWN],
    "bgm_down": [pygame.K_LEFTBRACKET],
    "bgm_up": [pygame.K_RIGHTBRACKET],
    "sfx_down": [pygame.K_MINUS],
    "sfx_up": [pygame.K_EQUALS],
    "quit": [pygame.K_ESCAPE],
}

VOLUME_STEP = 0.1


class InputManager:
    """
    Routes keyboard events to the controller and audio.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)
        if input_manager.quit_requested:
            ...
    """

    def __init__(self, controller, audio, settings=None, key_bindings=None):
        """
        Args:
            controller: GameController receiving jump / slide commands
            audio: AudioPort for lazy music start and volume changes
            settings: Optional SettingsManager that remembers volumes
            key_bindings: Custom action -> keys mapping
        """
        self.controller = controller
        self.audio = audio
        self.settings = settings
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.quit_requested = False

        self._key_to_action = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_action[key] = action

        self._volumes = {
            Channel.BACKGROUND: self._setting("bgm_volume", 0.4),
            Channel.EFFECTS: self._setting("sfx_volume", 0.6),
        }

        DebugLogger.init_entry("InputManager")

    def _setting(self, key, default):
        if self.settings is None:
            return default
        return self.settings.get("audio", key, default)

    # ===========================================================
    # Event Routing
    # ===========================================================

    def action_for(self, key):
        return self._key_to_action.get(key)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.KEYDOWN:
            self.on_press(self.action_for(event.key))
        elif event.type == pygame.KEYUP:
            self.on_release(self.action_for(event.key))

    def on_press(self, action):
        if action is None:
            return
        DebugLogger.trace(f"Pressed '{action}'", category="input")

        if action == "jump":
            self.audio.ensure_music()
            self.controller.jump_command()
        elif action == "slide":
            self.controller.slide_press()
        elif action == "bgm_down":
            self.step_volume(Channel.BACKGROUND, -VOLUME_STEP)
        elif action == "bgm_up":
            self.step_volume(Channel.BACKGROUND, VOLUME_STEP)
        elif action == "sfx_down":
            self.step_volume(Channel.EFFECTS, -VOLUME_STEP)
        elif action == "sfx_up":
            self.step_volume(Channel.EFFECTS, VOLUME_STEP)
        elif action == "quit":
            self.quit_requested = True

    def on_release(self, action):
        if action == "slide":
            self.controller.slide_release()

    # ===========================================================
    # Volume
    # ===========================================================

    def step_volume(self, channel, delta):
        level = round(min(max(self._volumes[channel] + delta, 0.0), 1.0), 2)
        self._volumes[channel] = level
        self.audio.set_volume(channel, level)

        if self.settings is not None:
            key = "bgm_volume" if channel == Channel.BACKGROUND else "sfx_volume"
            self.settings.set("audio", key, level)

    def volume(self, channel):
        return self._volumes[channel]
