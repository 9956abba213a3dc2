"""
sound_manager.py
----------------
pygame.mixer implementation of the audio port.

Every mixer call is guarded: a missing file or an unavailable audio device
only logs a warning and the cue stays silent. Background music that fails
to start is retried on the next ensure_music() call.
"""

import os

import pygame

from corgi_run.audio.audio_port import AudioPort, Channel, Cue
from corgi_run.core.debug.debug_logger import DebugLogger


class SoundManager(AudioPort):
    ASSET_PATHS = {
        "bgm": "assets/audio/bgm_loop.ogg",
        "sfx": {
            Cue.JUMP: "assets/audio/jump.ogg",
            Cue.HIT: "assets/audio/hit.ogg",
            Cue.HEART: "assets/audio/heart.ogg",
        }
    }

    def __init__(self, sfx_volume=0.6, bgm_volume=0.4, muted=False, asset_root="."):
        self.asset_root = asset_root
        self.sfx = {}
        self.sfx_volume = self._clamp(sfx_volume)
        self.bgm_volume = self._clamp(bgm_volume)
        self.muted = muted
        self.music_started = False

        self.enabled = self._init_mixer()
        if self.enabled:
            self.load_assets()

        DebugLogger.init_entry("SoundManager", "OK" if self.enabled else "FAIL")

    # ===========================================================
    # Setup
    # ===========================================================

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            return True
        except pygame.error as e:
            DebugLogger.warn(f"Audio device unavailable: {e}", category="audio")
            return False

    def _path(self, relative):
        return os.path.join(self.asset_root, relative)

    def load_assets(self):
        for name, path in self.ASSET_PATHS["sfx"].items():
            self.load_sfx(name, self._path(path))

    def load_sfx(self, name, route):
        try:
            sound = pygame.mixer.Sound(route)
        except (pygame.error, FileNotFoundError) as e:
            DebugLogger.warn(f"Could not load cue '{name}' from {route}: {e}", category="audio")
            return
        sound.set_volume(self._effective(self.sfx_volume))
        self.sfx[name] = sound

    # ===========================================================
    # Playback
    # ===========================================================

    def play(self, cue):
        """Restart the cue from the beginning."""
        sound = self.sfx.get(cue)
        if sound is None:
            return
        try:
            sound.stop()
            sound.set_volume(self._effective(self.sfx_volume))
            sound.play()
        except pygame.error as e:
            DebugLogger.warn(f"Cue '{cue}' failed: {e}", category="audio")

    def ensure_music(self):
        """Start the looping track once; a failed attempt is retried next call."""
        if self.music_started or not self.enabled:
            return
        try:
            pygame.mixer.music.load(self._path(self.ASSET_PATHS["bgm"]))
            pygame.mixer.music.set_volume(self._effective(self.bgm_volume))
            pygame.mixer.music.play(loops=-1)
            self.music_started = True
            DebugLogger.system("Background music started", category="audio")
        except (pygame.error, FileNotFoundError) as e:
            self.music_started = False
            DebugLogger.warn(f"Background music failed: {e}", category="audio")

    def stop_music(self):
        if not self.enabled:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error:
            pass
        self.music_started = False

    # ===========================================================
    # Volume
    # ===========================================================

    def set_volume(self, channel, level):
        level = self._clamp(level)
        if channel == Channel.EFFECTS:
            self.sfx_volume = level
            for sound in self.sfx.values():
                sound.set_volume(self._effective(level))
        elif channel == Channel.BACKGROUND:
            self.bgm_volume = level
            if self.enabled:
                try:
                    pygame.mixer.music.set_volume(self._effective(level))
                except pygame.error as e:
                    DebugLogger.warn(f"Could not set music volume: {e}", category="audio")
        else:
            DebugLogger.warn(f"Unknown volume channel '{channel}'", category="audio")
            return
        DebugLogger.trace(f"{channel} volume -> {level:.1f}", category="audio")

    def _effective(self, level):
        return 0.0 if self.muted else level

    @staticmethod
    def _clamp(level):
        return min(max(float(level), 0.0), 1.0)
