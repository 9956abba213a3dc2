"""
audio_port.py
-------------
Audio capability consumed by the game core.

The core only asks for named cues and volume changes; playback is
best-effort and never reports failure back.
"""

from abc import ABC, abstractmethod


class Cue:
    """Named sound cues."""
    JUMP = "jump"
    HIT = "hit"
    HEART = "heart"

    ALL = (JUMP, HIT, HEART)


class Channel:
    """Volume channels."""
    EFFECTS = "effects"
    BACKGROUND = "background"


class AudioPort(ABC):
    """Fire-and-forget audio service."""

    @abstractmethod
    def play(self, cue: str) -> None:
        """Play a named cue. Failures are swallowed."""

    @abstractmethod
    def set_volume(self, channel: str, level: float) -> None:
        """Set a channel volume in [0, 1]."""

    def ensure_music(self) -> None:
        """Start looping background music if it is not already playing."""


class SilentAudio(AudioPort):
    """No-op audio for headless runs."""

    def play(self, cue):
        pass

    def set_volume(self, channel, level):
        pass
