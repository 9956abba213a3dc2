"""Audio port and its pygame.mixer implementation."""

from corgi_run.audio.audio_port import AudioPort, SilentAudio, Cue, Channel

__all__ = ['AudioPort', 'SilentAudio', 'Cue', 'Channel']
