"""
particle.py
-----------
Cosmetic dust particle kicked up behind the running player.
"""

from corgi_run.core.runtime.game_settings import Dust


class Particle:
    """Individual particle with position, velocity, and fading alpha."""

    __slots__ = ("x", "y", "vx", "vy", "alpha", "radius")

    def __init__(self, x, y, vx, vy, radius, alpha=Dust.START_ALPHA):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.alpha = alpha
        self.radius = radius

    def update(self, dt):
        """Move, fall and fade. Returns False once fully transparent."""
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vy += Dust.GRAVITY * dt
        self.alpha -= Dust.FADE_RATE * dt
        return self.alpha > 0
