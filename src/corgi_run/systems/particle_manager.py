"""
particle_manager.py
-------------------
Dust trail emitted behind the running player.

Usage:
    dust = DustEmitter()
    dust.update(dt, player, game_speed)
    for p in dust.particles: ...
"""

import random

from corgi_run.core.runtime.game_settings import Dust, Ground
from corgi_run.core.utils.rng import uniform
from corgi_run.entities.particle import Particle


class DustEmitter:
    """Timed emitter plus the live particle list."""

    def __init__(self, rng=random, interval: float = Dust.EMIT_INTERVAL):
        self.rng = rng
        self.interval = interval
        self.timer = 0.0
        self.particles = []

    def reset(self):
        self.timer = 0.0
        self.particles.clear()

    def update(self, dt, player, game_speed):
        """Emit while running on the ground, then move and expire particles."""
        if player.on_ground and not player.is_sliding:
            self.timer += dt
            if self.timer >= self.interval:
                # Zeroed, not decremented: at most one particle per tick.
                self.timer = 0.0
                self.emit(player, game_speed)

        self.particles = [p for p in self.particles if p.update(dt)]

    def emit(self, player, game_speed) -> Particle:
        particle = Particle(
            x=player.x + Dust.OFFSET_X,
            y=Ground.Y - Dust.OFFSET_Y,
            vx=-game_speed * Dust.SPEED_FACTOR,
            vy=uniform(Dust.VY_MIN, Dust.VY_MAX, self.rng),
            radius=uniform(Dust.RADIUS_MIN, Dust.RADIUS_MAX, self.rng),
        )
        self.particles.append(particle)
        return particle

    def __len__(self):
        return len(self.particles)
