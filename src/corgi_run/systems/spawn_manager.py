"""
spawn_manager.py
----------------
Timed obstacle generator.

Responsibilities
----------------
- Accumulate the spawn timer and fire when the sampled deadline is reached.
- Pick a heart (fixed chance) or one of the three hazards uniformly.
- Place every obstacle just past the right edge of the field.
"""

import random

from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Display, Spawn
from corgi_run.core.utils.rng import choose_one, uniform
from corgi_run.entities.entity_types import HAZARD_KINDS, ObstacleKind
from corgi_run.entities.obstacle import Obstacle


class ObstacleSpawner:
    """Spawns obstacles into a shared list on a randomized cadence."""

    def __init__(self, rng=random, field_width: float = Display.WIDTH):
        """
        Args:
            rng: Random source (module ``random`` or a seeded ``random.Random``)
            field_width: Width of the visible field; spawns start past it
        """
        self.rng = rng
        self.spawn_x = field_width + Spawn.X_OFFSET
        self.timer = 0.0
        self.next_spawn_time = 0.0
        self._spawn_stats = {kind: 0 for kind in ObstacleKind}
        self.reset()

    def reset(self):
        self.timer = 0.0
        self.next_spawn_time = self._sample_interval()

    def _sample_interval(self) -> float:
        return uniform(Spawn.INTERVAL_MIN, Spawn.INTERVAL_MAX, self.rng)

    # ===========================================================
    # Timing
    # ===========================================================

    def update(self, dt, obstacles) -> Obstacle | None:
        """Advance the timer; spawn into ``obstacles`` when it is due."""
        self.timer += dt
        if self.timer < self.next_spawn_time:
            return None

        obstacle = self.spawn()
        obstacles.append(obstacle)
        self.timer = 0.0
        self.next_spawn_time = self._sample_interval()
        return obstacle

    # ===========================================================
    # Spawning
    # ===========================================================

    def spawn(self) -> Obstacle:
        """Create one obstacle. Does not touch the timer."""
        if self.rng.random() < Spawn.HEART_CHANCE:
            rise = uniform(Spawn.HEART_RISE_MIN, Spawn.HEART_RISE_MAX, self.rng)
            obstacle = Obstacle.from_kind(ObstacleKind.HEART, self.spawn_x, extra_lift=rise)
        else:
            kind = choose_one(HAZARD_KINDS, self.rng)
            obstacle = Obstacle.from_kind(kind, self.spawn_x)

        self._spawn_stats[obstacle.kind] += 1
        DebugLogger.trace(f"Spawned {obstacle}", category="spawn")
        return obstacle

    def get_stats(self):
        return {kind.value: count for kind, count in self._spawn_stats.items()}
