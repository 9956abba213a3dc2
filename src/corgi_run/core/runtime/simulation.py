"""
simulation.py
-------------
Per-frame simulation context for one run.

Responsibilities
----------------
- Own the player, obstacles, dust, spawner and run ledger.
- Advance everything by an explicit ``dt`` (no wall-clock sampling), so a
  fixed sequence of deltas and commands always replays the same run.
- Apply jump / slide commands between ticks.
- Produce immutable snapshots for rendering.

Tick order
----------
1. speed up
2. player gravity + ground clamp
3. dust emission and particle motion
4. per obstacle: scroll, score, collide, off-screen cleanup
5. spawn timer

A fatal hit ends the tick immediately; obstacles not yet visited are not
scrolled and the spawner does not run.
"""

import random

from corgi_run.audio.audio_port import Cue, SilentAudio
from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Bounds, Display
from corgi_run.core.runtime.run_state import RunState
from corgi_run.entities.player import Player
from corgi_run.graphics.render_adapter import (
    ObstacleView, ParticleView, PlayerView, WorldSnapshot,
)
from corgi_run.systems.collision.collision_manager import CollisionManager, CollisionResult
from corgi_run.systems.particle_manager import DustEmitter
from corgi_run.systems.physics import update_player
from corgi_run.systems.spawn_manager import ObstacleSpawner


class Simulation:
    """Explicit game-world context driven by update(dt) and command calls."""

    def __init__(self, audio=None, rng=random, field_width: float = Display.WIDTH):
        self.audio = audio or SilentAudio()
        self.rng = rng
        self.spawner = ObstacleSpawner(rng, field_width)
        self.dust = DustEmitter(rng)
        self.collisions = CollisionManager(self.audio)

        self.player = None
        self.obstacles = []
        self.run = None
        self.reset()

    def reset(self):
        """Fresh player, empty field, full lives, base speed."""
        self.player = Player()
        self.obstacles = []
        self.run = RunState()
        self.spawner.reset()
        self.dust.reset()
        DebugLogger.trace("Simulation reset", category="game_state")

    @property
    def particles(self):
        return self.dust.particles

    # ===========================================================
    # Tick
    # ===========================================================

    def update(self, dt: float) -> bool:
        """
        Advance the world by ``dt`` seconds.

        Returns:
            bool: True if lives ran out during this tick.
        """
        self.run.advance(dt)
        update_player(self.player, dt)
        self.dust.update(dt, self.player, self.run.game_speed)

        if self._update_obstacles(dt):
            return True

        self.spawner.update(dt, self.obstacles)
        return False

    def _update_obstacles(self, dt) -> bool:
        player = self.player
        run = self.run
        shift = run.game_speed * dt

        # Newest first; removal is by identity on the live list.
        for obstacle in reversed(list(self.obstacles)):
            obstacle.x -= shift

            if obstacle.right < player.x and obstacle.mark_passed():
                run.add_pass_reward()

            result = self.collisions.resolve(player, obstacle, run)
            if result is not CollisionResult.MISS:
                self.obstacles.remove(obstacle)
                if result is CollisionResult.FATAL:
                    return True
                continue

            if obstacle.right < Bounds.OBSTACLE_CLEANUP_X:
                self.obstacles.remove(obstacle)

        return False

    # ===========================================================
    # Commands
    # ===========================================================

    def jump(self) -> bool:
        if not self.player.jump():
            DebugLogger.trace(f"Jump ignored: {self.player}", category="input")
            return False
        self.audio.play(Cue.JUMP)
        return True

    def start_slide(self) -> bool:
        return self.player.start_slide()

    def end_slide(self) -> bool:
        return self.player.end_slide()

    # ===========================================================
    # Snapshot
    # ===========================================================

    def snapshot(self, anim_time: float = 0.0) -> WorldSnapshot:
        player = self.player
        return WorldSnapshot(
            player=PlayerView(player.rect, player.on_ground, player.is_sliding),
            obstacles=tuple(ObstacleView(o.kind, o.rect) for o in self.obstacles),
            particles=tuple(
                ParticleView(p.x, p.y, p.alpha, p.radius) for p in self.particles
            ),
            anim_time=anim_time,
            score=self.run.score,
            lives=self.run.lives,
            max_lives=self.run.max_lives,
        )
