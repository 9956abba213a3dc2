"""
collision_manager.py
--------------------
Player-versus-obstacle collision handling.

Responsibilities
----------------
- Test the player's inset hitbox against an obstacle rectangle.
- Apply the game rule for the obstacle kind (heart restores a life up to
  the cap, hazards cost one).
- Request the matching audio cue.

The caller removes the obstacle for any result other than MISS.
"""

from enum import Enum

from corgi_run.audio.audio_port import Cue, SilentAudio
from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import PlayerConfig
from corgi_run.core.utils.rect import overlaps


class CollisionResult(Enum):
    MISS = "miss"
    PICKUP = "pickup"
    HAZARD = "hazard"
    FATAL = "fatal"


class CollisionManager:
    """Detects player contact and applies heart/hazard rules."""

    def __init__(self, audio=None, hitbox_inset: float = PlayerConfig.HITBOX_INSET):
        self.audio = audio or SilentAudio()
        self.hitbox_inset = hitbox_inset

    def check(self, player, obstacle) -> bool:
        return overlaps(player.hitbox(self.hitbox_inset), obstacle.rect)

    def resolve(self, player, obstacle, run) -> CollisionResult:
        """Apply the collision rule for one obstacle, if it touches the player."""
        if not self.check(player, obstacle):
            return CollisionResult.MISS

        if obstacle.kind.is_pickup:
            gained = run.gain_life()
            # The cue plays even when lives were already capped.
            self.audio.play(Cue.HEART)
            DebugLogger.trace(
                f"Heart collected (lives={run.lives}{'' if gained else ', capped'})"
            )
            return CollisionResult.PICKUP

        over = run.lose_life()
        self.audio.play(Cue.HIT)
        DebugLogger.system(f"Hit {obstacle.kind.value} (lives={run.lives})", category="collision")
        return CollisionResult.FATAL if over else CollisionResult.HAZARD
