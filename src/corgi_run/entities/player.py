"""
player.py
---------
The running corgi: fixed x, vertical motion, jump charges and slide pose.

Responsibilities
----------------
- Hold the player's rectangle, vertical velocity and ground/slide flags.
- Apply jump and slide commands (no-ops when not allowed).
- Keep feet on the ground line whenever the height changes.

Gravity and landing are integrated by systems.physics.
"""

from corgi_run.core.runtime.game_settings import Ground, Physics, PlayerConfig
from corgi_run.core.utils.rect import Rect


class Player:
    """Player state record with its pose commands."""

    __slots__ = (
        "x", "y", "width", "height", "base_height",
        "vy", "jumps_left", "max_jumps", "on_ground", "is_sliding",
    )

    def __init__(
        self,
        x: float = PlayerConfig.X,
        width: float = PlayerConfig.BASE_WIDTH,
        height: float = PlayerConfig.BASE_HEIGHT,
        max_jumps: int = PlayerConfig.MAX_JUMPS,
    ):
        self.x = x
        self.width = width
        self.base_height = height
        self.height = height
        self.y = Ground.Y - height
        self.vy = 0.0
        self.max_jumps = max_jumps
        self.jumps_left = max_jumps
        self.on_ground = True
        self.is_sliding = False

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def ground_y(self) -> float:
        """Top coordinate that puts the feet on the ground line."""
        return Ground.Y - self.height

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def hitbox(self, inset: float = PlayerConfig.HITBOX_INSET) -> Rect:
        """Collision box, shrunk on every side for forgiving contact."""
        return self.rect.inset(inset)

    def _set_height(self, height: float):
        self.height = height
        self.y = self.ground_y

    # ===========================================================
    # Commands
    # ===========================================================

    def jump(self) -> bool:
        """Spend a jump charge. Returns False when the jump was ignored."""
        if self.jumps_left <= 0 or self.is_sliding:
            return False

        self.vy = -Physics.JUMP_POWER
        self.on_ground = False
        self.jumps_left -= 1
        return True

    def start_slide(self) -> bool:
        if not self.on_ground or self.is_sliding:
            return False

        self.is_sliding = True
        self._set_height(self.base_height * PlayerConfig.SLIDE_SCALE)
        return True

    def end_slide(self) -> bool:
        if not self.is_sliding:
            return False

        self.is_sliding = False
        self._set_height(self.base_height)
        return True

    def __repr__(self):
        return (f"Player(y={self.y:.1f}, h={self.height:.0f}, vy={self.vy:.1f}, "
                f"jumps={self.jumps_left}, ground={self.on_ground}, slide={self.is_sliding})")
