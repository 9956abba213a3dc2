"""
obstacle.py
-----------
Scrolling obstacle record: hazards and heart pickups share one shape.
"""

from corgi_run.core.runtime.game_settings import Ground
from corgi_run.core.utils.rect import Rect
from corgi_run.entities.entity_types import OBSTACLE_SPECS, ObstacleKind


class Obstacle:
    """A single obstacle moving left across the field."""

    __slots__ = ("kind", "x", "y", "width", "height", "passed")

    def __init__(self, kind: ObstacleKind, x: float, y: float, width: float, height: float):
        self.kind = kind
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.passed = False

    @classmethod
    def from_kind(cls, kind: ObstacleKind, x: float, extra_lift: float = 0.0) -> "Obstacle":
        """Build an obstacle with the kind's fixed size and ground placement."""
        spec = OBSTACLE_SPECS[kind]
        y = Ground.Y - spec.lift - extra_lift
        return cls(kind, x, y, spec.width, spec.height)

    @property
    def right(self) -> float:
        """Trailing edge as it scrolls left."""
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def mark_passed(self) -> bool:
        """Flip ``passed`` once. Pickups are never marked."""
        if self.passed or self.kind.is_pickup:
            return False
        self.passed = True
        return True

    def __repr__(self):
        return f"Obstacle({self.kind.value}, x={self.x:.1f}, y={self.y:.1f})"
