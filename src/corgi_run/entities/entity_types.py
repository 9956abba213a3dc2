"""
entity_types.py
---------------
Obstacle kinds and their fixed geometry.

Each kind has a fixed size and a vertical placement measured upward from
the ground line: ``y = Ground.Y - lift``. Hearts add a random rise on top
of their lift at spawn time.
"""

from dataclasses import dataclass
from enum import Enum

from corgi_run.core.runtime.game_settings import PlayerConfig


class ObstacleKind(Enum):
    """Tag for everything that scrolls toward the player."""
    BIRD = "bird"
    LOG_HORIZONTAL = "log_h"
    LOG_VERTICAL = "log_v"
    HEART = "heart"

    @property
    def is_pickup(self) -> bool:
        return self is ObstacleKind.HEART

    @property
    def is_hazard(self) -> bool:
        return self is not ObstacleKind.HEART


@dataclass(frozen=True)
class ObstacleSpec:
    width: float
    height: float
    lift: float


OBSTACLE_SPECS = {
    # Flies at head height: standing player is hit, sliding player passes under.
    ObstacleKind.BIRD: ObstacleSpec(75, 55, PlayerConfig.BASE_HEIGHT + 40),
    # Sinks 10 into the grass.
    ObstacleKind.LOG_HORIZONTAL: ObstacleSpec(130, 45, 45 - 10),
    # Sinks 25 into the grass.
    ObstacleKind.LOG_VERTICAL: ObstacleSpec(80, 100, 100 - 25),
    ObstacleKind.HEART: ObstacleSpec(45, 45, PlayerConfig.BASE_HEIGHT),
}

HAZARD_KINDS = (
    ObstacleKind.LOG_HORIZONTAL,
    ObstacleKind.LOG_VERTICAL,
    ObstacleKind.BIRD,
)
