"""
render_adapter.py
-----------------
Read-only world snapshot and the interface that turns it into a frame.

Renderers never see live entities, only these immutable views.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from corgi_run.core.utils.rect import Rect
from corgi_run.entities.entity_types import ObstacleKind


@dataclass(frozen=True)
class PlayerView:
    rect: Rect
    on_ground: bool
    is_sliding: bool


@dataclass(frozen=True)
class ObstacleView:
    kind: ObstacleKind
    rect: Rect


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    alpha: float
    radius: float


@dataclass(frozen=True)
class WorldSnapshot:
    """Everything a renderer needs for one frame."""
    player: PlayerView
    obstacles: Tuple[ObstacleView, ...]
    particles: Tuple[ParticleView, ...]
    anim_time: float
    score: int
    lives: int
    max_lives: int


class RenderAdapter(ABC):
    """Produces a visual frame from a snapshot. Must not mutate game state."""

    @abstractmethod
    def render(self, snapshot: WorldSnapshot) -> None:
        ...
