"""
corgi_run/entities/__init__.py
------------------------------
Entity module exports.

Plain data records mutated by the simulation systems. No pygame imports.

Exports:
    ObstacleKind - Tag for bird, horizontal log, vertical log and heart
    Player       - The runner, with jump and slide commands
    Obstacle     - Scrolling hazard or pickup
    Particle     - Cosmetic dust
"""

from corgi_run.entities.entity_types import ObstacleKind, OBSTACLE_SPECS, HAZARD_KINDS
from corgi_run.entities.player import Player
from corgi_run.entities.obstacle import Obstacle
from corgi_run.entities.particle import Particle

__all__ = [
    'ObstacleKind',
    'OBSTACLE_SPECS',
    'HAZARD_KINDS',
    'Player',
    'Obstacle',
    'Particle',
]
