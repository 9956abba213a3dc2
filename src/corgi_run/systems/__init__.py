"""
corgi_run/systems/__init__.py
-----------------------------
Per-tick simulation systems: player physics, dust, spawning and collisions.
"""

from corgi_run.systems.physics import update_player
from corgi_run.systems.particle_manager import DustEmitter
from corgi_run.systems.spawn_manager import ObstacleSpawner
from corgi_run.systems.collision import CollisionManager, CollisionResult

__all__ = [
    'update_player',
    'DustEmitter',
    'ObstacleSpawner',
    'CollisionManager',
    'CollisionResult',
]
