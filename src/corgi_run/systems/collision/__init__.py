from corgi_run.systems.collision.collision_manager import CollisionManager, CollisionResult

__all__ = ['CollisionManager', 'CollisionResult']
