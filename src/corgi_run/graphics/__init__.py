"""Render adapter interface and snapshot views. The pygame renderer lives in draw_manager."""

from corgi_run.graphics.render_adapter import (
    RenderAdapter, WorldSnapshot, PlayerView, ObstacleView, ParticleView,
)

__all__ = ['RenderAdapter', 'WorldSnapshot', 'PlayerView', 'ObstacleView', 'ParticleView']
