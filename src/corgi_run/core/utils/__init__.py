"""Shared helpers: uniform sampling and rectangle overlap."""

from corgi_run.core.utils.rng import uniform, choose_one
from corgi_run.core.utils.rect import Rect, overlaps

__all__ = ['uniform', 'choose_one', 'Rect', 'overlaps']
