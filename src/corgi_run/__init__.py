"""Corgi Run: a side-scrolling obstacle-avoidance game."""

__version__ = "1.0.0"
