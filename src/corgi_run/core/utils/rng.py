"""
rng.py
------
Uniform sampling helpers shared by the spawner and the dust emitter.

Both functions take an optional ``rng`` so a seeded ``random.Random`` can be
injected; the module-level ``random`` functions are used otherwise.
"""

import random


def uniform(min_value: float, max_value: float, rng=random) -> float:
    """Return a real number in [min_value, max_value)."""
    return rng.random() * (max_value - min_value) + min_value


def choose_one(options, rng=random):
    """Uniformly pick one element from a non-empty sequence."""
    options = tuple(options)
    return options[int(rng.random() * len(options))]
