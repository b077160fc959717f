"""
particle_life module: evolution/mutate.py

Mutation operator for the single heritable trait (speed factor).
"""

from __future__ import annotations
import random

import config
from world.physics import clamp


def mutate_speed_factor(
    rng: random.Random,
    parent: float,
    spread: float = config.MUTATION_RANGE,
    bounds: tuple[float, float] = config.SPEED_FACTOR_RANGE,
) -> float:
    """
    Add a uniform perturbation in [-spread, +spread] and clamp to ``bounds``.
    """
    child = parent + (rng.random() - 0.5) * 2.0 * spread
    return clamp(child, bounds[0], bounds[1])
