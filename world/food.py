"""
particle_life module: world/food.py

Food items are fixed points; an eaten item is flagged absent and pruned at
the end of the feeding phase.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass
class Food:
    x: float
    y: float
    present: bool = True

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)


def nearest_food(foods: Iterable[Food], x: float, y: float) -> Optional[Food]:
    """
    Returns the nearest present food item, or None if there is none.
    Ties keep the first item encountered.
    """
    best = None
    best_d2 = float("inf")
    for f in foods:
        if not f.present:
            continue
        dx = f.x - x
        dy = f.y - y
        d2 = dx * dx + dy * dy
        if d2 < best_d2:
            best_d2 = d2
            best = f
    return best
