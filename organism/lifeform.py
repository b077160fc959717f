"""
particle_life module: organism/lifeform.py

Single-body life form: a disc with a heading, an energy store and one
heritable trait (speed factor).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import config

Color = Tuple[int, int, int]


@dataclass
class LifeForm:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    energy: float = 50.0
    speed_factor: float = 1.0
    id: int = 0  # informational only
    color: Color = (255, 255, 255)

    @property
    def alive(self) -> bool:
        return self.energy > 0.0

    @property
    def max_speed(self) -> float:
        return config.MAX_SPEED * self.speed_factor

    @property
    def energy_fraction(self) -> float:
        return self.energy / config.MAX_ENERGY

    def move(self) -> None:
        self.x += self.vx
        self.y += self.vy
