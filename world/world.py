"""
particle_life module: world/world.py

Simulation state container: bounded life-form and food collections plus the
world bounds.
"""

from __future__ import annotations
from dataclasses import dataclass

import config
from organism.lifeform import LifeForm
from world.bounded import BoundedList
from world.food import Food


@dataclass
class SimulationState:
    w: float
    h: float
    life_forms: BoundedList[LifeForm]
    foods: BoundedList[Food]
    next_id: int = 0

    @staticmethod
    def create(
        w: float = config.WORLD_W,
        h: float = config.WORLD_H,
        max_life_forms: int = config.MAX_LIFE_FORMS,
        max_food: int = config.MAX_FOOD_SOURCES,
    ) -> "SimulationState":
        return SimulationState(
            w=w,
            h=h,
            life_forms=BoundedList(max_life_forms),
            foods=BoundedList(max_food),
        )

    @property
    def life_form_count(self) -> int:
        return len(self.life_forms)

    @property
    def food_count(self) -> int:
        return len(self.foods)

    def mean_energy(self) -> float:
        if not self.life_forms:
            return 0.0
        return sum(lf.energy for lf in self.life_forms) / len(self.life_forms)

    def mean_speed_factor(self) -> float:
        if not self.life_forms:
            return 0.0
        return sum(lf.speed_factor for lf in self.life_forms) / len(self.life_forms)
