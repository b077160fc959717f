"""
particle_life module: world/spawner.py

The only entry point for new life forms and food. Requests made while a
collection is at capacity are dropped.
"""

from __future__ import annotations
import logging
import random
from typing import Optional, Tuple

import config
from organism.lifeform import Color, LifeForm
from world.bounded import BoundedList
from world.food import Food
from world.physics import random_velocity
from world.world import SimulationState

logger = logging.getLogger(__name__)


class Spawner:
    def __init__(self, state: SimulationState, rng: random.Random):
        self.state = state
        self.rng = rng

    def random_position(self) -> Tuple[float, float]:
        return (self.rng.random() * self.state.w, self.rng.random() * self.state.h)

    def random_color(self) -> Color:
        return (self.rng.randint(0, 255), self.rng.randint(0, 255), self.rng.randint(0, 255))

    def make_life_form(
        self,
        position: Tuple[float, float],
        energy: float,
        speed_factor: float,
        color: Color,
    ) -> LifeForm:
        x, y = position
        vx, vy = random_velocity(self.rng, speed_factor)
        lf = LifeForm(
            x=x,
            y=y,
            vx=vx,
            vy=vy,
            energy=energy,
            speed_factor=speed_factor,
            id=self.state.next_id,
            color=color,
        )
        self.state.next_id += 1
        return lf

    def spawn_life_form(
        self,
        position: Tuple[float, float],
        energy: float,
        speed_factor: float,
        color: Color,
        into: Optional[BoundedList[LifeForm]] = None,
    ) -> Optional[LifeForm]:
        """
        Add a life form with a random initial heading.

        ``into`` selects the target collection (defaults to the live
        population). Returns None when the target is full.
        """
        target = self.state.life_forms if into is None else into
        if target.full:
            logger.debug("life form capacity (%d) reached, spawn dropped", target.capacity)
            return None
        lf = self.make_life_form(position, energy, speed_factor, color)
        target.append(lf)
        return lf

    def spawn_food(self, position: Tuple[float, float]) -> Optional[Food]:
        foods = self.state.foods
        if foods.full:
            logger.debug("food capacity (%d) reached, spawn dropped", foods.capacity)
            return None
        x, y = position
        f = Food(x=x, y=y)
        foods.append(f)
        return f

    def seed_initial(
        self,
        n_life_forms: int = config.INITIAL_LIFE_FORMS,
        n_food: int = config.INITIAL_FOOD_SOURCES,
    ) -> None:
        for _ in range(n_life_forms):
            color = self.random_color()
            self.spawn_life_form(
                self.random_position(),
                energy=config.MAX_ENERGY / 2.0,
                speed_factor=1.0,
                color=color,
            )

        for _ in range(n_food):
            self.spawn_food(self.random_position())

        logger.info(
            "seeded %d life forms and %d food items",
            self.state.life_form_count,
            self.state.food_count,
        )
