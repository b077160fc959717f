"""
particle_life module: world/stepper.py

Advances the simulation by one tick. Phases run strictly in order over the
whole population:

1. per-life-form update (energy drain, movement, walls, seeking)
2. feeding, then food compaction
3. reproduction/death, swapping in the next generation
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass

import config
from evolution.reproduction import next_generation
from organism.lifeform import LifeForm
from world.food import nearest_food
from world.physics import (
    bounce_off_walls,
    clamp,
    distance_sq,
    random_velocity,
    steer_towards,
)
from world.spawner import Spawner
from world.world import SimulationState

logger = logging.getLogger(__name__)


@dataclass
class TickStats:
    tick: int
    population: int
    food: int
    births: int = 0
    deaths: int = 0
    eaten: int = 0
    respawned: int = 0


class Stepper:
    def __init__(self, state: SimulationState, rng: random.Random, spawner: Spawner | None = None):
        self.state = state
        self.rng = rng
        self.spawner = spawner if spawner is not None else Spawner(state, rng)

        self.tick = 0
        self.births = 0
        self.deaths = 0

    def update_life_form(self, lf: LifeForm) -> None:
        lf.energy -= config.ENERGY_LOSS_PER_STEP

        lf.move()
        bounce_off_walls(lf, self.state.w, self.state.h)

        target = nearest_food(self.state.foods, lf.x, lf.y)
        if target is not None:
            steer_towards(lf, target.x, target.y)
        elif self.rng.random() < config.WANDER_CHANCE:
            lf.vx, lf.vy = random_velocity(self.rng, lf.speed_factor)

        lf.energy = clamp(lf.energy, 0.0, config.MAX_ENERGY)

    def handle_interactions(self) -> tuple[int, int]:
        """
        Feed every life form on every present food item it touches.
        Energy is left unclamped until the next tick's update.

        Returns (eaten, respawned).
        """
        reach2 = (config.LIFE_FORM_RADIUS + config.FOOD_RADIUS) ** 2
        eaten = 0
        respawned = 0

        for lf in self.state.life_forms:
            # respawned food is appended to the same list and may be eaten this tick
            for f in self.state.foods:
                if not f.present:
                    continue
                if distance_sq(lf.x, lf.y, f.x, f.y) < reach2:
                    lf.energy += config.ENERGY_GAIN_FROM_FOOD
                    f.present = False
                    eaten += 1
                    if self.rng.random() < config.FOOD_RESPAWN_CHANCE:
                        if self.spawner.spawn_food(self.spawner.random_position()) is not None:
                            respawned += 1

        self.state.foods.compact(lambda f: f.present)
        return eaten, respawned

    def turnover(self) -> tuple[int, int]:
        """
        Replace the population with its next generation. Returns (births, deaths).
        """
        next_id = self.state.next_id
        try:
            gen = next_generation(self.state.life_forms, self.spawner, self.state.life_forms.capacity)
        except MemoryError:
            logger.error("could not build next generation at tick %d; keeping current population", self.tick)
            self.state.next_id = next_id
            # no births this tick, but the dead still go
            deaths = self.state.life_forms.compact(lambda lf: lf.alive)
            return 0, deaths

        self.state.life_forms = gen.life_forms
        return gen.births, gen.deaths

    def step(self) -> TickStats:
        for lf in self.state.life_forms:
            self.update_life_form(lf)

        eaten, respawned = self.handle_interactions()
        births, deaths = self.turnover()

        self.tick += 1
        self.births += births
        self.deaths += deaths

        stats = TickStats(
            tick=self.tick,
            population=self.state.life_form_count,
            food=self.state.food_count,
            births=births,
            deaths=deaths,
            eaten=eaten,
            respawned=respawned,
        )
        logger.debug("%s", stats)
        return stats
