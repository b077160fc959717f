"""
Live reproduction: build the next generation in one ordered pass.

- dead life forms (energy <= 0) are dropped
- life forms at or above the reproduction threshold split their energy with
  one mutated offspring, placed right after the parent
- everyone else carries over unchanged

A birth only happens while the next generation still has room for the parent,
the offspring and every living life form not yet placed, so offspring never
push an existing survivor out.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

import config
from evolution.mutate import mutate_speed_factor
from organism.lifeform import LifeForm
from world.bounded import BoundedList
from world.spawner import Spawner


@dataclass
class Generation:
    life_forms: BoundedList[LifeForm]
    births: int = 0
    deaths: int = 0


def jitter_position(spawner: Spawner, lf: LifeForm, jitter: float) -> tuple[float, float]:
    rng = spawner.rng
    dx = (rng.random() - 0.5) * 2.0 * jitter
    dy = (rng.random() - 0.5) * 2.0 * jitter
    return (lf.x + dx, lf.y + dy)


def spawn_child(spawner: Spawner, parent: LifeForm, into: BoundedList[LifeForm]) -> Optional[LifeForm]:
    """
    Spawn a mutated offspring carrying half the parent's energy.
    The parent itself is left untouched; the caller halves it once the
    generation is complete.
    """
    speed_factor = mutate_speed_factor(spawner.rng, parent.speed_factor)
    position = jitter_position(spawner, parent, config.CHILD_SPAWN_JITTER)
    return spawner.spawn_life_form(position, parent.energy / 2.0, speed_factor, parent.color, into=into)


def next_generation(
    life_forms: Iterable[LifeForm],
    spawner: Spawner,
    capacity: int = config.MAX_LIFE_FORMS,
) -> Generation:
    """
    Build the next generation without modifying any current life form until
    it is complete, so a failure part way leaves the population as it was.
    """
    current = list(life_forms)
    gen = Generation(life_forms=BoundedList(capacity))
    living_left = sum(1 for lf in current if lf.alive)
    parents: List[LifeForm] = []

    for lf in current:
        if not lf.alive:
            gen.deaths += 1
            continue
        living_left -= 1

        gen.life_forms.append(lf)
        # room for this parent's offspring plus everyone still to be placed
        if lf.energy >= config.REPRODUCTION_THRESHOLD and gen.life_forms.free >= 1 + living_left:
            if spawn_child(spawner, lf, into=gen.life_forms) is not None:
                parents.append(lf)
                gen.births += 1

    for lf in parents:
        lf.energy /= 2.0

    return gen
