import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from organism.lifeform import LifeForm
from world.spawner import Spawner
from world.stepper import Stepper
from world.world import SimulationState


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def state() -> SimulationState:
    """Empty default-sized world."""
    return SimulationState.create()


@pytest.fixture
def spawner(state, rng) -> Spawner:
    return Spawner(state, rng)


@pytest.fixture
def stepper(state, rng, spawner) -> Stepper:
    return Stepper(state, rng, spawner=spawner)


def place_life_form(state: SimulationState, x: float, y: float, energy: float = 50.0, **kw) -> LifeForm:
    """Put a life form at an exact spot with zero velocity."""
    lf = LifeForm(x=x, y=y, energy=energy, id=state.next_id, **kw)
    state.next_id += 1
    assert state.life_forms.append(lf)
    return lf
