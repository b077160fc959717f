import config
from world.world import SimulationState
from world.spawner import Spawner


def test_spawn_life_form_sets_fields(spawner, state):
    lf = spawner.spawn_life_form((10.0, 20.0), energy=42.0, speed_factor=1.5, color=(1, 2, 3))
    assert lf is not None
    assert state.life_form_count == 1
    assert (lf.x, lf.y, lf.energy, lf.speed_factor, lf.color) == (10.0, 20.0, 42.0, 1.5, (1, 2, 3))
    limit = 0.5 * config.MAX_SPEED * 1.5
    assert abs(lf.vx) <= limit
    assert abs(lf.vy) <= limit


def test_ids_increase(spawner):
    a = spawner.spawn_life_form((0.0, 0.0), 10.0, 1.0, (0, 0, 0))
    b = spawner.spawn_life_form((0.0, 0.0), 10.0, 1.0, (0, 0, 0))
    assert b.id == a.id + 1


def test_spawn_is_noop_when_full(rng):
    state = SimulationState.create(max_life_forms=2, max_food=1)
    spawner = Spawner(state, rng)
    for _ in range(5):
        spawner.spawn_life_form((1.0, 1.0), 10.0, 1.0, (0, 0, 0))
    assert state.life_form_count == 2

    assert spawner.spawn_food((3.0, 3.0)) is not None
    assert spawner.spawn_food((4.0, 4.0)) is None
    assert state.food_count == 1
    assert state.foods[0].pos == (3.0, 3.0)


def test_seed_initial(spawner, state):
    spawner.seed_initial()
    assert state.life_form_count == config.INITIAL_LIFE_FORMS
    assert state.food_count == config.INITIAL_FOOD_SOURCES
    for lf in state.life_forms:
        assert lf.energy == config.MAX_ENERGY / 2.0
        assert lf.speed_factor == 1.0
        assert 0.0 <= lf.x <= state.w
        assert 0.0 <= lf.y <= state.h
        assert all(0 <= c <= 255 for c in lf.color)
    for f in state.foods:
        assert f.present
        assert 0.0 <= f.x <= state.w
        assert 0.0 <= f.y <= state.h


def test_seed_initial_respects_capacity(rng):
    state = SimulationState.create(max_life_forms=3, max_food=4)
    Spawner(state, rng).seed_initial()
    assert state.life_form_count == 3
    assert state.food_count == 4
