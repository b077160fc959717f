import random

import pytest

from evolution.mutate import mutate_speed_factor


@pytest.mark.parametrize("parent", [0.5, 1.0, 1.95, 2.0])
def test_mutation_stays_in_range(parent):
    rng = random.Random(int(parent * 100))
    for _ in range(500):
        child = mutate_speed_factor(rng, parent)
        assert 0.5 <= child <= 2.0
        assert abs(child - parent) <= 0.2 + 1e-12


def test_mutation_clamps_low():
    class Low:
        def random(self):
            return 0.0

    assert mutate_speed_factor(Low(), 0.55) == 0.5
