import random

import pytest

from dodge.spawner import spawn_obstacle


class FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_obstacle_starts_above_and_inside():
    rng = random.Random(7)
    for _ in range(500):
        o = spawn_obstacle(400, 0, rng)
        assert 28 <= o.width < 58
        assert o.width == o.height
        assert 0 <= o.x <= 400 - o.width
        assert o.y == -o.width


def test_speed_grows_with_elapsed():
    early = spawn_obstacle(400, 0, FixedRng(0.5))
    late = spawn_obstacle(400, 30, FixedRng(0.5))
    assert early.speed == pytest.approx(260)
    assert late.speed == pytest.approx(260 + 300)


def test_extreme_draws():
    low = spawn_obstacle(400, 0, FixedRng(0.0))
    assert (low.x, low.width, low.speed) == (0, 28, 160)
    high = spawn_obstacle(400, 0, FixedRng(0.999999))
    assert high.x + high.width <= 400
    assert high.speed < 360


def test_narrow_area_pins_to_left_edge():
    o = spawn_obstacle(10, 0, FixedRng(0.9))
    assert o.x == 0
