import pytest

from dodge import settings
from dodge.difficulty import spawn_interval


def test_starting_cadence():
    assert spawn_interval(0) == pytest.approx(0.8)


def test_floor_reached():
    assert spawn_interval(100) == pytest.approx(0.25)
    assert spawn_interval(1e9) == settings.SPAWN_INTERVAL_FLOOR


def test_linear_between():
    assert spawn_interval(5) == pytest.approx(0.6)


def test_monotonic_and_floored():
    times = [i * 0.37 for i in range(400)]
    values = [spawn_interval(t) for t in times]
    for earlier, later in zip(values, values[1:]):
        assert later <= earlier
    assert min(values) >= settings.SPAWN_INTERVAL_FLOOR


def test_negative_elapsed_is_start():
    assert spawn_interval(-3) == spawn_interval(0)


def test_custom_curve():
    assert spawn_interval(10, start=2.0, floor=0.5, ramp=10.0) == pytest.approx(1.0)
