import itertools

import pytest

from dodge.entities import Obstacle, Player
from dodge.geometry import clamp, overlaps


def box(x, y, w, h):
    return Obstacle(x=x, y=y, width=w, height=h, speed=0)


def test_overlapping_boxes():
    assert overlaps(box(0, 0, 10, 10), box(5, 5, 10, 10))


def test_contained_box_overlaps():
    assert overlaps(box(0, 0, 100, 100), box(40, 40, 5, 5))


@pytest.mark.parametrize("other", [box(10, 0, 10, 10), box(0, 10, 10, 10), box(10, 10, 4, 4)])
def test_touching_edges_count(other):
    assert overlaps(box(0, 0, 10, 10), other)


@pytest.mark.parametrize("other", [box(10.5, 0, 10, 10), box(0, -20, 10, 10), box(-30, 40, 10, 10)])
def test_separated_boxes(other):
    assert not overlaps(box(0, 0, 10, 10), other)


def test_works_on_player_and_obstacle():
    p = Player(x=50, y=260, width=34, height=34)
    assert overlaps(p, box(60, 250, 20, 20))
    assert not overlaps(p, box(60, 100, 20, 20))


def test_symmetric():
    coords = [-15, 0, 7.5, 20]
    sizes = [0, 5, 30]
    boxes = [box(x, y, w, w) for x, y, w in itertools.product(coords, coords, sizes)]
    for a, b in itertools.product(boxes, repeat=2):
        assert overlaps(a, b) == overlaps(b, a)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    # empty range: lower bound wins
    assert clamp(3, 4, -30) == 4
