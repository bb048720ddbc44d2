import math
import random

import pytest

from game.arena.utils import (
    ScreenBox,
    clamp,
    direction_from_pointer,
    is_colliding,
    normalize,
    random_direction,
)


def test_touching_edges_collide():
    assert is_colliding(ScreenBox(0, 0, 10), ScreenBox(20, 0, 10))


def test_just_apart_does_not_collide():
    assert not is_colliding(ScreenBox(0, 0, 10), ScreenBox(20.001, 0, 10))


def test_needs_overlap_on_both_axes():
    assert not is_colliding(ScreenBox(0, 0, 10), ScreenBox(5, 30, 10))
    assert is_colliding(ScreenBox(0, 0, 10), ScreenBox(5, 19, 10))


def test_collision_is_symmetric():
    rng = random.Random(7)
    for _ in range(500):
        a = ScreenBox(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(0, 30))
        b = ScreenBox(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(0, 30))
        assert is_colliding(a, b) == is_colliding(b, a)


def test_normalize_unit_length():
    x, y = normalize(3.0, 4.0)
    assert (x, y) == pytest.approx((0.6, 0.8))


def test_normalize_zero_vector_is_zero():
    assert normalize(0.0, 0.0) == (0.0, 0.0)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_random_direction_range():
    rng = random.Random(3)
    for _ in range(200):
        dx, dy = random_direction(rng)
        assert -0.5 <= dx < 0.5
        assert -0.5 <= dy < 0.5


@pytest.mark.parametrize("px,py,expected", [
    (1280, 360, (1.0, 0.0)),
    (640, 720, (0.0, 1.0)),
    (0, 360, (-1.0, 0.0)),
])
def test_direction_from_pointer(px, py, expected):
    dx, dy = direction_from_pointer(px, py, 1280, 720)
    assert (dx, dy) == pytest.approx(expected, abs=1e-9)
    assert math.hypot(dx, dy) == pytest.approx(1.0)
