"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import NamedTuple, Optional, Protocol, Tuple
import numpy as np


class Box(Protocol):
    """Anything with a center and a half-width"""
    x: float
    y: float
    size: float


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def is_colliding(a: Box, b: Box) -> bool:
    """
    Check if two axis-aligned squares overlap.

    Each square is centered on (x, y) with half-width ``size``. Edges that
    exactly touch count as a collision.
    """
    return (
        abs(a.x - b.x) <= a.size + b.size
        and abs(a.y - b.y) <= a.size + b.size
    )


def random_direction(rng: random.Random) -> Tuple[float, float]:
    """Random (non-unit) heading in [-0.5, 0.5)^2"""
    return rng.random() - 0.5, rng.random() - 0.5


def direction_from_pointer(px: float, py: float, canvas_w: float, canvas_h: float) -> Tuple[float, float]:
    """Unit heading from the canvas center toward a pointer position"""
    angle = math.atan2(py - canvas_h / 2, px - canvas_w / 2)
    return math.cos(angle), math.sin(angle)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)


class ScreenBox(NamedTuple):
    """Square in screen space, centered on (x, y)"""
    x: float
    y: float
    size: float
