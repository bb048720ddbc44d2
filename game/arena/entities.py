"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class EnemyType(str, Enum):
    """Closed set of enemy movement strategies"""
    CHASER = "chaser"
    EVADER = "evader"
    RANDOM = "random"


@dataclass
class Player:
    """The growing blob the camera follows"""
    x: float = 0.0
    y: float = 0.0
    size: float = 10.0
    target_size: float = 10.0
    speed: float = 2.0
    dx: float = 0.0  # heading, unit vector once the pointer has moved
    dy: float = 0.0

    @property
    def direction(self) -> Tuple[float, float]:
        return self.dx, self.dy


@dataclass(frozen=True)
class Item:
    """Food pellet, immutable once spawned"""
    x: float
    y: float
    size: float = 10.0


@dataclass
class Enemy:
    """Mobile enemy; size, speed and type are fixed at spawn"""
    x: float
    y: float
    size: float
    speed: float
    dx: float
    dy: float
    kind: EnemyType = EnemyType.RANDOM

    @property
    def sprite(self) -> str:
        return self.kind.value
