"""
Item and enemy pools: spawning, top-up and out-of-bounds relocation
"""

from __future__ import annotations

import random
from typing import Callable, List, TypeVar

from .config import GameConfig
from .entities import Enemy, EnemyType, Item
from .utils import random_direction

T = TypeVar("T")

ENEMY_TYPES = (EnemyType.CHASER, EnemyType.EVADER, EnemyType.RANDOM)


def random_position(cfg: GameConfig, rng: random.Random):
    x = rng.random() * cfg.width - cfg.half_width
    y = rng.random() * cfg.height - cfg.half_height
    return x, y


def top_up(pool: List[T], capacity: int, spawn: Callable[[], T]) -> int:
    """Append fresh entities until the pool is at capacity; returns how many"""
    missing = capacity - len(pool)
    for _ in range(max(0, missing)):
        pool.append(spawn())
    return max(0, missing)


def spawn_item(cfg: GameConfig, rng: random.Random) -> Item:
    x, y = random_position(cfg, rng)
    return Item(x=x, y=y, size=cfg.item_size)


def spawn_enemy(cfg: GameConfig, rng: random.Random, score: int) -> Enemy:
    """Spawn an enemy; its speed is frozen from the score at this moment"""
    x, y = random_position(cfg, rng)
    lo, hi = cfg.enemy_size_range
    size = lo + rng.random() * (hi - lo)
    kind = rng.choice(ENEMY_TYPES)
    dx, dy = random_direction(rng)
    return Enemy(
        x=x,
        y=y,
        size=size,
        speed=cfg.enemy_base_speed + score * cfg.enemy_speed_per_score,
        dx=dx,
        dy=dy,
        kind=kind,
    )


def is_out_of_bounds(enemy: Enemy, cfg: GameConfig) -> bool:
    """True once the enemy has left the arena inflated by its own size"""
    return (
        enemy.x < -cfg.half_width - enemy.size
        or enemy.x > cfg.half_width + enemy.size
        or enemy.y < -cfg.half_height - enemy.size
        or enemy.y > cfg.half_height + enemy.size
    )


def relocate_if_out_of_bounds(enemy: Enemy, cfg: GameConfig, rng: random.Random) -> bool:
    """
    Put an escaped enemy back at a random spot with a new heading.

    Type, size and speed are kept. Returns True when the enemy was moved.
    """
    if not is_out_of_bounds(enemy, cfg):
        return False
    enemy.x, enemy.y = random_position(cfg, rng)
    enemy.dx, enemy.dy = random_direction(rng)
    return True


class Population:
    """Fixed-capacity item and enemy pools for one run"""

    def __init__(self, cfg: GameConfig, rng: random.Random):
        self.cfg = cfg
        self.rng = rng
        self.items: List[Item] = []
        self.enemies: List[Enemy] = []

    def reset(self, score: int = 0) -> None:
        self.items = []
        self.enemies = []
        self.replenish(score)

    def replenish(self, score: int) -> None:
        top_up(self.items, self.cfg.max_items, lambda: spawn_item(self.cfg, self.rng))
        top_up(self.enemies, self.cfg.max_enemies, lambda: spawn_enemy(self.cfg, self.rng, score))
