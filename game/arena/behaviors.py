"""
Per-type enemy steering.

Chasers and evaders re-aim at (or away from) the player every tick. Random
walkers keep their heading and only occasionally pick a new one. An enemy
sitting exactly on the player gets a zero heading for that tick.
"""

from __future__ import annotations

import random
from typing import Callable, Dict

from .config import GameConfig
from .entities import Enemy, EnemyType, Player
from .utils import normalize, random_direction


def _chase(enemy: Enemy, player: Player, cfg: GameConfig, rng: random.Random) -> None:
    enemy.dx, enemy.dy = normalize(player.x - enemy.x, player.y - enemy.y)


def _evade(enemy: Enemy, player: Player, cfg: GameConfig, rng: random.Random) -> None:
    enemy.dx, enemy.dy = normalize(enemy.x - player.x, enemy.y - player.y)


def _wander(enemy: Enemy, player: Player, cfg: GameConfig, rng: random.Random) -> None:
    if rng.random() < cfg.random_turn_chance:
        enemy.dx, enemy.dy = random_direction(rng)


STEERING: Dict[EnemyType, Callable[[Enemy, Player, GameConfig, random.Random], None]] = {
    EnemyType.CHASER: _chase,
    EnemyType.EVADER: _evade,
    EnemyType.RANDOM: _wander,
}

# every enemy type must have a strategy
assert set(STEERING) == set(EnemyType)


def speed_multiplier(score: int, cfg: GameConfig) -> float:
    """Global difficulty ramp applied on top of each enemy's spawn speed"""
    return 1.0 + score / cfg.speed_scale_divisor


def steer(enemy: Enemy, player: Player, cfg: GameConfig, rng: random.Random) -> None:
    STEERING[enemy.kind](enemy, player, cfg, rng)


def advance(enemy: Enemy, multiplier: float) -> None:
    enemy.x += enemy.dx * enemy.speed * multiplier
    enemy.y += enemy.dy * enemy.speed * multiplier


def update_enemy(enemy: Enemy, player: Player, cfg: GameConfig, rng: random.Random, multiplier: float) -> None:
    """Steer then move one enemy"""
    steer(enemy, player, cfg, rng)
    advance(enemy, multiplier)
