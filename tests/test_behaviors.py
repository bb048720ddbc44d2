import math
import random

import pytest

from game.arena.behaviors import advance, speed_multiplier, steer, update_enemy
from game.arena.config import GameConfig
from game.arena.entities import Enemy, EnemyType, Player

from conftest import ScriptedRandom


def _enemy(kind, x=30.0, y=40.0):
    return Enemy(x=x, y=y, size=25.0, speed=0.5, dx=0.2, dy=-0.3, kind=kind)


def test_chaser_points_at_player():
    enemy = _enemy(EnemyType.CHASER)
    steer(enemy, Player(), GameConfig(), random.Random(0))
    assert (enemy.dx, enemy.dy) == pytest.approx((-0.6, -0.8))


def test_evader_points_away():
    enemy = _enemy(EnemyType.EVADER)
    steer(enemy, Player(), GameConfig(), random.Random(0))
    assert (enemy.dx, enemy.dy) == pytest.approx((0.6, 0.8))


@pytest.mark.parametrize("kind", [EnemyType.CHASER, EnemyType.EVADER])
def test_zero_distance_gives_zero_heading(kind):
    enemy = _enemy(kind, x=5.0, y=5.0)
    player = Player(x=5.0, y=5.0)
    update_enemy(enemy, player, GameConfig(), random.Random(0), multiplier=2.0)
    assert (enemy.dx, enemy.dy) == (0.0, 0.0)
    assert (enemy.x, enemy.y) == (5.0, 5.0)
    assert math.isfinite(enemy.x) and math.isfinite(enemy.y)


def test_random_walker_keeps_heading_most_ticks():
    enemy = _enemy(EnemyType.RANDOM)
    steer(enemy, Player(), GameConfig(), ScriptedRandom([0.5]))
    assert (enemy.dx, enemy.dy) == (0.2, -0.3)


def test_random_walker_turns_on_rare_roll():
    enemy = _enemy(EnemyType.RANDOM)
    steer(enemy, Player(), GameConfig(), ScriptedRandom([0.005, 0.9, 0.1]))
    assert (enemy.dx, enemy.dy) == pytest.approx((0.4, -0.4))


def test_speed_multiplier_ramp():
    cfg = GameConfig()
    assert speed_multiplier(0, cfg) == 1.0
    assert speed_multiplier(300, cfg) == 2.0
    assert speed_multiplier(150, cfg) == 1.5


def test_advance_scales_by_speed_and_multiplier():
    enemy = Enemy(x=0.0, y=0.0, size=25.0, speed=0.5, dx=1.0, dy=-0.5)
    advance(enemy, 2.0)
    assert (enemy.x, enemy.y) == pytest.approx((1.0, -0.5))
