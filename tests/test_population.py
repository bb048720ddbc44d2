import random

from game.arena.config import GameConfig
from game.arena.entities import Enemy, EnemyType
from game.arena.population import (
    Population,
    is_out_of_bounds,
    relocate_if_out_of_bounds,
    spawn_enemy,
    spawn_item,
    top_up,
)


def test_top_up_fills_to_capacity():
    pool = [1, 2]
    added = top_up(pool, 5, lambda: 0)
    assert added == 3
    assert pool == [1, 2, 0, 0, 0]


def test_top_up_never_shrinks():
    pool = [1, 2, 3]
    assert top_up(pool, 2, lambda: 0) == 0
    assert pool == [1, 2, 3]


def test_item_spawns_inside_arena():
    cfg = GameConfig()
    rng = random.Random(1)
    for _ in range(200):
        item = spawn_item(cfg, rng)
        assert -cfg.half_width <= item.x <= cfg.half_width
        assert -cfg.half_height <= item.y <= cfg.half_height
        assert item.size == 10


def test_enemy_spawn_attributes():
    cfg = GameConfig()
    rng = random.Random(2)
    kinds = set()
    for _ in range(300):
        enemy = spawn_enemy(cfg, rng, score=0)
        assert 20 <= enemy.size < 50
        assert -0.5 <= enemy.dx < 0.5 and -0.5 <= enemy.dy < 0.5
        assert enemy.speed == cfg.enemy_base_speed
        kinds.add(enemy.kind)
    assert kinds == set(EnemyType)


def test_enemy_speed_frozen_from_score_at_spawn():
    enemy = spawn_enemy(GameConfig(), random.Random(3), score=1000)
    assert enemy.speed == 0.5 + 1000 * 0.001


def _enemy(x, y, size=30.0):
    return Enemy(x=x, y=y, size=size, speed=0.5, dx=0.1, dy=0.1, kind=EnemyType.CHASER)


def test_out_of_bounds_uses_inflated_boundary():
    cfg = GameConfig()
    assert not is_out_of_bounds(_enemy(cfg.half_width + 30, 0), cfg)
    assert is_out_of_bounds(_enemy(cfg.half_width + 30.5, 0), cfg)
    assert is_out_of_bounds(_enemy(0, -cfg.half_height - 31), cfg)


def test_relocation_keeps_identity():
    cfg = GameConfig()
    enemy = _enemy(cfg.half_width + 100, 0)
    assert relocate_if_out_of_bounds(enemy, cfg, random.Random(4))
    assert -cfg.half_width <= enemy.x <= cfg.half_width
    assert -cfg.half_height <= enemy.y <= cfg.half_height
    assert enemy.size == 30.0
    assert enemy.speed == 0.5
    assert enemy.kind is EnemyType.CHASER


def test_relocation_leaves_inside_enemies_alone():
    enemy = _enemy(10, 10)
    assert not relocate_if_out_of_bounds(enemy, GameConfig(), random.Random(5))
    assert (enemy.x, enemy.y, enemy.dx, enemy.dy) == (10, 10, 0.1, 0.1)


def test_population_reset_fills_both_pools():
    cfg = GameConfig(max_items=7, max_enemies=4)
    pools = Population(cfg, random.Random(6))
    pools.reset()
    assert len(pools.items) == 7
    assert len(pools.enemies) == 4
