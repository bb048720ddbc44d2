"""
One discrete tick of the arena.

The camera is locked on the player: world coordinates are projected with
``world - player + canvas_center``, so every collision test runs in screen
space against a player box fixed at the canvas center.

Order matters and is part of the game's behavior: the player moves and grows,
dies if it leaves the arena, then the pools are topped up, items are resolved,
and finally enemies are steered, moved, relocated and resolved one at a time.
The first enemy that beats the player ends the tick; enemies after it are not
looked at.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .behaviors import speed_multiplier, update_enemy
from .commands import Clear, DrawSprite, DrawText, FillRect, Frame, PlaySound, StrokeRect
from .config import GameConfig
from .entities import Player
from .population import relocate_if_out_of_bounds
from .utils import ScreenBox, is_colliding

if TYPE_CHECKING:
    from .session import GameSession

BACKGROUND_COLOR = (135, 206, 235)
BOUNDARY_COLOR = (255, 255, 0)
TEXT_COLOR = (255, 255, 255)


def ease_size(player: Player, growth_rate: float) -> None:
    """Close a fixed fraction of the gap between size and target size"""
    player.size += (player.target_size - player.size) * growth_rate


def grow(player: Player, amount: float, cap: float) -> None:
    player.target_size = min(cap, player.target_size + amount)


def outside_arena(player: Player, cfg: GameConfig) -> bool:
    return (
        player.x - player.size < -cfg.half_width
        or player.x + player.size > cfg.half_width
        or player.y - player.size < -cfg.half_height
        or player.y + player.size > cfg.half_height
    )


def draw_backdrop(frame: Frame, player: Player, cfg: GameConfig) -> None:
    cw, ch = cfg.canvas_width, cfg.canvas_height
    frame.draw(FillRect(-player.x * cfg.parallax, -player.y * cfg.parallax, cw * 2, ch * 2, BACKGROUND_COLOR))
    frame.draw(StrokeRect(
        cw / 2 - cfg.half_width - player.x,
        ch / 2 - cfg.half_height - player.y,
        cfg.width,
        cfg.height,
        BOUNDARY_COLOR,
        line_width=5,
        dash=(10, 5),
    ))


def draw_scores(frame: Frame, score: int, high_score: int) -> None:
    frame.draw(DrawText(f"Score: {score}", 20, 30, TEXT_COLOR, 20))
    frame.draw(DrawText(f"High Score: {high_score}", 20, 60, TEXT_COLOR, 20))


def step(session: "GameSession") -> Frame:
    """Advance a running session by one tick and return what to draw and play"""
    cfg = session.config
    player = session.player
    pools = session.population
    frame = Frame()

    frame.draw(Clear())
    draw_backdrop(frame, player, cfg)

    player.x += player.dx * player.speed
    player.y += player.dy * player.speed
    ease_size(player, cfg.growth_rate)

    if outside_arena(player, cfg):
        frame.play(PlaySound("collision"))
        session.end_game(frame)
        return frame

    cx, cy = cfg.canvas_width / 2, cfg.canvas_height / 2
    frame.draw(DrawSprite("player", cx - player.size, cy - player.size, player.size * 2, player.size * 2))

    pools.replenish(session.score)

    def to_screen(x: float, y: float):
        return x - player.x + cx, y - player.y + cy

    # Items
    kept_items = []
    for item in pools.items:
        sx, sy = to_screen(item.x, item.y)
        if is_colliding(ScreenBox(cx, cy, player.size), ScreenBox(sx, sy, item.size)):
            grow(player, cfg.item_growth, cfg.max_player_size)
            session.score += cfg.item_score
            frame.items_collected += 1
            frame.play(PlaySound("collect"))
            continue
        frame.draw(DrawSprite("item", sx - item.size, sy - item.size, item.size * 2, item.size * 2))
        kept_items.append(item)
    pools.items = kept_items

    # Enemies
    multiplier = speed_multiplier(session.score, cfg)
    kept_enemies = []
    for i, enemy in enumerate(pools.enemies):
        # projected before the enemy moves this tick
        sx, sy = to_screen(enemy.x, enemy.y)
        update_enemy(enemy, player, cfg, session.rng, multiplier)
        relocate_if_out_of_bounds(enemy, cfg, session.rng)

        if is_colliding(ScreenBox(cx, cy, player.size), ScreenBox(sx, sy, enemy.size)):
            if player.size > enemy.size:
                grow(player, cfg.enemy_growth, cfg.max_player_size)
                session.score += cfg.enemy_score
                frame.enemies_eaten += 1
                continue
            frame.play(PlaySound("collision"))
            kept_enemies.extend(pools.enemies[i + 1:])
            pools.enemies = kept_enemies
            session.end_game(frame)
            return frame

        frame.draw(DrawSprite(enemy.sprite, sx - enemy.size, sy - enemy.size, enemy.size * 2, enemy.size * 2))
        kept_enemies.append(enemy)
    pools.enemies = kept_enemies

    draw_scores(frame, session.score, session.high_score)
    return frame
