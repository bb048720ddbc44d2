"""
Replays a frame's draw intents with Arcade primitives.

Intents use a top-left origin with y growing downwards; Arcade puts the
origin bottom-left, so every y is flipped against the window height.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import arcade

from .commands import Clear, DrawSprite, DrawText, FillRect, Frame, StrokeRect

SPRITE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "player": (80, 200, 120),
    "item": (240, 210, 80),
    "chaser": (220, 80, 80),
    "evader": (90, 140, 230),
    "random": (180, 110, 220),
}
FALLBACK_COLOR = (200, 200, 200)


def dashed_rect_segments(left: float, bottom: float, width: float, height: float,
                         dash: float, gap: float) -> List[Tuple[float, float]]:
    """Endpoint pairs for a dashed rectangle outline, ready for draw_lines"""
    points: List[Tuple[float, float]] = []
    corners = [
        (left, bottom),
        (left + width, bottom),
        (left + width, bottom + height),
        (left, bottom + height),
    ]
    for i in range(4):
        x0, y0 = corners[i]
        x1, y1 = corners[(i + 1) % 4]
        length = abs(x1 - x0) + abs(y1 - y0)
        if length <= 0:
            continue
        ux, uy = (x1 - x0) / length, (y1 - y0) / length
        t = 0.0
        while t < length:
            end = min(t + dash, length)
            points.append((x0 + ux * t, y0 + uy * t))
            points.append((x0 + ux * end, y0 + uy * end))
            t += dash + gap
    return points


class ArcadeRenderer:
    """Draws frames into an Arcade window"""

    def __init__(self, window: arcade.Window):
        self.window = window

    def draw(self, frame: Frame) -> None:
        h = self.window.height
        for cmd in frame.commands:
            if isinstance(cmd, Clear):
                self.window.clear()
            elif isinstance(cmd, FillRect):
                top = h - cmd.y
                arcade.draw_lrbt_rectangle_filled(cmd.x, cmd.x + cmd.width, top - cmd.height, top, cmd.color)
            elif isinstance(cmd, StrokeRect):
                top = h - cmd.y
                if cmd.dash:
                    segments = dashed_rect_segments(cmd.x, top - cmd.height, cmd.width, cmd.height, *cmd.dash)
                    arcade.draw_lines(segments, cmd.color, cmd.line_width)
                else:
                    arcade.draw_lrbt_rectangle_outline(
                        cmd.x, cmd.x + cmd.width, top - cmd.height, top, cmd.color, cmd.line_width
                    )
            elif isinstance(cmd, DrawSprite):
                radius = cmd.width / 2
                color = SPRITE_COLORS.get(cmd.handle, FALLBACK_COLOR)
                arcade.draw_circle_filled(cmd.x + radius, h - cmd.y - cmd.height / 2, radius, color)
            elif isinstance(cmd, DrawText):
                arcade.draw_text(cmd.text, cmd.x, h - cmd.y, cmd.color, cmd.font_size)
