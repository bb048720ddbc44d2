from types import SimpleNamespace

import pytest

arcade = pytest.importorskip("arcade")

from game.arena.window import ArenaWindow  # noqa: E402


def _host(session, interactive=True):
    cfg = session.config
    return SimpleNamespace(session=session, interactive=interactive, height=cfg.canvas_height)


def test_drag_handler_is_overridden():
    assert ArenaWindow.on_mouse_drag is not arcade.Window.on_mouse_drag


def test_drag_steers_like_motion(running):
    cfg = running.config
    host = _host(running)
    # Arcade y grows upward, so y=0 is the bottom edge of the canvas
    ArenaWindow.on_mouse_drag(host, cfg.canvas_width // 2, 0, 0, -5, arcade.MOUSE_BUTTON_LEFT, 0)
    assert running.player.direction == pytest.approx((0.0, 1.0))

    ArenaWindow.on_mouse_motion(host, cfg.canvas_width, cfg.canvas_height // 2, 5, 0)
    assert running.player.direction == pytest.approx((1.0, 0.0))


def test_drag_ignored_when_not_interactive(running):
    cfg = running.config
    ArenaWindow.on_mouse_drag(_host(running, interactive=False), cfg.canvas_width, 0, 0, 0, 1, 0)
    assert running.player.direction == (0.0, 0.0)
