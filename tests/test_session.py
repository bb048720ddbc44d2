import pytest

from game.arena.commands import DrawText, FillRect, Frame, PlayLoop
from game.arena.config import GameConfig
from game.arena.session import GameState, InvalidTransitionError


class TestTransitions:

    def test_starts_idle(self, make_session):
        session = make_session()
        assert session.state is GameState.IDLE
        assert not session.active
        assert session.high_score == 0

    def test_start_resets_and_fills_pools(self, make_session):
        session = make_session(GameConfig(max_items=5, max_enemies=3))
        frame = session.start()
        assert session.active
        assert session.score == 0
        assert (session.player.x, session.player.y, session.player.size) == (0.0, 0.0, 10.0)
        assert len(session.population.items) == 5
        assert len(session.population.enemies) == 3
        assert frame.sounds == [PlayLoop("background", 0.03)]

    def test_restart_only_after_game_over(self, running, empty_config):
        with pytest.raises(InvalidTransitionError):
            running.restart()
        running.player.x = empty_config.half_width
        running.tick()
        assert running.state is GameState.GAME_OVER
        running.restart()
        assert running.active
        assert running.player.x == 0.0

    def test_start_twice_is_rejected(self, running):
        with pytest.raises(InvalidTransitionError):
            running.start()

    def test_tick_requires_running(self, make_session):
        with pytest.raises(InvalidTransitionError):
            make_session().tick()

    def test_instructions_toggle(self, make_session):
        session = make_session()
        session.show_instructions()
        assert session.showing_instructions
        assert session.state is GameState.IDLE
        session.show_start()
        assert not session.showing_instructions

    def test_instructions_only_from_idle(self, running):
        with pytest.raises(InvalidTransitionError):
            running.show_instructions()

    def test_start_clears_instructions(self, make_session):
        session = make_session()
        session.show_instructions()
        session.start()
        assert not session.showing_instructions


class TestGameOver:

    def test_overlay_shows_final_score(self, running):
        running.score = 70
        frame = Frame()
        running.end_game(frame)
        assert frame.game_over
        assert isinstance(frame.commands[0], FillRect)
        texts = [c.text for c in frame.commands if isinstance(c, DrawText)]
        assert texts == ["Game Over!", "Final Score: 70"]

    def test_end_game_twice_is_rejected(self, running):
        running.end_game(Frame())
        with pytest.raises(InvalidTransitionError):
            running.end_game(Frame())

    def test_high_score_loaded_from_store(self, make_session, store):
        store.set("highScore", 420)
        assert make_session().high_score == 420

    def test_new_record_persisted(self, running, store):
        running.score = 30
        running.end_game(Frame())
        assert running.high_score == 30
        assert store.get("highScore") == 30


class TestInput:

    def test_pointer_ignored_when_idle(self, make_session):
        session = make_session()
        session.set_pointer(0, 0)
        assert session.player.direction == (0.0, 0.0)

    def test_pointer_sets_unit_heading(self, running):
        cfg = running.config
        running.set_pointer(cfg.canvas_width / 2, cfg.canvas_height)
        assert running.player.direction == pytest.approx((0.0, 1.0))

    def test_resize_moves_canvas_center(self, running):
        running.resize(400, 400)
        running.set_pointer(400, 200)
        assert running.player.direction == pytest.approx((1.0, 0.0))

    def test_resize_leaves_caller_config_alone(self, make_session):
        config = GameConfig()
        first = make_session(config)
        second = make_session(config)
        first.resize(400, 300)
        assert (config.canvas_width, config.canvas_height) == (1280, 720)
        assert (second.config.canvas_width, second.config.canvas_height) == (1280, 720)
        assert (first.config.canvas_width, first.config.canvas_height) == (400, 300)


def test_invalid_config_rejected(make_session):
    with pytest.raises(ValueError):
        make_session(GameConfig(growth_rate=0.0))
    with pytest.raises(ValueError):
        make_session(GameConfig(width=-1))
    with pytest.raises(ValueError):
        make_session(GameConfig(enemy_size_range=(50.0, 20.0)))
