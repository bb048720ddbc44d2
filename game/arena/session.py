"""
Game session state machine: Idle -> Running -> GameOver -> Running ...

The session owns all mutable game state (player, pools, score, high score)
and is the only thing the simulation step reads and writes.
"""

from __future__ import annotations

import dataclasses
import random
from enum import Enum
from typing import Optional

from .commands import DrawText, FillRect, Frame, PlayLoop
from .config import GameConfig
from .entities import Player
from .population import Population
from .simulation import step
from .storage import KeyValueStore, MemoryStore
from .utils import direction_from_pointer

GAME_OVER_COLOR = (255, 100, 100)


class GameState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class InvalidTransitionError(RuntimeError):
    """Raised when a command is issued in a state that does not accept it"""


class GameSession:
    """A player's sequence of runs, from the start screen onwards"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[KeyValueStore] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        verbose: int = 0,
    ):
        # Own copy: resize() must not leak into a config shared by other sessions
        self.config = dataclasses.replace(config or GameConfig()).validate()
        self.store = store if store is not None else MemoryStore()
        self.rng = rng if rng is not None else random.Random(seed)
        self.verbose = verbose

        self.state = GameState.IDLE
        self.showing_instructions = False

        self.player = self._new_player()
        self.population = Population(self.config, self.rng)
        self.score = 0
        self.high_score = self.store.get(self.config.high_score_key) or 0

    @property
    def active(self) -> bool:
        return self.state is GameState.RUNNING

    def _new_player(self) -> Player:
        cfg = self.config
        return Player(
            x=0.0,
            y=0.0,
            size=cfg.player_start_size,
            target_size=cfg.player_start_size,
            speed=cfg.player_speed,
        )

    def _require(self, *states: GameState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise InvalidTransitionError(f"Cannot do that while {self.state.value} (needs {allowed})")

    # ----------------------------
    # Commands
    # ----------------------------

    def start(self) -> Frame:
        self._require(GameState.IDLE)
        return self._begin()

    def restart(self) -> Frame:
        self._require(GameState.GAME_OVER)
        return self._begin()

    def show_instructions(self) -> None:
        self._require(GameState.IDLE)
        self.showing_instructions = True

    def show_start(self) -> None:
        self._require(GameState.IDLE)
        self.showing_instructions = False

    def _begin(self) -> Frame:
        self.player = self._new_player()
        self.score = 0
        self.population.reset(self.score)
        self.showing_instructions = False
        self.state = GameState.RUNNING

        if self.verbose > 0:
            print(f"[GameSession] Run started (high score {self.high_score})")

        frame = Frame()
        frame.play(PlayLoop("background", self.config.background_volume))
        return frame

    def tick(self) -> Frame:
        self._require(GameState.RUNNING)
        return step(self)

    # ----------------------------
    # Input
    # ----------------------------

    def set_pointer(self, x: float, y: float) -> None:
        """Steer toward a pointer given in canvas coordinates; ignored unless running"""
        if not self.active:
            return
        cfg = self.config
        self.player.dx, self.player.dy = direction_from_pointer(x, y, cfg.canvas_width, cfg.canvas_height)

    def resize(self, canvas_width: int, canvas_height: int) -> None:
        self.config.canvas_width = canvas_width
        self.config.canvas_height = canvas_height

    # ----------------------------
    # Terminal state
    # ----------------------------

    def end_game(self, frame: Frame) -> None:
        """Stop the run, bank the high score and draw the game-over overlay"""
        self._require(GameState.RUNNING)
        self.state = GameState.GAME_OVER
        frame.game_over = True

        if self.score > self.high_score:
            self.high_score = self.score
            self.store.set(self.config.high_score_key, self.high_score)

        cfg = self.config
        cw, ch = cfg.canvas_width, cfg.canvas_height
        frame.draw(FillRect(0, 0, cw, ch, GAME_OVER_COLOR))
        frame.draw(DrawText("Game Over!", cw / 2 - 150, ch / 2 - 50, font_size=50))
        frame.draw(DrawText(f"Final Score: {self.score}", cw / 2 - 150, ch / 2, font_size=50))

        if self.verbose > 0:
            print(f"[GameSession] Game over: score={self.score} high_score={self.high_score}")
