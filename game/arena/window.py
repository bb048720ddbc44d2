"""
Arcade host window: start / instructions / game-over screens, mouse and touch steering,
mute toggle, and one simulation tick per frame while a run is live.

Run:
    python -m game.arena
    python -m game.arena --seed 7 --mute
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Callable, List, Optional

import arcade

from .audio import AudioMixer
from .commands import Frame
from .config import GameConfig
from .render import ArcadeRenderer
from .session import GameSession, GameState
from .storage import DEFAULT_SCORES_PATH, JsonFileStore

DEFAULT_ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")

INSTRUCTIONS = [
    "Move the mouse (or drag a finger) to steer. You never stop moving.",
    "Eat the yellow pellets to grow.",
    "Touch an enemy smaller than you to eat it.",
    "Touch a bigger one, or cross the yellow line, and it is over.",
    "Red chasers hunt you, blue evaders run, purple ones wander.",
]


@dataclass
class Button:
    """Clickable label; center coordinates in Arcade space"""
    label: str
    cx: float
    cy: float
    action: Callable[[], None]
    width: float = 220
    height: float = 50

    def contains(self, x: float, y: float) -> bool:
        return abs(x - self.cx) <= self.width / 2 and abs(y - self.cy) <= self.height / 2

    def draw(self) -> None:
        left, bottom = self.cx - self.width / 2, self.cy - self.height / 2
        arcade.draw_lrbt_rectangle_filled(left, left + self.width, bottom, bottom + self.height, (40, 40, 60))
        arcade.draw_lrbt_rectangle_outline(left, left + self.width, bottom, bottom + self.height, (230, 230, 230), 2)
        arcade.draw_text(self.label, self.cx, self.cy, (255, 255, 255), 18, anchor_x="center", anchor_y="center")


class ArenaWindow(arcade.Window):
    """
    Interactive shell around a GameSession.

    With ``interactive=False`` the window only shows frames pushed through
    ``show()``; the RL environment uses it that way.
    """

    def __init__(
        self,
        session: GameSession,
        audio: Optional[AudioMixer] = None,
        title: str = "Grow Arena",
        interactive: bool = True,
    ):
        cfg = session.config
        super().__init__(cfg.canvas_width, cfg.canvas_height, title, resizable=interactive)
        self.session = session
        self.audio = audio
        self.interactive = interactive
        self.renderer = ArcadeRenderer(self)
        self.frame: Optional[Frame] = None
        self.background_color = (18, 18, 22)

    # ----------------------------
    # Screens and buttons
    # ----------------------------

    def buttons(self) -> List[Button]:
        if not self.interactive:
            return []
        cx, cy = self.width / 2, self.height / 2
        muted = self.audio is not None and self.audio.muted
        found = [Button("Unmute" if muted else "Mute", self.width - 80, self.height - 35,
                        self.toggle_mute, width=120, height=40)]

        state = self.session.state
        if state is GameState.IDLE and self.session.showing_instructions:
            found.append(Button("Back", cx, cy - 160, self.session.show_start))
        elif state is GameState.IDLE:
            found.append(Button("Start", cx, cy, self.start))
            found.append(Button("How to Play", cx, cy - 70, self.session.show_instructions))
        elif state is GameState.GAME_OVER:
            # 60% down the screen
            found.append(Button("Restart", cx, self.height * 0.4, self.restart))
        return found

    def _draw_start_screen(self) -> None:
        arcade.draw_text("Grow Arena", self.width / 2, self.height / 2 + 120, (255, 255, 255), 48,
                         anchor_x="center")
        arcade.draw_text(f"High Score: {self.session.high_score}", self.width / 2, self.height / 2 + 70,
                         (220, 220, 220), 20, anchor_x="center")

    def _draw_instructions(self) -> None:
        arcade.draw_text("How to Play", self.width / 2, self.height / 2 + 150, (255, 255, 255), 36,
                         anchor_x="center")
        y = self.height / 2 + 90
        for line in INSTRUCTIONS:
            arcade.draw_text(line, self.width / 2, y, (220, 220, 220), 16, anchor_x="center")
            y -= 32

    # ----------------------------
    # Commands
    # ----------------------------

    def start(self) -> None:
        self._present(self.session.start())

    def restart(self) -> None:
        self._present(self.session.restart())

    def toggle_mute(self) -> None:
        if self.audio is not None:
            self.audio.toggle_mute()

    def show(self, frame: Frame) -> None:
        """Display a frame produced elsewhere"""
        self.frame = frame

    def _present(self, frame: Frame) -> None:
        if self.audio is not None:
            self.audio.apply(frame)
        if frame.commands:
            self.frame = frame

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        # One tick per display frame, delta_time unused
        if self.interactive and self.session.active:
            self._present(self.session.tick())

    def on_draw(self):
        self.clear()
        state = self.session.state
        if state is GameState.IDLE and self.interactive:
            if self.session.showing_instructions:
                self._draw_instructions()
            else:
                self._draw_start_screen()
        elif self.frame is not None:
            self.renderer.draw(self.frame)
        for button in self.buttons():
            button.draw()

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        if self.interactive:
            self.session.set_pointer(x, self.height - y)

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        # Held buttons and touch drags arrive here instead of on_mouse_motion
        if self.interactive:
            self.session.set_pointer(x, self.height - y)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        for b in self.buttons():
            if b.contains(x, y):
                b.action()
                break

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.M:
            self.toggle_mute()
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.session.resize(width, height)

    def close(self):
        if self.audio is not None:
            self.audio.close()
        super().close()


def main():
    parser = argparse.ArgumentParser(description="Play Grow Arena")
    parser.add_argument("--width", type=int, default=1280, help="Window width (default: 1280)")
    parser.add_argument("--height", type=int, default=720, help="Window height (default: 720)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--scores",
        type=str,
        default=DEFAULT_SCORES_PATH,
        help=f"High score file (default: {DEFAULT_SCORES_PATH})",
    )
    parser.add_argument("--assets", type=str, default=DEFAULT_ASSETS_DIR, help="Directory with the .wav files")
    parser.add_argument("--mute", action="store_true", help="Start muted")

    args = parser.parse_args()

    config = GameConfig(canvas_width=args.width, canvas_height=args.height)
    session = GameSession(config=config, store=JsonFileStore(args.scores), seed=args.seed, verbose=1)
    audio = AudioMixer(args.assets, muted=args.mute)

    ArenaWindow(session, audio)
    arcade.run()


if __name__ == "__main__":
    main()
