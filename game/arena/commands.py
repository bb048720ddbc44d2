"""
Draw and audio intents produced by one simulation tick.

The core never touches a display or a sound device; it appends records here
and the presentation layer replays them. Coordinates are screen space with
the origin in the top-left corner of the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class StrokeRect:
    x: float
    y: float
    width: float
    height: float
    color: Color
    line_width: float = 1.0
    dash: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class DrawSprite:
    handle: str
    x: float  # top-left corner
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float
    color: Color = (255, 255, 255)
    font_size: int = 20


@dataclass(frozen=True)
class PlaySound:
    track: str


@dataclass(frozen=True)
class PlayLoop:
    track: str
    volume: float = 1.0


DrawCommand = Union[Clear, FillRect, StrokeRect, DrawSprite, DrawText]
SoundCommand = Union[PlaySound, PlayLoop]


@dataclass
class Frame:
    """Everything one tick asks the outside world to do, in order"""
    commands: List[DrawCommand] = field(default_factory=list)
    sounds: List[SoundCommand] = field(default_factory=list)
    items_collected: int = 0
    enemies_eaten: int = 0
    game_over: bool = False

    def draw(self, command: DrawCommand) -> None:
        self.commands.append(command)

    def play(self, command: SoundCommand) -> None:
        self.sounds.append(command)

    def sprites(self, handle: Optional[str] = None) -> List[DrawSprite]:
        """Sprite commands, optionally filtered by asset handle"""
        return [
            c for c in self.commands
            if isinstance(c, DrawSprite) and (handle is None or c.handle == handle)
        ]
