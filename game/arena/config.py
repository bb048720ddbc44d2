"""
Tuning constants for the arena game
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class GameConfig:
    """Every knob of a single arena session"""

    # Arena (world units, centered on the origin)
    width: float = 2000.0
    height: float = 2000.0

    # Viewport the camera projects onto
    canvas_width: int = 1280
    canvas_height: int = 720

    # Player
    player_start_size: float = 10.0
    player_speed: float = 2.0
    max_player_size: float = 150.0
    growth_rate: float = 0.1  # fraction of the size gap closed per tick

    # Populations
    max_items: int = 20
    max_enemies: int = 10
    item_size: float = 10.0
    enemy_size_range: Tuple[float, float] = (20.0, 50.0)
    enemy_base_speed: float = 0.5
    enemy_speed_per_score: float = 0.001  # added to spawn speed per score point
    speed_scale_divisor: float = 300.0  # global multiplier is 1 + score / divisor
    random_turn_chance: float = 0.01

    # Scoring
    item_score: int = 10
    item_growth: float = 1.0
    enemy_score: int = 50
    enemy_growth: float = 2.0

    # Presentation
    background_volume: float = 0.03
    parallax: float = 0.1
    high_score_key: str = "highScore"

    def validate(self) -> "GameConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Arena must have positive size, got {self.width}x{self.height}")
        if self.max_items < 0 or self.max_enemies < 0:
            raise ValueError("Population capacities must be non-negative")
        if not 0.0 < self.growth_rate <= 1.0:
            raise ValueError(f"growth_rate must be in (0, 1], got {self.growth_rate}")
        lo, hi = self.enemy_size_range
        if hi <= lo:
            raise ValueError(f"Empty enemy size range {self.enemy_size_range}")
        if self.player_start_size > self.max_player_size:
            raise ValueError("player_start_size exceeds max_player_size")
        return self

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2
