"""Grow Arena - eat, grow, and outgrow the enemies"""

from .config import GameConfig
from .entities import Enemy, EnemyType, Item, Player
from .session import GameSession, GameState, InvalidTransitionError
from .arena_env import ArenaEnv, run_random_episode

__all__ = [
    'GameConfig',
    'Enemy', 'EnemyType', 'Item', 'Player',
    'GameSession', 'GameState', 'InvalidTransitionError',
    'ArenaEnv', 'run_random_episode',
]
