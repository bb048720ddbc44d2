"""
ArenaEnv - Gymnasium wrapper around a Grow Arena session
--------------------------------------------------------
- 1 RL agent steering the player with 8 compass headings
- Same tick as the interactive game (items, enemies, growth, death)
- Vector observation: player state + top-K nearest enemies + top-M nearest items
- Reward: score gained, a small survival bonus, a penalty on game over

Quick test:
    python -m game.arena.arena_env
"""

from __future__ import annotations

import math
import random
import time
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .commands import Frame
from .config import GameConfig
from .entities import EnemyType
from .session import GameSession
from .storage import MemoryStore
from .utils import clamp, seed_everything

TYPE_CODES = {
    EnemyType.CHASER: -1.0,
    EnemyType.RANDOM: 0.0,
    EnemyType.EVADER: 1.0,
}

DEFAULT_REWARDS = {
    "R_SCORE": 0.02,   # per score point (item = 10, enemy = 50)
    "R_ALIVE": 0.001,  # per surviving tick
    "R_DEATH": 5.0,
}


class ArenaEnv(gym.Env):
    """Grow Arena as a Gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        m_items: int = 5,
        view_range: float = 600.0,
        reward_config: Optional[Dict[str, float]] = None,
        **game_kwargs,
    ):
        super().__init__()

        assert render_mode in (None, "human"), f"Unsupported render mode: {render_mode}"
        self.render_mode = render_mode

        self.config = GameConfig(**game_kwargs).validate()
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_items = m_items
        self.view_range = view_range
        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k in DEFAULT_REWARDS})

        # High scores survive across episodes of the same env
        self.store = MemoryStore()

        # Action space: heading index 0..7 (0 = east, counter-clockwise on screen)
        self.action_space = spaces.Discrete(8)
        self._headings = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._headings.append((math.cos(ang), -math.sin(ang)))

        # Observation space (vector)
        # Player: pos(2) size(1)
        # Each enemy: rel pos(2) size diff(1) type(1)
        # Each item: rel pos(2)
        obs_dim = 2 + 1 + (self.k_enemies * 4) + (self.m_items * 2)
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32)

        self.session: GameSession = None  # type: ignore
        self._frame: Optional[Frame] = None
        self._window = None

        self._step_count = 0
        self._items_eaten = 0
        self._enemies_eaten = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        rng = random.Random(int(self.np_random.integers(0, 2**31 - 1)))
        self.session = GameSession(config=self.config, store=self.store, rng=rng)
        self.session.start()

        self._step_count = 0
        self._items_eaten = 0
        self._enemies_eaten = 0
        self._frame = None

        return self._get_obs(), self._get_info()

    def step(self, action):
        dx, dy = self._headings[int(action) % 8]
        player = self.session.player
        player.dx, player.dy = dx, dy

        score_before = self.session.score
        frame = self.session.tick()
        self._frame = frame
        self._items_eaten += frame.items_collected
        self._enemies_eaten += frame.enemies_eaten

        reward = self.rewards["R_SCORE"] * (self.session.score - score_before)
        reward += self.rewards["R_ALIVE"]
        if frame.game_over:
            reward -= self.rewards["R_DEATH"]

        terminated = frame.game_over
        self._step_count += 1
        truncated = (not terminated) and self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        player = self.session.player
        pools = self.session.population

        obs_parts: List[float] = [
            clamp(player.x / cfg.half_width, -1, 1),
            clamp(player.y / cfg.half_height, -1, 1),
            clamp(player.size / cfg.max_player_size * 2 - 1, -1, 1),
        ]

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            pools.enemies,
            key=lambda e: (e.x - player.x) ** 2 + (e.y - player.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - player.x) / self.view_range, -1, 1),
                    clamp((e.y - player.y) / self.view_range, -1, 1),
                    clamp((e.size - player.size) / cfg.max_player_size, -1, 1),
                    TYPE_CODES[e.kind],
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        # Items: top-M nearest
        items_sorted = sorted(
            pools.items,
            key=lambda it: (it.x - player.x) ** 2 + (it.y - player.y) ** 2
        )
        for i in range(self.m_items):
            if i < len(items_sorted):
                it = items_sorted[i]
                obs_parts += [
                    clamp((it.x - player.x) / self.view_range, -1, 1),
                    clamp((it.y - player.y) / self.view_range, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "high_score": self.session.high_score,
            "size": self.session.player.size,
            "items_eaten": self._items_eaten,
            "enemies_eaten": self._enemies_eaten,
            "alive": self.session.active,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import ArenaWindow
            self._window = ArenaWindow(self.session, title="ArenaEnv", interactive=False)

        self._window.session = self.session
        if self._frame is not None:
            self._window.show(self._frame)
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random-policy episode and return its total reward"""
    env = ArenaEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f} (score {info['score']}, steps {info['step']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
