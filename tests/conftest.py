import random

import pytest

from game.arena.config import GameConfig
from game.arena.session import GameSession
from game.arena.storage import MemoryStore


class ScriptedRandom(random.Random):
    """Random whose random() replays a fixed script, then falls back to seeded values"""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self._script = list(values)

    def random(self):
        if self._script:
            return self._script.pop(0)
        return super().random()


@pytest.fixture
def empty_config():
    """Arena with no automatic spawns"""
    return GameConfig(max_items=0, max_enemies=0)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_session(store):
    def _make(config=None, seed=1234, **kwargs):
        return GameSession(config=config or GameConfig(), store=store, seed=seed, **kwargs)
    return _make


@pytest.fixture
def running(make_session, empty_config):
    """A started session with empty pools and a stationary player"""
    session = make_session(empty_config)
    session.start()
    return session
