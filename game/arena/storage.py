"""
Key-value stores for the persisted high score
"""

from __future__ import annotations

import json
import os
from typing import Dict, Optional, Protocol


DEFAULT_SCORES_PATH = os.path.join(os.path.expanduser("~"), ".grow_arena", "scores.json")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[int]:
        ...

    def set(self, key: str, value: int) -> None:
        ...


def _as_int(value) -> Optional[int]:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


class MemoryStore:
    """In-process store, used by tests and RL environments"""

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._data: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return _as_int(self._data.get(key))

    def set(self, key: str, value: int) -> None:
        self._data[key] = int(value)


class JsonFileStore:
    """
    Store backed by a single JSON object on disk.

    A missing file reads as empty. A corrupt file is reported and treated as
    empty; the next ``set`` rewrites it.
    """

    def __init__(self, path: str = DEFAULT_SCORES_PATH, verbose: int = 1):
        self.path = path
        self.verbose = verbose

    def _load(self) -> Dict[str, object]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            if self.verbose > 0:
                print(f"[JsonFileStore] Could not read {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str) -> Optional[int]:
        return _as_int(self._load().get(key))

    def set(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)
