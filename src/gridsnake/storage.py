"""
High score stores.

A store keeps a single non-negative integer under a fixed key. Stores raise
PersistenceReadError / PersistenceWriteError; deciding whether that matters
is up to the caller (ScoreTracker swallows both).
"""

import json
import logging
import os
from typing import Optional, Protocol

from .config import HIGH_SCORE_KEY
from .errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load_best(self) -> Optional[int]: ...

    def save_best(self, score: int) -> None: ...


class JsonFileStore:
    """Keeps {"snakeHighScore": n} in a small JSON file."""

    def __init__(self, path: str, key: str = HIGH_SCORE_KEY):
        self.path = path
        self.key = key

    def load_best(self) -> Optional[int]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers bad JSON and bad UTF-8
            raise PersistenceReadError(f"Could not read {self.path}: {e}") from e

        if not isinstance(data, dict) or self.key not in data:
            return None
        value = data[self.key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise PersistenceReadError(f"Bad high score in {self.path}: {value!r}")
        if value < 0:
            raise PersistenceReadError(f"Negative high score in {self.path}: {value}")
        return value

    def save_best(self, score: int) -> None:
        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump({self.key: int(score)}, f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise PersistenceWriteError(f"Could not write {self.path}: {e}") from e
        logger.debug("Saved high score %d to %s", score, self.path)


class MemoryStore:
    """Process-local store, used when no file is wanted (and in tests)."""

    def __init__(self, best: Optional[int] = None):
        self.best = best

    def load_best(self) -> Optional[int]:
        return self.best

    def save_best(self, score: int) -> None:
        self.best = int(score)
