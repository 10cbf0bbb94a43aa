# score.py
import logging

from .errors import PersistenceError
from .storage import HighScoreStore

logger = logging.getLogger(__name__)


class ScoreTracker:
    """
    Caches the best score and writes it through to a store.

    Store failures never reach the game: a failed read means "no prior best",
    a failed write keeps the in-memory value.
    """

    def __init__(self, store: HighScoreStore):
        self.store = store
        self._best = 0
        self.load()

    @property
    def best(self) -> int:
        return self._best

    def load(self) -> int:
        try:
            stored = self.store.load_best()
        except PersistenceError as e:
            logger.warning("Could not load high score: %s", e)
            stored = None
        # never go below a best already seen in this process
        self._best = max(self._best, stored or 0)
        return self._best

    def record_if_high_score(self, score: int) -> bool:
        """Returns True when `score` beats the best."""
        if score <= self._best:
            return False

        self._best = score
        try:
            self.store.save_best(score)
        except PersistenceError as e:
            logger.warning("Could not save high score: %s", e)
        logger.info("New high score: %d", score)
        return True
