from __future__ import annotations

import logging

from engine.storage.kv_store import KeyValueStore

from .const import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreTable:
    """Best score across sessions, kept under a single key of the game's store."""

    def __init__(self, store: KeyValueStore, key: str = HIGH_SCORE_KEY):
        self.store = store
        self.key = key

    def get_high_score(self) -> int:
        return max(0, self.store.get_int(self.key, default=0))

    def save_high_score(self, score: int) -> None:
        if not self.store.set_int(self.key, max(0, int(score))):
            logger.warning("high score %d was not saved", score)

    def is_new_high_score(self, score: int) -> bool:
        return score > self.get_high_score()

    def submit(self, score: int) -> bool:
        """Save score if it beats the stored best; returns whether it did."""
        if not self.is_new_high_score(score):
            return False
        self.save_high_score(score)
        logger.info("new high score: %d", score)
        return True
