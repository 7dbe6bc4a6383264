"""Persistent high score: a single integer stored under one key in a JSON file.

Read once at start-up; `submit()` writes only when the score beats the
stored value. File problems never stop the game: unreadable files read as 0
and failed writes are reported and skipped.
"""

from __future__ import annotations

import json
import os

from config import HIGH_SCORE_PATH, HIGH_SCORE_KEY


class HighScoreStore:
    def __init__(self, path: str = HIGH_SCORE_PATH, key: str = HIGH_SCORE_KEY) -> None:
        self.path = path
        self.key = key
        self.value = self.load()

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get(self.key, 0)))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
            print(f"[HighScore] Could not read {self.path}: {e}")
            return 0

    def save(self) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: self.value}, f)
        except OSError as e:
            print(f"[HighScore] Could not write {self.path}: {e}")

    def submit(self, score: int) -> bool:
        """Record `score` if it strictly beats the stored value. Returns True if it did."""
        if score <= self.value:
            return False
        self.value = score
        self.save()
        return True


__all__ = ["HighScoreStore"]
