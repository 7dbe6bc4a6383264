from __future__ import annotations

import pytest

from core.highscore import HighScoreStore
from railway.game import RailGame
from sound.sound_utils import Sounds


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, randoms=(0.9,), cars=(1,)):
        self._randoms = list(randoms)
        self._cars = list(cars)

    def random(self):
        return self._randoms.pop(0) if len(self._randoms) > 1 else self._randoms[0]

    def randint(self, a, b):
        n = self._cars.pop(0) if len(self._cars) > 1 else self._cars[0]
        assert a <= n <= b
        return n


@pytest.fixture
def played(monkeypatch):
    """Record sound keys instead of touching the mixer."""
    calls = []
    monkeypatch.setattr(Sounds, "play", lambda key, **kwargs: calls.append(key))
    return calls


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(str(tmp_path / "highscore.json"))


@pytest.fixture
def game(store, played):
    return RailGame(high_scores=store, rng=ScriptedRandom())


def freeze_spawner(game, now_ms=0):
    """Mark a spawn as just happened so the next update does not add a train."""
    game.spawner.last_spawn_ms = now_ms
