"""Timed train spawner with a spacing check against the previous train.

Each attempt draws the new train's type first so the spacing rule can compare
its effective speed with the previous train's. A vetoed attempt keeps the
timer expired and is retried on the next frame.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from config import (
    WIDTH,
    TRAIN_WIDTH,
    TRAIN_SPAWN_X,
    MIN_CARS,
    MAX_CARS,
    RED_TRAIN_CHANCE,
    MIN_TRAIN_SPACING,
    SPACING_SPEED_SCALE,
)
from railway.layout import TRAIN_TYPES, TrainType
from railway.train import Train


def required_spacing(new_speed: float, prev_speed: float) -> float:
    """Gap the previous train must have cleared before a new one may enter.

    A faster (or equally fast) follower needs more room; a slower one less.
    """
    if new_speed >= prev_speed:
        return MIN_TRAIN_SPACING + (new_speed - prev_speed) * SPACING_SPEED_SCALE
    return max(
        float(TRAIN_WIDTH),
        MIN_TRAIN_SPACING - (prev_speed - new_speed) * SPACING_SPEED_SCALE,
    )


class TrainSpawner:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.last_spawn_ms: Optional[int] = None

    def due(self, now_ms: int, interval_ms: int) -> bool:
        return self.last_spawn_ms is None or now_ms - self.last_spawn_ms > interval_ms

    def pick_type(self) -> TrainType:
        return TRAIN_TYPES["red"] if self.rng.random() < RED_TRAIN_CHANCE else TRAIN_TYPES["blue"]

    def pick_cars(self) -> int:
        return self.rng.randint(MIN_CARS, MAX_CARS)

    def can_spawn(self, kind: TrainType, last: Optional[Train], speed_multiplier: float) -> bool:
        if last is None:
            return True
        new_speed = kind.speed * speed_multiplier
        prev_speed = last.speed * speed_multiplier
        return (WIDTH - last.x) >= required_spacing(new_speed, prev_speed)

    def try_spawn(
        self,
        trains: Sequence[Train],
        speed_multiplier: float,
        interval_ms: int,
        now_ms: int,
    ) -> Optional[Train]:
        """Return a new train at the left edge of track 0, or None."""
        if not self.due(now_ms, interval_ms):
            return None
        kind = self.pick_type()
        last = trains[-1] if trains else None
        if not self.can_spawn(kind, last, speed_multiplier):
            return None
        self.last_spawn_ms = now_ms
        return Train(kind=kind, x=TRAIN_SPAWN_X, track=0, num_cars=self.pick_cars())


__all__ = ["required_spacing", "TrainSpawner"]
