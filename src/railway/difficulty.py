"""Difficulty ramp derived purely from score."""

from __future__ import annotations

from dataclasses import dataclass

from config import (
    INITIAL_TRAIN_SPEED,
    SPEED_STEP,
    SPEED_STEP_SCORE,
    INITIAL_SPAWN_INTERVAL_MS,
    SPAWN_INTERVAL_STEP_MS,
    SPAWN_INTERVAL_STEP_SCORE,
    MIN_SPAWN_INTERVAL_MS,
)


def speed_multiplier(score: int) -> float:
    return INITIAL_TRAIN_SPEED + (score // SPEED_STEP_SCORE) * SPEED_STEP


def spawn_interval(score: int) -> int:
    """Milliseconds between spawn attempts, floored at MIN_SPAWN_INTERVAL_MS."""
    return max(
        MIN_SPAWN_INTERVAL_MS,
        INITIAL_SPAWN_INTERVAL_MS - (score // SPAWN_INTERVAL_STEP_SCORE) * SPAWN_INTERVAL_STEP_MS,
    )


@dataclass(frozen=True)
class Difficulty:
    speed: float = INITIAL_TRAIN_SPEED
    spawn_interval_ms: int = INITIAL_SPAWN_INTERVAL_MS

    @classmethod
    def for_score(cls, score: int) -> "Difficulty":
        return cls(speed=speed_multiplier(score), spawn_interval_ms=spawn_interval(score))


__all__ = ["speed_multiplier", "spawn_interval", "Difficulty"]
