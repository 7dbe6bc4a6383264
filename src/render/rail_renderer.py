"""Draws the rail yard: tracks, switches with their hit-boxes, the stop, trains.

Tracks and switch curves get a little random jitter every frame so the lines
look hand-drawn. Ensure an active OpenGL context exists before drawing.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from config import (
    WIDTH,
    TRACK_Y_POSITIONS,
    TRACK_COLOR,
    TRACK_LINE_WIDTH,
    SWITCH_COLOR,
    SWITCH_ACTIVE_COLOR,
    SWITCH_LENGTH,
    SWITCH_LINE_WIDTH,
    SWITCH_HIT_X,
    SWITCH_HIT_Y,
    HITBOX_COLOR,
    STOP_COLOR,
    STOP_TRACK,
    STOP_X,
    TRAIN_WIDTH,
    TRAIN_HEIGHT,
    CAR_GAP,
    WINDOW_COLOR,
)
from railway.layout import Switch
from railway.train import Train
from render.primitives import fill_rect, polyline, quadratic_curve


class RailRenderer:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def _jitter(self, spread: float) -> float:
        return self.rng.uniform(-spread / 2, spread / 2)

    def draw_tracks(self) -> None:  # pragma: no cover - visual
        for y in TRACK_Y_POSITIONS:
            pts = [(x, y + self._jitter(1.0)) for x in range(0, WIDTH + 1, 10)]
            polyline(pts, TRACK_COLOR, TRACK_LINE_WIDTH)

    def draw_switches(self, switches: Iterable[Switch]) -> None:  # pragma: no cover - visual
        for s in switches:
            from_y = s.y
            to_y = s.target_y if s.active else s.y
            ctrl = (s.x + self._jitter(4.0), from_y + (to_y - from_y) / 2 + self._jitter(4.0))
            start = (s.x - SWITCH_LENGTH / 2, from_y + self._jitter(1.0))
            end = (s.x + SWITCH_LENGTH / 2, to_y + self._jitter(1.0))
            color = SWITCH_ACTIVE_COLOR if s.active else SWITCH_COLOR
            polyline(quadratic_curve(start, ctrl, end), color, SWITCH_LINE_WIDTH)

            # clickable area
            fill_rect(
                s.x - SWITCH_HIT_X, s.y - SWITCH_HIT_Y, SWITCH_HIT_X * 2, SWITCH_HIT_Y * 2, HITBOX_COLOR
            )

    def draw_stop(self) -> None:  # pragma: no cover - visual
        fill_rect(STOP_X, TRACK_Y_POSITIONS[STOP_TRACK] - 10, 10, 20, STOP_COLOR)

    def draw_train(self, train: Train) -> None:  # pragma: no cover - visual
        # Trailing cars extend to the left of the lead car
        for i in range(train.num_cars):
            car_x = train.x - i * (TRAIN_WIDTH + CAR_GAP)
            fill_rect(car_x, train.y, TRAIN_WIDTH, TRAIN_HEIGHT, train.kind.color)
            fill_rect(car_x + 5, train.y + 5, 10, 10, WINDOW_COLOR)
            fill_rect(car_x + 25, train.y + 5, 10, 10, WINDOW_COLOR)

    def draw(self, switches: Iterable[Switch], trains: Iterable[Train]) -> None:  # pragma: no cover - visual
        self.draw_tracks()
        self.draw_switches(switches)
        for t in trains:
            self.draw_train(t)
        self.draw_stop()


__all__ = ["RailRenderer"]
