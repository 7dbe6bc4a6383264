"""Train record and the per-frame motion/stop/switch update.

Trains are plain records; behaviour lives in free functions so the game,
the renderer and the tests can all work on the same data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from config import (
    STOP_TRACK,
    STOP_X,
    STOP_DURATION_MS,
    STOP_RESUME_NUDGE,
    SWITCH_TOLERANCE,
    TRAIN_WIDTH,
    TRAIN_HEIGHT,
    TRAIN_SPAWN_X,
)
from railway.layout import Switch, TrainType, TRAIN_TYPES, track_y


@dataclass
class Train:
    kind: TrainType
    x: float = TRAIN_SPAWN_X
    track: int = 0
    num_cars: int = 1
    stopped: bool = False
    stop_time: Optional[int] = None  # ms timestamp the dwell started
    dwell_done: bool = False

    @classmethod
    def of_type(cls, name: str, **kwargs) -> "Train":
        return cls(kind=TRAIN_TYPES[name], **kwargs)

    @property
    def y(self) -> float:
        return track_y(self.track)

    @property
    def speed(self) -> float:
        return self.kind.speed

    @property
    def value(self) -> int:
        """Score awarded when this train leaves the screen."""
        return self.kind.points * self.num_cars

    def dwell_remaining(self, now_ms: int) -> int:
        if not self.stopped or self.stop_time is None:
            return 0
        return max(0, STOP_DURATION_MS - (now_ms - self.stop_time))

    def collides_with(self, other: "Train") -> bool:
        # Lead car only; trailing cars are cosmetic
        return (
            self.x < other.x + TRAIN_WIDTH
            and self.x + TRAIN_WIDTH > other.x
            and self.y < other.y + TRAIN_HEIGHT
            and self.y + TRAIN_HEIGHT > other.y
        )


def update_train(
    train: Train,
    switches: Iterable[Switch],
    speed_multiplier: float,
    now_ms: int,
    on_switch: Optional[Callable[[Train, Switch], None]] = None,
) -> None:
    """Advance one frame: station stop, movement, then switch transitions."""
    if (
        train.track == STOP_TRACK
        and train.x >= STOP_X
        and not train.stopped
        and not train.dwell_done
    ):
        train.x = STOP_X
        train.stopped = True
        train.stop_time = now_ms

    if train.stopped and now_ms - train.stop_time > STOP_DURATION_MS:
        train.stopped = False
        train.dwell_done = True
        # Past the marker so the stop does not trigger again
        train.x = STOP_X + STOP_RESUME_NUDGE

    if not train.stopped:
        train.x += train.speed * speed_multiplier

    for s in switches:
        if s.active and abs(train.x - s.x) < SWITCH_TOLERANCE and train.y == s.y:
            train.track = s.to_track
            if on_switch is not None:
                on_switch(train, s)


__all__ = ["Train", "update_train"]
