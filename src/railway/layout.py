"""Static rail layout: tracks, switches, train types and the station stop.

Tracks are plain Y coordinates indexed 0..3. Switches are the only layout
pieces with mutable state (their `active` flag), so they are small dataclass
records rebuilt from `config.SWITCH_LAYOUT` by `build_switches()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from config import (
    TRACK_Y_POSITIONS,
    SWITCH_LAYOUT,
    SWITCH_HIT_X,
    SWITCH_HIT_Y,
)


def track_y(track: int) -> float:
    return TRACK_Y_POSITIONS[track]


@dataclass
class Switch:
    x: float
    track: int  # source track
    to_track: int
    active: bool = False

    @property
    def y(self) -> float:
        return track_y(self.track)

    @property
    def target_y(self) -> float:
        return track_y(self.to_track)

    def hit(self, px: float, py: float) -> bool:
        """True if a click at (px, py) lands inside this switch's hit-box."""
        return abs(px - self.x) < SWITCH_HIT_X and abs(py - self.y) < SWITCH_HIT_Y

    def toggle(self) -> bool:
        self.active = not self.active
        return self.active


def build_switches() -> List[Switch]:
    return [Switch(x=x, track=src, to_track=dst) for x, src, dst in SWITCH_LAYOUT]


@dataclass(frozen=True)
class TrainType:
    name: str
    color: Tuple[float, float, float]
    speed: float
    points: int


TRAIN_TYPES: Dict[str, TrainType] = {
    "blue": TrainType("blue", (0.4, 0.4, 0.8), speed=1.0, points=1),
    "red": TrainType("red", (0.8, 0.4, 0.4), speed=1.5, points=2),
}


__all__ = ["track_y", "Switch", "build_switches", "TrainType", "TRAIN_TYPES"]
