"""Pairwise train collision scan.

Expose `find_collision(trains)`, returning the first colliding pair. The
entity count on screen is small, so a plain O(n^2) scan is used.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from config import COLLISION_LANE_TOLERANCE
from railway.train import Train


def same_lane(a: Train, b: Train) -> bool:
    return abs(a.y - b.y) < COLLISION_LANE_TOLERANCE


def find_collision(trains: Sequence[Train]) -> Optional[Tuple[Train, Train]]:
    """Return the first (a, b) pair in list order that overlaps on one lane."""
    for i in range(len(trains)):
        for j in range(i + 1, len(trains)):
            a = trains[i]
            b = trains[j]
            if same_lane(a, b) and a.collides_with(b):
                return a, b
    return None


__all__ = ["same_lane", "find_collision"]
