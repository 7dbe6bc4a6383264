"""Railway package: re-export the gameplay types for simpler imports.

Callers can import public types from `railway` directly, e.g.:

    from railway import RailGame, Train, Switch

The GL scene (`railway.railscene.RailScene`) is not re-exported so the
gameplay layer can be imported without an OpenGL context.
"""

from .layout import Switch, TrainType, TRAIN_TYPES, build_switches, track_y
from .train import Train, update_train
from .collision import find_collision
from .difficulty import Difficulty, speed_multiplier, spawn_interval
from .spawner import TrainSpawner, required_spacing
from .game import RailGame

__all__ = [
    "Switch",
    "TrainType",
    "TRAIN_TYPES",
    "build_switches",
    "track_y",
    "Train",
    "update_train",
    "find_collision",
    "Difficulty",
    "speed_multiplier",
    "spawn_interval",
    "TrainSpawner",
    "required_spacing",
    "RailGame",
]
