from __future__ import annotations

from typing import Callable, List
from dataclasses import dataclass, field

UpdateFn = Callable[[int], None]


@dataclass
class Scene:
    """Base scene: the engine feeds it clock ticks, events and render calls."""

    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, now_ms: int) -> None:
        for fn in self.updaters:
            fn(now_ms)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Scenes own their full render pipeline (projection, clear, overlays)
    def render(self, now_ms: int) -> None:  # pragma: no cover - visual
        pass
