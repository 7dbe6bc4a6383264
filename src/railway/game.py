"""Rail game state and the per-frame update.

`RailGame` owns every piece of mutable gameplay state (trains, switches,
score, high score, game-over flag, difficulty) so the scene only forwards
clock ticks and input to it. Sound effects go through the `Sounds`
registry, which is a no-op when no audio device is present.
"""

from __future__ import annotations

import random
from typing import List, Optional

from config import WIDTH, DEBUG
from core.highscore import HighScoreStore
from railway.collision import find_collision
from railway.difficulty import Difficulty
from railway.layout import Switch, build_switches
from railway.spawner import TrainSpawner
from railway.train import Train, update_train
from sound.sound_utils import Sounds


class RailGame:
    def __init__(
        self,
        *,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
        debug: bool = DEBUG,
    ) -> None:
        self.high_scores = high_scores or HighScoreStore()
        self.spawner = TrainSpawner(rng)
        self.switches: List[Switch] = build_switches()
        self.debug = debug
        self.trains: List[Train] = []
        self.score = 0
        self.game_over = False
        self.difficulty = Difficulty()

    # ------------------------------------------------------------------
    @property
    def high_score(self) -> int:
        return self.high_scores.value

    @property
    def speed(self) -> float:
        return self.difficulty.speed

    @property
    def spawn_interval_ms(self) -> int:
        return self.difficulty.spawn_interval_ms

    # ------------------------------------------------------------------
    def update(self, now_ms: int) -> None:
        if self.game_over:
            return

        train = self.spawner.try_spawn(self.trains, self.speed, self.spawn_interval_ms, now_ms)
        if train is not None:
            self.trains.append(train)

        for t in self.trains:
            update_train(t, self.switches, self.speed, now_ms, on_switch=self._on_switch)

        self.check_collisions()
        if self.game_over:
            return

        self._retire_departed()
        self.difficulty = Difficulty.for_score(self.score)

    def check_collisions(self) -> bool:
        """End the game on the first colliding pair. Returns the game-over flag."""
        if self.game_over:
            return True
        if find_collision(self.trains) is not None:
            Sounds.play("collision")
            self.game_over = True
            self.high_scores.submit(self.score)
        return self.game_over

    def _retire_departed(self) -> None:
        on_screen: List[Train] = []
        for t in self.trains:
            if t.x < WIDTH:
                on_screen.append(t)
            else:
                self.score += t.value
                Sounds.play("pass")
        self.trains = on_screen
        self.high_scores.submit(self.score)

    def _on_switch(self, train: Train, switch: Switch) -> None:
        Sounds.play("switch")

    # ------------------------------------------------------------------
    def click(self, x: float, y: float) -> List[Switch]:
        """Toggle every switch whose hit-box contains (x, y).

        Overlapping hit-boxes all toggle. Ignored once the game is over.
        Returns the switches that changed.
        """
        if self.game_over:
            return []
        if self.debug:
            print(f"[Input] Click at: {x}, {y}")
        toggled = []
        for index, s in enumerate(self.switches):
            if s.hit(x, y):
                s.toggle()
                Sounds.play("switch")
                toggled.append(s)
                if self.debug:
                    print(f"[Input] Switch {index} toggled to {s.active}")
        return toggled

    def restart(self) -> None:
        """Reset trains, score, game-over flag and difficulty; keep high score and switches."""
        self.trains = []
        self.game_over = False
        self.score = 0
        self.difficulty = Difficulty()


__all__ = ["RailGame"]
