"""Rail scene: owns the game state, input mapping and full rendering.

The engine only pumps the clock and events; everything gameplay-related is
forwarded to `RailGame` from here.
"""

from __future__ import annotations

from typing import Optional

from OpenGL.GL import glClear, glClearColor, GL_COLOR_BUFFER_BIT

from config import WIDTH, HEIGHT, BACKGROUND_COLOR, DEBUG
from core.highscore import HighScoreStore
from core.scene import Scene
from railway.game import RailGame
from render.primitives import begin_2d
from render.rail_renderer import RailRenderer
from sound.sound_utils import Sounds, GAME_TONES
from ui.controls import TOGGLE_DEBUG, handle_input
from ui.hud import RailHUD
from ui.text_renderer import TextRenderer


class RailScene(Scene):
    def __init__(
        self,
        *,
        high_scores: Optional[HighScoreStore] = None,
        debug: bool = DEBUG,
    ) -> None:
        super().__init__()
        self.game = RailGame(high_scores=high_scores, debug=debug)
        self.updaters.append(self.game.update)

        Sounds.ensure_init()
        Sounds.register_tones(GAME_TONES)

        self.renderer = RailRenderer()
        self.hud = RailHUD(TextRenderer(), show_debug=debug)
        print(f"[RailScene] Ready (high score {self.game.high_score})")

    def handle_event(self, event) -> None:
        if handle_input(self.game, event) == TOGGLE_DEBUG:
            self.hud.show_debug = not self.hud.show_debug

    def render(self, now_ms: int) -> None:  # pragma: no cover - visual
        glClearColor(*BACKGROUND_COLOR)
        glClear(GL_COLOR_BUFFER_BIT)
        begin_2d(WIDTH, HEIGHT)
        self.renderer.draw(self.game.switches, self.game.trains)
        self.hud.draw(self.game, now_ms)
