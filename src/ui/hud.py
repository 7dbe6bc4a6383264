"""Rail HUD: score, high score, restart button, debug lines, game-over overlay.

Drawn after the rail yard in the same canvas projection.
"""

from __future__ import annotations

from config import (
    WIDTH,
    HEIGHT,
    TEXT_COLOR,
    OVERLAY_TEXT_COLOR,
    OVERLAY_OPACITY,
    RESTART_BUTTON_RECT,
    RESTART_BUTTON_COLOR,
)
from railway.game import RailGame
from render.primitives import fill_rect
from ui.text_renderer import TextRenderer


class RailHUD:
    def __init__(self, text: TextRenderer, *, show_debug: bool = False) -> None:
        self.text = text
        self.show_debug = show_debug

    def draw(self, game: RailGame, now_ms: int) -> None:  # pragma: no cover - visual
        bx, by, bw, bh = RESTART_BUTTON_RECT
        fill_rect(bx, by, bw, bh, RESTART_BUTTON_COLOR)

        if game.game_over:
            fill_rect(0, 0, WIDTH, HEIGHT, (0.0, 0.0, 0.0, OVERLAY_OPACITY))

        t = self.text
        t.begin()
        t.draw_text(f"Score: {game.score}", 10, 10, TEXT_COLOR, key="score")
        t.draw_text(
            f"High Score: {game.high_score}", WIDTH - 10, 10, TEXT_COLOR, key="high", align="topright"
        )
        t.draw_text("Restart", bx + bw / 2, by + bh / 2, TEXT_COLOR, size=22, align="center")

        if self.show_debug:
            y = 60
            for i, train in enumerate(game.trains):
                status = "STOPPED" if train.stopped else "MOVING"
                line = (
                    f"Train {i}: x={int(train.x)}, track={train.track}, "
                    f"{status} {train.dwell_remaining(now_ms)}ms"
                )
                t.draw_text(line, 10, y, TEXT_COLOR, size=16, key=f"debug{i}")
                y += 15

        if game.game_over:
            t.draw_text("Game Over", WIDTH / 2, HEIGHT / 2, OVERLAY_TEXT_COLOR, size=64, align="center")
        t.end()


__all__ = ["RailHUD"]
