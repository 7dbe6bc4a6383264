"""Maps pygame input events onto game actions.

Kept free of GL so the mapping can be exercised without a window.
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import RESTART_BUTTON_RECT
from railway.game import RailGame

RESTART = "restart"
TOGGLE_SWITCH = "toggle_switch"
TOGGLE_DEBUG = "toggle_debug"


def restart_button_hit(x: float, y: float) -> bool:
    bx, by, bw, bh = RESTART_BUTTON_RECT
    return bx <= x <= bx + bw and by <= y <= by + bh


def handle_input(game: RailGame, event) -> Optional[str]:
    """Apply `event` to `game` and return the action taken, if any.

    Left click on the restart button restarts; any other left click goes to
    the switches. `R` restarts. `D` is reported back for the HUD to handle.
    """
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        x, y = event.pos
        if restart_button_hit(x, y):
            game.restart()
            return RESTART
        game.click(x, y)
        return TOGGLE_SWITCH
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_r:
            game.restart()
            return RESTART
        if event.key == pygame.K_d:
            return TOGGLE_DEBUG
    return None


__all__ = ["RESTART", "TOGGLE_SWITCH", "TOGGLE_DEBUG", "restart_button_hit", "handle_input"]
