import pygame

from config import RESTART_BUTTON_RECT, TRACK_Y_POSITIONS
from railway.train import Train
from ui.controls import (
    RESTART,
    TOGGLE_DEBUG,
    TOGGLE_SWITCH,
    handle_input,
    restart_button_hit,
)

BX, BY, BW, BH = RESTART_BUTTON_RECT


def click(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(x, y))


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_restart_button_hit_box():
    assert restart_button_hit(BX + BW / 2, BY + BH / 2)
    assert restart_button_hit(BX, BY)
    assert not restart_button_hit(BX - 1, BY)
    assert not restart_button_hit(BX, BY + BH + 1)


def test_click_on_restart_button_restarts(game):
    game.trains = [Train.of_type("blue", x=0)]
    game.score = 7
    game.game_over = True
    assert handle_input(game, click(BX + 5, BY + 5)) == RESTART
    assert game.trains == []
    assert game.score == 0
    assert not game.game_over


def test_click_elsewhere_goes_to_switches(game):
    s = game.switches[0]
    assert handle_input(game, click(s.x, TRACK_Y_POSITIONS[0])) == TOGGLE_SWITCH
    assert s.active
    assert game.score == 0


def test_other_mouse_buttons_ignored(game):
    s = game.switches[0]
    assert handle_input(game, click(s.x, s.y, button=3)) is None
    assert not s.active


def test_r_key_restarts(game):
    game.score = 4
    game.game_over = True
    assert handle_input(game, key(pygame.K_r)) == RESTART
    assert game.score == 0
    assert not game.game_over


def test_d_key_reports_debug_toggle(game):
    game.score = 4
    assert handle_input(game, key(pygame.K_d)) == TOGGLE_DEBUG
    assert game.score == 4


def test_unrelated_events_ignored(game):
    assert handle_input(game, key(pygame.K_SPACE)) is None
    assert handle_input(game, pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0))) is None
