import pytest

from config import STOP_X, STOP_DURATION_MS, TRACK_Y_POSITIONS
from railway.layout import Switch
from railway.train import Train, update_train


def test_moves_by_type_speed_times_global_speed():
    blue = Train.of_type("blue", x=0)
    red = Train.of_type("red", x=0)
    update_train(blue, [], 1.0, now_ms=0)
    update_train(red, [], 2.0, now_ms=0)
    assert blue.x == pytest.approx(1.0)
    assert red.x == pytest.approx(3.0)


def test_value_is_points_times_cars():
    assert Train.of_type("blue", num_cars=3).value == 3
    assert Train.of_type("red", num_cars=3).value == 6


def test_y_follows_track():
    t = Train.of_type("blue", track=2)
    assert t.y == TRACK_Y_POSITIONS[2]


def test_stop_snaps_and_pins_until_dwell_elapses():
    t = Train.of_type("blue", x=STOP_X + 0.7, track=1)
    update_train(t, [], 1.0, now_ms=1000)
    assert t.stopped
    assert t.x == STOP_X
    assert t.stop_time == 1000

    for now in (1001, 1500, 2500, 1000 + STOP_DURATION_MS):
        update_train(t, [], 1.0, now_ms=now)
        assert t.stopped
        assert t.x == STOP_X

    update_train(t, [], 1.0, now_ms=1001 + STOP_DURATION_MS)
    assert not t.stopped
    assert t.x == pytest.approx(STOP_X + 10 + 1)


def test_resumed_train_does_not_stop_again():
    t = Train.of_type("blue", x=STOP_X, track=1)
    update_train(t, [], 1.0, now_ms=0)
    update_train(t, [], 1.0, now_ms=STOP_DURATION_MS + 1)
    update_train(t, [], 1.0, now_ms=STOP_DURATION_MS + 2)
    assert not t.stopped
    assert t.dwell_done
    assert t.x == pytest.approx(STOP_X + 12)


def test_stop_only_applies_on_stop_track():
    t = Train.of_type("blue", x=STOP_X, track=0)
    update_train(t, [], 1.0, now_ms=0)
    assert not t.stopped
    assert t.x == pytest.approx(STOP_X + 1)


def test_dwell_remaining():
    t = Train.of_type("blue", x=STOP_X, track=1)
    assert t.dwell_remaining(0) == 0
    update_train(t, [], 1.0, now_ms=100)
    assert t.dwell_remaining(600) == STOP_DURATION_MS - 500


def test_active_switch_moves_train_to_target_track():
    s = Switch(x=200, track=0, to_track=1, active=True)
    t = Train.of_type("blue", x=196, track=0)
    fired = []
    update_train(t, [s], 1.0, now_ms=0, on_switch=lambda train, sw: fired.append(sw))
    assert t.track == 1
    assert t.y == TRACK_Y_POSITIONS[1]
    assert fired == [s]


def test_inactive_switch_never_changes_path():
    s = Switch(x=200, track=0, to_track=1, active=False)
    t = Train.of_type("blue", x=150, track=0)
    for _ in range(100):
        update_train(t, [s], 1.0, now_ms=0)
    assert t.track == 0


def test_switch_on_other_track_is_ignored():
    s = Switch(x=400, track=1, to_track=2, active=True)
    t = Train.of_type("blue", x=398, track=3)
    update_train(t, [s], 1.0, now_ms=0)
    assert t.track == 3


def test_switch_outside_tolerance_is_ignored():
    s = Switch(x=200, track=0, to_track=1, active=True)
    t = Train.of_type("blue", x=190, track=0)
    update_train(t, [s], 1.0, now_ms=0)
    assert t.track == 0


def test_train_can_take_successive_switches():
    switches = [
        Switch(x=200, track=0, to_track=1, active=True),
        Switch(x=400, track=1, to_track=2, active=True),
    ]
    t = Train.of_type("blue", x=150, track=0)
    for _ in range(300):
        update_train(t, switches, 1.0, now_ms=0)
    assert t.track == 2


def test_collides_with_uses_lead_car_only():
    a = Train.of_type("blue", x=100, track=0, num_cars=3)
    b = Train.of_type("blue", x=20, track=0)
    # b sits where a's trailing cars are drawn
    assert not a.collides_with(b)
    assert a.collides_with(Train.of_type("blue", x=139, track=0))
