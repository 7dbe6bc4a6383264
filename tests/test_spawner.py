import pytest

from config import WIDTH, TRAIN_SPAWN_X
from railway.spawner import TrainSpawner, required_spacing
from railway.train import Train

from conftest import ScriptedRandom


def test_required_spacing_grows_for_faster_follower():
    assert required_spacing(1.0, 1.0) == pytest.approx(150)
    assert required_spacing(1.5, 1.0) == pytest.approx(200)


def test_required_spacing_shrinks_for_slower_follower():
    assert required_spacing(1.0, 1.5) == pytest.approx(100)
    assert required_spacing(1.0, 3.0) == pytest.approx(40)


def test_first_attempt_spawns_immediately():
    spawner = TrainSpawner(ScriptedRandom(randoms=[0.1], cars=[3]))
    train = spawner.try_spawn([], 1.0, 2500, now_ms=0)
    assert train is not None
    assert train.kind.name == "red"
    assert train.num_cars == 3
    assert train.track == 0
    assert train.x == TRAIN_SPAWN_X
    assert spawner.last_spawn_ms == 0


def test_type_probability_threshold():
    assert TrainSpawner(ScriptedRandom(randoms=[0.29])).pick_type().name == "red"
    assert TrainSpawner(ScriptedRandom(randoms=[0.3])).pick_type().name == "blue"


def test_waits_for_interval():
    spawner = TrainSpawner(ScriptedRandom())
    spawner.last_spawn_ms = 1000
    assert spawner.try_spawn([], 1.0, 2500, now_ms=3500) is None
    assert spawner.try_spawn([], 1.0, 2500, now_ms=3501) is not None


def test_veto_keeps_timer_expired():
    spawner = TrainSpawner(ScriptedRandom(randoms=[0.9]))
    spawner.last_spawn_ms = 0
    near_edge = Train.of_type("blue", x=WIDTH - 100)
    assert spawner.try_spawn([near_edge], 1.0, 2500, now_ms=5000) is None
    assert spawner.last_spawn_ms == 0

    far = Train.of_type("blue", x=WIDTH - 150)
    assert spawner.try_spawn([near_edge, far], 1.0, 2500, now_ms=5001) is not None
    assert spawner.last_spawn_ms == 5001


def test_faster_train_needs_more_room():
    last = Train.of_type("blue", x=WIDTH - 180)
    red = TrainSpawner(ScriptedRandom(randoms=[0.1]))
    blue = TrainSpawner(ScriptedRandom(randoms=[0.9]))
    assert red.try_spawn([last], 1.0, 2500, now_ms=0) is None
    assert blue.try_spawn([last], 1.0, 2500, now_ms=0) is not None
