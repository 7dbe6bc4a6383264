from railway.collision import find_collision, same_lane
from railway.train import Train


def test_overlapping_trains_on_same_track_collide():
    a = Train.of_type("blue", x=0, track=2)
    b = Train.of_type("red", x=30, track=2)
    assert same_lane(a, b)
    assert find_collision([a, b]) == (a, b)


def test_touching_edges_do_not_collide():
    a = Train.of_type("blue", x=0, track=2)
    b = Train.of_type("blue", x=40, track=2)
    assert find_collision([a, b]) is None


def test_different_tracks_never_collide():
    a = Train.of_type("blue", x=0, track=0)
    b = Train.of_type("blue", x=0, track=1)
    assert not same_lane(a, b)
    assert find_collision([a, b]) is None


def test_first_pair_in_list_order_is_reported():
    a = Train.of_type("blue", x=0, track=0)
    b = Train.of_type("blue", x=10, track=0)
    c = Train.of_type("blue", x=20, track=0)
    assert find_collision([a, b, c]) == (a, b)


def test_empty_and_single():
    assert find_collision([]) is None
    assert find_collision([Train.of_type("blue")]) is None
