import numpy as np
import pytest

from raw_maxmin.assigner import Assignment, max_min_assign
from raw_maxmin.collision import collision_probability, success_probability
from raw_maxmin.errors import DimensionMismatchError
from raw_maxmin.throughput import estimate_throughput, group_collision_probabilities


def test_single_station_never_collides():
    for p in (0.01, 0.125, 0.5, 1.0):
        assert collision_probability(1, p) == 0.0
        assert success_probability(1, p) == 1.0


@pytest.mark.parametrize("n_slots", [2, 4, 8, 16, 64])
def test_collision_bounds(n_slots):
    p = 1.0 / n_slots
    prev = 0.0
    for k in range(1, 40):
        c = collision_probability(k, p)
        assert 0.0 <= c < 1.0
        assert c >= prev
        prev = c


def test_single_slot_with_contenders_always_collides():
    assert collision_probability(3, 1.0) == 1.0


def test_known_value():
    # 3 stations, 8 slots: 1 - (7/8)^2
    assert collision_probability(3, 1 / 8) == pytest.approx(15 / 64)


def test_collision_invalid_inputs():
    with pytest.raises(ValueError):
        collision_probability(0, 0.5)
    with pytest.raises(ValueError):
        collision_probability(2, 0.0)
    with pytest.raises(ValueError):
        collision_probability(2, 1.5)


def test_single_group_throughput():
    asg, loads = max_min_assign([2, 4, 1], 1)
    tp = estimate_throughput(asg, [2, 4, 1], 8)
    assert loads.tolist() == [7.0]
    assert tp[0] == pytest.approx(7 * (1 - collision_probability(3, 1 / 8)))


def test_empty_group_has_zero_throughput():
    asg = Assignment(station_groups=(0, 0), n_groups=3)
    tp = estimate_throughput(asg, [4, 6], 8)
    assert tp[1] == 0.0 and tp[2] == 0.0
    assert tp[0] == pytest.approx(10 * (7 / 8))
    colls = group_collision_probabilities(asg, 8)
    assert colls[0] == pytest.approx(1 / 8)
    assert np.isnan(colls[1])


def test_lone_station_keeps_full_load():
    asg = Assignment(station_groups=(0, 1), n_groups=2)
    tp = estimate_throughput(asg, [5, 9], 4)
    assert tp.tolist() == [5.0, 9.0]


def test_throughput_invalid_slots():
    asg = Assignment(station_groups=(0,), n_groups=1)
    with pytest.raises(ValueError):
        estimate_throughput(asg, [1], 0)
    with pytest.raises(ValueError):
        estimate_throughput(asg, [1], 2.5)


def test_throughput_length_mismatch():
    asg = Assignment(station_groups=(0, 0), n_groups=1)
    with pytest.raises(DimensionMismatchError):
        estimate_throughput(asg, [1, 2, 3], 8)


@pytest.mark.parametrize("groups, n_groups", [
    ((0, -1), 2),
    ((0, 5), 2),
    ((0, 1), 0),
    ((0, 1.0), 2),
])
def test_assignment_rejects_out_of_range_groups(groups, n_groups):
    with pytest.raises(ValueError):
        Assignment(station_groups=groups, n_groups=n_groups)


def test_assignment_keeps_every_station_load():
    asg = Assignment(station_groups=(0, 1), n_groups=2)
    tp = estimate_throughput(asg, [4, 6], 8)
    assert tp.sum() == pytest.approx(10.0)
