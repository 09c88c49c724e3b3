"""Per-group throughput estimate.

For a group with k stations and total offered load L:

    throughput = L * (1 - c(k, 1 / n_slots))

and an empty group has zero throughput. See ``collision.collision_probability``.
"""

from numbers import Integral
from typing import Sequence

import numpy as np

from .assigner import Assignment
from .collision import collision_probability
from .errors import DimensionMismatchError


def group_collision_probabilities(assignment: Assignment, n_slots: int) -> np.ndarray:
    """Collision probability per group; NaN for groups with no stations."""
    _check_slots(n_slots)
    p = 1.0 / n_slots
    out = np.full(assignment.n_groups, np.nan)
    for g, k in enumerate(assignment.group_sizes()):
        if k > 0:
            out[g] = collision_probability(k, p)
    return out


def estimate_throughput(
    assignment: Assignment,
    traffic_load: Sequence[int],
    n_slots: int,
) -> np.ndarray:
    """Estimated successful packets per group (read-only float array)."""
    _check_slots(n_slots)
    load = np.asarray(traffic_load, dtype=float).reshape(-1)
    if load.size != assignment.n_stations:
        raise DimensionMismatchError(
            f"traffic load has {load.size} entries, assignment covers {assignment.n_stations}"
        )
    p = 1.0 / n_slots
    throughput = np.zeros(assignment.n_groups, dtype=float)
    for g in range(assignment.n_groups):
        members = assignment.stations_in(g)
        k = len(members)
        if k == 0:
            continue
        success = 1.0 - collision_probability(k, p)
        throughput[g] = load[list(members)].sum() * success
    throughput.setflags(write=False)
    return throughput


def _check_slots(n_slots: int) -> None:
    if isinstance(n_slots, bool) or not isinstance(n_slots, Integral) or n_slots <= 0:
        raise ValueError(f"n_slots must be a positive integer, got {n_slots!r}")
