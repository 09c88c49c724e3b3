"""Max-Min assignment of stations to RAW groups.

Greedy "heaviest remaining station into the currently lightest group":

1. All group loads start at zero, all stations unassigned.
2. While some station is unassigned:
   - pick the group with the smallest cumulative load (lowest index on ties)
   - pick the unassigned station with the largest load (lowest index on ties)
   - assign it and add its load to the group
3. Return the assignment and the final group loads.

This is an LPT-style heuristic: not optimal for the maximum group load in
general, but O(n * g) with predictable tie-breaks.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError, DimensionMismatchError


@dataclass(frozen=True)
class Assignment:
    """Station -> group mapping; each station belongs to exactly one group."""
    station_groups: Tuple[int, ...]
    n_groups: int

    def __post_init__(self) -> None:
        if isinstance(self.n_groups, bool) or not isinstance(self.n_groups, Integral) or self.n_groups <= 0:
            raise ValueError(f"n_groups must be a positive integer, got {self.n_groups!r}")
        for s, g in enumerate(self.station_groups):
            if isinstance(g, bool) or not isinstance(g, Integral) or not 0 <= g < self.n_groups:
                raise ValueError(f"station {s} has invalid group {g!r} (n_groups={self.n_groups})")

    @property
    def n_stations(self) -> int:
        return len(self.station_groups)

    @property
    def matrix(self) -> np.ndarray:
        """Station x group 0/1 indicator matrix (read-only)."""
        m = np.zeros((self.n_stations, self.n_groups), dtype=np.int8)
        if self.n_stations:
            m[np.arange(self.n_stations), np.asarray(self.station_groups)] = 1
        m.setflags(write=False)
        return m

    def group_of(self, station: int) -> int:
        return self.station_groups[station]

    def stations_in(self, group: int) -> Tuple[int, ...]:
        if not 0 <= group < self.n_groups:
            raise IndexError(f"group {group} out of range")
        return tuple(i for i, g in enumerate(self.station_groups) if g == group)

    def group_sizes(self) -> Tuple[int, ...]:
        sizes = [0] * self.n_groups
        for g in self.station_groups:
            sizes[g] += 1
        return tuple(sizes)


def max_min_assign(
    traffic_load: Sequence[int],
    n_groups: int,
    n_stations: Optional[int] = None,
) -> Tuple[Assignment, np.ndarray]:
    """Balance stations over ``n_groups`` groups by offered load.

    Args:
        traffic_load: non-negative offered load per station
        n_groups: number of RAW groups (positive integer)
        n_stations: expected station count; checked against len(traffic_load)
    Returns:
        (Assignment, group_load) where group_load is a read-only float array
    """
    if isinstance(n_groups, bool) or not isinstance(n_groups, Integral) or n_groups <= 0:
        raise ConfigurationError(f"n_groups must be a positive integer, got {n_groups!r}")
    load = np.asarray(traffic_load, dtype=float).reshape(-1)
    if n_stations is not None and load.size != n_stations:
        raise DimensionMismatchError(
            f"traffic load has {load.size} entries, expected {n_stations}"
        )
    if load.size and load.min() < 0:
        raise ValueError("traffic load must be non-negative")

    group_load = np.zeros(int(n_groups), dtype=float)
    station_groups = [-1] * load.size
    unassigned = np.ones(load.size, dtype=bool)

    for _ in range(load.size):
        # argmin/argmax return the first index among ties
        g = int(np.argmin(group_load))
        # assigned stations are masked to -1, below any real (>= 0) load
        s = int(np.argmax(np.where(unassigned, load, -1.0)))
        station_groups[s] = g
        group_load[g] += load[s]
        unassigned[s] = False

    group_load.setflags(write=False)
    return Assignment(station_groups=tuple(station_groups), n_groups=int(n_groups)), group_load
