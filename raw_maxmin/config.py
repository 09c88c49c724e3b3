"""Run configuration for the RAW Max-Min model.

A ``RawConfig`` is fixed for the duration of a run. Validation happens at
construction so that no pipeline stage ever sees a bad value:
- ``n_groups``, ``n_stations`` and ``n_slots`` must be positive integers
- ``arrival_rate``, ``group_duration`` and ``simulation_time`` must be positive reals

Defaults follow a common 802.11ah RAW setup: 8 contention
slots per group and 100 ms RAW group duration over a 1000 ms observation.
"""

import math
from dataclasses import dataclass, replace as _dc_replace
from numbers import Integral, Real

from .errors import ConfigurationError


DEFAULT_SLOTS = 8
DEFAULT_GROUP_DURATION_MS = 100.0
DEFAULT_SIMULATION_TIME_MS = 1000.0


def _check_positive_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")


def _check_positive_real(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(float(value)) or value <= 0:
        raise ConfigurationError(f"{name} must be positive and finite, got {value!r}")


@dataclass(frozen=True)
class RawConfig:
    """Parameters of one RAW Max-Min run.

    Fields:
    - n_groups: number of RAW groups stations are split into
    - n_stations: number of stations contending
    - arrival_rate: Poisson mean of offered packets per station
    - n_slots: contention slots per RAW group
    - group_duration: RAW group duration (ms)
    - simulation_time: observation window the offered load refers to (ms)
    """
    n_groups: int
    n_stations: int
    arrival_rate: float
    n_slots: int = DEFAULT_SLOTS
    group_duration: float = DEFAULT_GROUP_DURATION_MS
    simulation_time: float = DEFAULT_SIMULATION_TIME_MS

    def __post_init__(self) -> None:
        _check_positive_int("n_groups", self.n_groups)
        _check_positive_int("n_stations", self.n_stations)
        _check_positive_real("arrival_rate", self.arrival_rate)
        _check_positive_int("n_slots", self.n_slots)
        _check_positive_real("group_duration", self.group_duration)
        _check_positive_real("simulation_time", self.simulation_time)

    @property
    def slot_probability(self) -> float:
        """Probability a station picks any given contention slot (1 / n_slots)."""
        return 1.0 / self.n_slots

    def replace(self, **changes) -> "RawConfig":
        """Return a validated copy with some fields changed."""
        return _dc_replace(self, **changes)
