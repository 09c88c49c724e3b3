"""Per-station offered traffic.

Each station's offered load for a run is a single Poisson draw with mean
``arrival_rate`` (packets over the observation window). Draws are independent
across stations.
"""

from numbers import Integral
from typing import Optional

import numpy as np

from .config import RawConfig
from .errors import ConfigurationError


def _make_rng(seed: Optional[int], rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ValueError("pass either seed or rng, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def generate_poisson_traffic(
    n_stations: int,
    arrival_rate: float,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Draw one Poisson(arrival_rate) load per station.

    Returns a read-only int64 array of length ``n_stations``. Without a seed
    or generator the result is not reproducible.
    """
    if isinstance(n_stations, bool) or not isinstance(n_stations, Integral):
        raise ConfigurationError(f"n_stations must be an integer, got {n_stations!r}")
    if n_stations < 0:
        raise ConfigurationError("n_stations must be non-negative")
    if not arrival_rate > 0:
        raise ConfigurationError("arrival_rate must be positive")
    gen = _make_rng(seed, rng)
    load = gen.poisson(lam=float(arrival_rate), size=int(n_stations)).astype(np.int64)
    load.setflags(write=False)
    return load


def generate_traffic(
    config: RawConfig,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Generate the traffic load for a configured run."""
    return generate_poisson_traffic(config.n_stations, config.arrival_rate, seed=seed, rng=rng)
