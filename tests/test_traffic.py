import numpy as np
import pytest

from raw_maxmin.config import RawConfig
from raw_maxmin.errors import ConfigurationError
from raw_maxmin.traffic import generate_poisson_traffic, generate_traffic


def test_shape_and_non_negative_integers():
    load = generate_poisson_traffic(200, 3.0, seed=7)
    assert load.shape == (200,)
    assert load.dtype == np.int64
    assert (load >= 0).all()


def test_seeded_runs_are_reproducible():
    cfg = RawConfig(n_groups=4, n_stations=50, arrival_rate=5.0)
    a = generate_traffic(cfg, seed=11)
    b = generate_traffic(cfg, rng=np.random.default_rng(11))
    assert np.array_equal(a, b)


def test_load_is_read_only():
    load = generate_poisson_traffic(5, 1.0, seed=0)
    with pytest.raises(ValueError):
        load[0] = 99


def test_zero_stations_gives_empty_load():
    assert generate_poisson_traffic(0, 2.0, seed=0).size == 0


def test_invalid_rate_rejected():
    with pytest.raises(ConfigurationError):
        generate_poisson_traffic(10, 0.0)


def test_seed_and_rng_together_rejected():
    with pytest.raises(ValueError):
        generate_poisson_traffic(10, 1.0, seed=1, rng=np.random.default_rng(1))


def test_doubling_rate_doubles_mean_load():
    low = generate_poisson_traffic(20000, 2.0, seed=3)
    high = generate_poisson_traffic(20000, 4.0, seed=3)
    assert low.mean() == pytest.approx(2.0, rel=0.05)
    assert high.mean() / low.mean() == pytest.approx(2.0, rel=0.05)


def test_non_integer_station_count_rejected():
    with pytest.raises(ConfigurationError):
        generate_poisson_traffic(2.5, 1.0)
