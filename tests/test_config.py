import pytest

from raw_maxmin.config import RawConfig, DEFAULT_SLOTS, DEFAULT_GROUP_DURATION_MS
from raw_maxmin.errors import ConfigurationError


def test_defaults():
    cfg = RawConfig(n_groups=4, n_stations=100, arrival_rate=5.0)
    assert cfg.n_slots == DEFAULT_SLOTS == 8
    assert cfg.group_duration == DEFAULT_GROUP_DURATION_MS == 100.0
    assert cfg.slot_probability == pytest.approx(1 / 8)


@pytest.mark.parametrize("field, value", [
    ("n_groups", 0),
    ("n_stations", -1),
    ("arrival_rate", 0.0),
    ("n_slots", 0),
    ("group_duration", -5.0),
    ("simulation_time", 0),
])
def test_non_positive_fields_rejected(field, value):
    kwargs = dict(n_groups=2, n_stations=10, arrival_rate=1.0)
    kwargs[field] = value
    with pytest.raises(ConfigurationError):
        RawConfig(**kwargs)


def test_integer_fields_must_be_integers():
    with pytest.raises(ConfigurationError):
        RawConfig(n_groups=2.5, n_stations=10, arrival_rate=1.0)
    with pytest.raises(ConfigurationError):
        RawConfig(n_groups=2, n_stations=10, arrival_rate=1.0, n_slots=8.0)
    with pytest.raises(ConfigurationError):
        RawConfig(n_groups=True, n_stations=10, arrival_rate=1.0)


def test_config_is_frozen_and_replace_validates():
    cfg = RawConfig(n_groups=2, n_stations=10, arrival_rate=1.0)
    with pytest.raises(Exception):
        cfg.n_groups = 3
    assert cfg.replace(n_groups=3).n_groups == 3
    with pytest.raises(ConfigurationError):
        cfg.replace(arrival_rate=-1.0)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        RawConfig(n_groups=0, n_stations=10, arrival_rate=1.0)
