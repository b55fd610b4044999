from pathlib import Path

import pytest

from bus_tracker.config import TrackerConfig


def test_defaults():
    config = TrackerConfig()
    assert config.tick_interval_seconds == 5.0
    assert config.jitter_degrees == 0.001
    assert config.eta_floor == 1
    assert config.catalog_path is None


def test_catalog_path_is_coerced():
    assert TrackerConfig(catalog_path="catalog.json").catalog_path == Path("catalog.json")


@pytest.mark.parametrize(
    "kwargs",
    [{"tick_interval_seconds": 0}, {"jitter_degrees": -0.001}, {"eta_floor": 0}, {"eta_floor": -1}],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        TrackerConfig(**kwargs)
