"""Tests for configuration loading and validation."""

import os
import tempfile

import pytest
from nbody_sim.utils.config import SimulationConfig, load_config, save_config


def test_defaults_are_valid():
    """The default configuration passes validation."""
    config = SimulationConfig()
    config.validate()
    assert config.num_bodies == 3
    assert config.G == 1000.0
    assert config.use_adaptive_time_step is True


@pytest.mark.parametrize("overrides", [
    {"num_bodies": 1},
    {"num_bodies": 6},
    {"dt": 0.0},
    {"max_position_change_ratio": -0.1},
    {"speed_multiplier": 0.0},
    {"min_mass": 4.0, "max_mass": 3.0},
    {"min_velocity": 5.0, "max_velocity": -5.0},
    {"mass_sampling": "cubic"},
    {"force_method": "tree"},
    {"mass_sampling": "linear", "min_mass": 0.0},
])
def test_invalid_values_rejected(overrides):
    """Out-of-range fields raise ValueError."""
    with pytest.raises(ValueError):
        SimulationConfig(**overrides).validate()


def test_from_dict_rejects_unknown_keys():
    """Typos in config files are reported instead of ignored."""
    with pytest.raises(ValueError, match="Unknown configuration keys"):
        SimulationConfig.from_dict({"num_bodys": 3})


def test_save_load_json():
    """A config written to JSON loads back unchanged."""
    config = SimulationConfig(num_bodies=4, G=500.0, dt=0.01, seed=9, use_adaptive_time_step=False)

    with tempfile.NamedTemporaryFile(suffix='.json', delete=False) as f:
        temp_path = f.name

    try:
        save_config(config, temp_path)
        loaded = load_config(temp_path)
        assert loaded == config
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_save_load_yaml():
    """A config written to YAML loads back unchanged."""
    pytest.importorskip("yaml")
    config = SimulationConfig(num_bodies=2, mass_sampling="linear", min_mass=100.0, max_mass=1000.0)

    with tempfile.NamedTemporaryFile(suffix='.yaml', delete=False) as f:
        temp_path = f.name

    try:
        save_config(config, temp_path)
        loaded = load_config(temp_path)
        assert loaded == config
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_unsupported_suffix():
    """Only .json and .yaml/.yml files are accepted."""
    with pytest.raises(ValueError):
        save_config(SimulationConfig(), "config.toml")


@pytest.mark.parametrize("data", [
    {"num_bodies": "3"},
    {"G": "1000"},
    {"use_adaptive_time_step": "yes"},
    {"num_bodies": 3.5},
    {"seed": 1.5},
])
def test_from_dict_rejects_wrong_types(data):
    """Wrongly typed values are reported as ValueError naming the field."""
    name = next(iter(data))
    with pytest.raises(ValueError, match=name):
        SimulationConfig.from_dict(data)


def test_from_dict_accepts_integer_for_float_field():
    """Whole numbers are accepted for float fields."""
    config = SimulationConfig.from_dict({"G": 500, "dt": 1, "seed": 7})
    assert config.G == 500
    assert config.seed == 7
