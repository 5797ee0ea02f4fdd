"""Utility functions for reproducibility and configuration."""

from nbody_sim.utils.reproducibility import make_rng, get_seed_info
from nbody_sim.utils.config import (
    load_config,
    save_config,
    SimulationConfig,
    MIN_BODIES,
    MAX_BODIES,
)

__all__ = [
    "make_rng",
    "get_seed_info",
    "load_config",
    "save_config",
    "SimulationConfig",
    "MIN_BODIES",
    "MAX_BODIES",
]
