"""Initial-condition generators."""

from nbody_sim.presets.base import Preset
from nbody_sim.presets.ring import RandomRingPreset, initialize_bodies

__all__ = ["Preset", "RandomRingPreset", "initialize_bodies"]
