"""Random ring preset: bodies spread around the canvas center."""

import logging
from typing import List, Optional

import numpy as np

from nbody_sim.physics.body import Body, PALETTE
from nbody_sim.presets.base import Preset
from nbody_sim.utils.config import SimulationConfig

logger = logging.getLogger(__name__)

ANGLE_JITTER = 0.3
MIN_RADIUS_FRACTION = 0.15
MAX_RADIUS_FRACTION = 0.3
DEFAULT_LOG_MASS_RANGE = (SimulationConfig.min_mass, SimulationConfig.max_mass)


class RandomRingPreset(Preset):
    """Bodies on jittered, evenly spaced angles around the canvas center.

    Body i sits at angle i * 2*pi / n + U(-0.3, 0.3) and a radial distance of
    U(0.15, 0.3) * canvas_width. Masses are log-uniform (10 ** U(min_mass,
    max_mass)) or linear depending on config.mass_sampling; each velocity
    component is U(min_velocity, max_velocity).
    """

    @property
    def name(self) -> str:
        return "random_ring"

    def _sample_mass(self) -> float:
        cfg = self.config
        low, high = cfg.min_mass, cfg.max_mass
        if cfg.mass_sampling == "linear":
            if low > 0 and high >= low:
                return float(self.rng.uniform(low, high))
            # Linear bounds that could yield mass <= 0 fall back to the default log range
            logger.debug("Linear mass bounds (%s, %s) not positive, using defaults", low, high)
            low, high = DEFAULT_LOG_MASS_RANGE
        return float(10.0 ** self.rng.uniform(low, high))

    def generate(self) -> List[Body]:
        cfg = self.config
        n = cfg.num_bodies
        center = np.array([cfg.canvas_width / 2, cfg.canvas_height / 2])

        bodies = []
        for i in range(n):
            angle = i * 2 * np.pi / n + self.rng.uniform(-ANGLE_JITTER, ANGLE_JITTER)
            distance = self.rng.uniform(cfg.canvas_width * MIN_RADIUS_FRACTION,
                                        cfg.canvas_width * MAX_RADIUS_FRACTION)
            position = center + distance * np.array([np.cos(angle), np.sin(angle)])

            mass = self._sample_mass()
            velocity = self.rng.uniform(cfg.min_velocity, cfg.max_velocity, size=2)

            bodies.append(Body(
                mass=mass,
                position=position,
                velocity=velocity,
                color=PALETTE[i % len(PALETTE)],
                max_trail_length=max(0, int(cfg.max_trail_length)),
            ))

        return bodies


def initialize_bodies(config: SimulationConfig, rng: Optional[np.random.Generator] = None) -> List[Body]:
    """Draw a fresh random body set for the given configuration."""
    return RandomRingPreset(config, rng).generate()
