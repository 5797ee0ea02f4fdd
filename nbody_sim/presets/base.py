"""Base class for initial-condition presets."""

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from nbody_sim.physics.body import Body
from nbody_sim.utils.config import SimulationConfig
from nbody_sim.utils.reproducibility import make_rng


class Preset(ABC):
    """Abstract base class for initial-condition generators."""

    def __init__(self, config: SimulationConfig, rng: Optional[np.random.Generator] = None):
        """Initialize preset.

        Args:
            config: Simulation configuration
            rng: Random generator; a fresh one seeded from config.seed if None
        """
        self.config = config
        self.rng = rng if rng is not None else make_rng(config.seed)

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate a fresh body set.

        Returns:
            List of bodies
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
