"""Point-mass body state."""

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

import numpy as np

# Rendering palette, assigned round-robin by body index
PALETTE = ('#FF5252', '#4CAF50', '#2196F3', '#9C27B0', '#FFC107')


def body_radius(mass: float) -> float:
    """Display radius for a body of the given mass."""
    return 5.0 + math.sqrt(mass) * 2.0


@dataclass(eq=False)
class Body:
    """A gravitating point mass in the plane.

    Only mass, position and velocity take part in the physics; radius, color
    and trail exist for renderers.
    """
    mass: float
    position: np.ndarray
    velocity: np.ndarray
    color: str = PALETTE[0]
    max_trail_length: int = 100
    trail: Deque[Tuple[float, float]] = field(default=None, repr=False)

    def __post_init__(self):
        self.position = np.array(self.position, dtype=np.float64)
        self.velocity = np.array(self.velocity, dtype=np.float64)
        if self.trail is None:
            self.trail = deque(maxlen=self.max_trail_length)
        else:
            self.trail = deque(self.trail, maxlen=self.max_trail_length)

    @property
    def radius(self) -> float:
        return body_radius(self.mass)

    @property
    def momentum(self) -> np.ndarray:
        return self.mass * self.velocity

    def set_trail_capacity(self, max_trail_length: int):
        """Resize the trail, keeping the most recent positions."""
        if self.trail.maxlen != max_trail_length:
            self.max_trail_length = max_trail_length
            self.trail = deque(self.trail, maxlen=max_trail_length)

    def record_position(self):
        """Append the current position to the trail (oldest entry drops when full)."""
        self.trail.append((float(self.position[0]), float(self.position[1])))
