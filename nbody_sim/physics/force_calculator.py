"""Pairwise Newtonian force calculation.

Every ordered pair (i, j), i != j, contributes F = G * m_i * m_j / d^2 along the
vector from body i to body j, with d = |r_j - r_i| + DISTANCE_EPSILON. All forces
are evaluated from a single snapshot of positions.
"""

from typing import Literal

import numpy as np

DISTANCE_EPSILON = 1e-10


class ForceCalculator:
    """Direct-summation gravity for a handful of bodies.

    Both methods are O(n^2); "vectorized" broadcasts the pair grid through
    NumPy, "direct" walks the double loop. They agree to round-off.
    """

    def __init__(self, method: Literal["vectorized", "direct"] = "vectorized"):
        if method not in ("vectorized", "direct"):
            raise ValueError(f"Unknown force method '{method}'. Available: ['vectorized', 'direct']")
        self.method = method

    def compute_forces(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        """Compute the net gravitational force on every body.

        Args:
            positions: (n, 2) array of positions
            masses: (n,) array of masses
            G: Gravitational constant

        Returns:
            (n, 2) array of net forces
        """
        positions = np.asarray(positions, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()

        if positions.shape[0] < 2:
            return np.zeros_like(positions)

        if self.method == "direct":
            return self._compute_forces_direct(positions, masses, G)
        return self._compute_forces_vectorized(positions, masses, G)

    def _compute_forces_vectorized(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        n = positions.shape[0]

        # r_diff[i, j] = r_j - r_i
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        dist = np.sqrt(np.sum(r_diff ** 2, axis=2)) + DISTANCE_EPSILON

        force_mag = G * masses[:, np.newaxis] * masses[np.newaxis, :] / dist ** 2
        force_mag = np.where(np.eye(n, dtype=bool), 0.0, force_mag)

        force_vectors = (force_mag / dist)[:, :, np.newaxis] * r_diff
        return np.sum(force_vectors, axis=1)

    def _compute_forces_direct(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        n = positions.shape[0]
        forces = np.zeros((n, 2))

        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                dx = positions[j, 0] - positions[i, 0]
                dy = positions[j, 1] - positions[i, 1]
                dist = np.sqrt(dx * dx + dy * dy) + DISTANCE_EPSILON
                force_mag = G * masses[i] * masses[j] / (dist * dist)
                forces[i, 0] += force_mag * dx / dist
                forces[i, 1] += force_mag * dy / dist

        return forces
