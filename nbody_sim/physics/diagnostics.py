"""Conservation diagnostics for N-body simulations."""

import numpy as np
from typing import Tuple

from nbody_sim.physics.force_calculator import DISTANCE_EPSILON


class Diagnostics:
    """Compute energy and momentum diagnostics matching the force law."""

    def __init__(self, G: float = 1000.0, epsilon: float = DISTANCE_EPSILON):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            epsilon: Distance offset (must match force calculation)
        """
        self.G = G
        self.epsilon = epsilon

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        U = -G * sum_{i<j} m_i * m_j / (r_ij + eps), the potential whose
        gradient is the force used by the engine.

        Args:
            positions: Body positions (n, 2)
            velocities: Body velocities (n, 2)
            masses: Body masses (n,)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.compute_kinetic_energy(velocities, masses)
        U = self.compute_potential_energy(positions, masses)
        return K, U, K + U

    def compute_kinetic_energy(self, velocities, masses) -> float:
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        v_sq = np.sum(velocities ** 2, axis=1)
        return float(0.5 * np.sum(masses * v_sq))

    def compute_potential_energy(self, positions, masses) -> float:
        positions = np.asarray(positions, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        n = len(masses)

        U = 0.0
        for i in range(n):
            for j in range(i + 1, n):
                r = np.linalg.norm(positions[j] - positions[i])
                U -= self.G * masses[i] * masses[j] / (r + self.epsilon)
        return float(U)

    def compute_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum vector, sum(m_i * v_i)."""
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def compute_angular_momentum(self, positions, velocities, masses) -> float:
        """Angular momentum about the origin, L_z = sum(m_i * (x_i*vy_i - y_i*vx_i))."""
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        L_z = np.sum(masses * (positions[:, 0] * velocities[:, 1] - positions[:, 1] * velocities[:, 0]))
        return float(L_z)

    def compute_center_of_mass(self, positions, masses) -> np.ndarray:
        positions = np.asarray(positions, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).flatten()
        total_mass = np.sum(masses)
        if total_mass <= 0:
            return np.zeros(2)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
