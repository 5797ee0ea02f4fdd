"""Semi-implicit Euler integrator."""

from typing import Tuple

import numpy as np

from nbody_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler, first order.

    Velocities are kicked first and positions drift with the updated velocity:
    v_new = v + (F / m) * dt, r_new = r + v_new * dt.
    """

    @property
    def name(self) -> str:
        return "semi_implicit_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        masses = np.asarray(masses, dtype=np.float64).flatten()
        accelerations = np.asarray(forces, dtype=np.float64) / masses[:, np.newaxis]

        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt

        return new_positions, new_velocities
