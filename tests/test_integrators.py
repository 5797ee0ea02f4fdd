"""Tests for numerical integrators."""

import numpy as np
from nbody_sim.physics.integrators import SemiImplicitEulerIntegrator


def test_semi_implicit_euler():
    """Position update uses the freshly kicked velocity."""
    integrator = SemiImplicitEulerIntegrator()

    positions = np.array([[0.0, 0.0]])
    velocities = np.array([[1.0, 0.0]])
    masses = np.array([2.0])
    forces = np.array([[4.0, 0.0]])
    dt = 0.5

    new_pos, new_vel = integrator.step(positions, velocities, masses, forces, dt)

    # v_new = 1 + (4/2)*0.5 = 2; x_new = 0 + 2*0.5 = 1 (explicit Euler would give 0.5)
    assert np.allclose(new_vel, [[2.0, 0.0]])
    assert np.allclose(new_pos, [[1.0, 0.0]])
    assert integrator.name == "semi_implicit_euler"
    assert integrator.order == 1


def test_inputs_not_mutated():
    """The integrator returns new arrays and leaves its inputs alone."""
    integrator = SemiImplicitEulerIntegrator()

    positions = np.array([[0.0, 0.0], [1.0, 0.0]])
    velocities = np.array([[0.0, 0.0], [0.0, 0.0]])
    masses = np.array([1.0, 1.0])
    forces = np.array([[0.0, 1.0], [0.0, -1.0]])

    integrator.step(positions, velocities, masses, forces, 0.01)

    assert np.allclose(positions, [[0.0, 0.0], [1.0, 0.0]])
    assert np.allclose(velocities, 0.0)
