"""Tests for gravitational force calculation."""

import numpy as np
import pytest
from nbody_sim.physics.force_calculator import ForceCalculator


def test_two_body_force():
    """Two equal masses 100 apart attract along the line joining them."""
    calc = ForceCalculator()
    positions = np.array([[0.0, 0.0], [100.0, 0.0]])
    masses = np.array([500.0, 500.0])

    forces = calc.compute_forces(positions, masses, G=1000.0)

    expected = 1000.0 * 500.0 * 500.0 / 100.0 ** 2
    assert forces[0, 0] == pytest.approx(expected, rel=1e-9)
    assert forces[1, 0] == pytest.approx(-expected, rel=1e-9)
    assert forces[0, 1] == pytest.approx(0.0, abs=1e-12)
    assert forces[1, 1] == pytest.approx(0.0, abs=1e-12)


def test_vectorized_matches_direct():
    """Both summation methods agree to round-off."""
    rng = np.random.default_rng(3)
    positions = rng.uniform(0, 800, size=(5, 2))
    masses = 10 ** rng.uniform(1, 3, size=5)

    vectorized = ForceCalculator("vectorized").compute_forces(positions, masses, G=1000.0)
    direct = ForceCalculator("direct").compute_forces(positions, masses, G=1000.0)

    assert np.allclose(vectorized, direct, rtol=1e-9, atol=0)


def test_net_force_vanishes():
    """Internal forces cancel pairwise, so the total is zero."""
    rng = np.random.default_rng(11)
    positions = rng.uniform(0, 800, size=(4, 2))
    masses = rng.uniform(100, 1000, size=4)

    forces = ForceCalculator().compute_forces(positions, masses, G=1000.0)

    scale = np.max(np.abs(forces))
    assert np.allclose(np.sum(forces, axis=0), 0.0, atol=scale * 1e-12)


def test_coincident_bodies_are_finite():
    """Zero separation is guarded and produces no force."""
    positions = np.array([[5.0, 5.0], [5.0, 5.0]])
    masses = np.array([500.0, 500.0])

    for method in ("vectorized", "direct"):
        forces = ForceCalculator(method).compute_forces(positions, masses, G=1000.0)
        assert np.all(np.isfinite(forces))
        assert np.allclose(forces, 0.0)


def test_single_body_feels_nothing():
    """A lone body has no force acting on it."""
    forces = ForceCalculator().compute_forces(np.array([[1.0, 2.0]]), np.array([10.0]), G=1000.0)
    assert forces.shape == (1, 2)
    assert np.allclose(forces, 0.0)


def test_unknown_method():
    """Unknown summation methods are rejected."""
    with pytest.raises(ValueError):
        ForceCalculator("barnes_hut")
