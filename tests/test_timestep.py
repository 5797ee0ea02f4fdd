"""Tests for adaptive time step selection."""

import numpy as np
import pytest
from nbody_sim.physics.timestep import (
    compute_adaptive_timestep,
    min_pair_distance,
    max_speed,
)

BASE_DT = 0.02
RATIO = 0.01


def _pair(speed):
    positions = np.array([[0.0, 0.0], [100.0, 0.0]])
    velocities = np.array([[speed, 0.0], [0.0, 0.0]])
    return positions, velocities


def test_disabled_returns_base():
    """With adaptive stepping off the base step is used unchanged."""
    positions, velocities = _pair(10.0)
    dt = compute_adaptive_timestep(positions, velocities, BASE_DT, RATIO, enabled=False)
    assert dt == BASE_DT


def test_single_body_returns_base():
    """No pair distance exists for one body."""
    dt = compute_adaptive_timestep(np.array([[0.0, 0.0]]), np.array([[3.0, 4.0]]), BASE_DT, RATIO)
    assert dt == BASE_DT


def test_no_bodies_returns_base():
    """An empty system falls back to the base step."""
    dt = compute_adaptive_timestep(np.zeros((0, 2)), np.zeros((0, 2)), BASE_DT, RATIO)
    assert dt == BASE_DT


def test_zero_velocity_returns_base():
    """Bodies at rest cannot bound the step."""
    positions, velocities = _pair(0.0)
    assert compute_adaptive_timestep(positions, velocities, BASE_DT, RATIO) == BASE_DT


def test_within_bounds():
    """ratio * distance / speed is used when it lies inside the clamp range."""
    positions, velocities = _pair(10.0)
    # 0.01 * 100 / 10 = 0.1, inside [0.002, 0.2]
    assert compute_adaptive_timestep(positions, velocities, BASE_DT, RATIO) == pytest.approx(0.1)


def test_clamped_high():
    """Slow bodies far apart never step more than 10x the base step."""
    positions, velocities = _pair(1e-3)
    assert compute_adaptive_timestep(positions, velocities, BASE_DT, RATIO) == pytest.approx(10 * BASE_DT)


def test_clamped_low():
    """Fast bodies never step less than 0.1x the base step."""
    positions, velocities = _pair(1e6)
    assert compute_adaptive_timestep(positions, velocities, BASE_DT, RATIO) == pytest.approx(0.1 * BASE_DT)


def test_coincident_bodies_clamped_low():
    """Zero separation with motion gives the smallest allowed step."""
    positions = np.array([[1.0, 1.0], [1.0, 1.0]])
    velocities = np.array([[1.0, 0.0], [0.0, 0.0]])
    assert compute_adaptive_timestep(positions, velocities, BASE_DT, RATIO) == pytest.approx(0.1 * BASE_DT)


def test_pair_helpers():
    """Minimum distance spans all unordered pairs; speed is the largest magnitude."""
    positions = np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 3.0]])
    velocities = np.array([[3.0, 4.0], [1.0, 0.0], [0.0, 0.0]])

    assert min_pair_distance(positions) == pytest.approx(3.0)
    assert max_speed(velocities) == pytest.approx(5.0)
    assert min_pair_distance(positions[:1]) == float('inf')
