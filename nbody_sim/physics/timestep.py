"""Adaptive time step selection."""

import numpy as np

MIN_STEP_FACTOR = 0.1
MAX_STEP_FACTOR = 10.0


def max_speed(velocities: np.ndarray) -> float:
    """Largest velocity magnitude, or 0.0 for an empty set."""
    velocities = np.asarray(velocities, dtype=np.float64)
    if velocities.shape[0] == 0:
        return 0.0
    return float(np.max(np.linalg.norm(velocities, axis=1)))


def min_pair_distance(positions: np.ndarray) -> float:
    """Smallest distance over unordered pairs; inf with fewer than two bodies."""
    positions = np.asarray(positions, dtype=np.float64)
    n = positions.shape[0]
    if n < 2:
        return float('inf')
    r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    distances = np.sqrt(np.sum(r_diff ** 2, axis=2))
    upper = np.triu_indices(n, k=1)
    return float(np.min(distances[upper]))


def compute_adaptive_timestep(
    positions: np.ndarray,
    velocities: np.ndarray,
    base_dt: float,
    max_position_change_ratio: float,
    enabled: bool = True
) -> float:
    """Pick a step so no body travels more than a fraction of the tightest gap.

    dt = max_position_change_ratio * min_pair_distance / max_speed, clamped to
    [0.1 * base_dt, 10 * base_dt]. Falls back to base_dt when disabled, with
    fewer than two bodies, with no finite pair distance, or when nothing moves.

    Args:
        positions: (n, 2) positions
        velocities: (n, 2) velocities
        base_dt: Nominal time step
        max_position_change_ratio: Fraction of min distance allowed per step
        enabled: Whether adaptive stepping is on

    Returns:
        Effective time step
    """
    if not enabled:
        return base_dt

    n = np.asarray(positions).shape[0]
    min_dist = min_pair_distance(positions)
    speed = max_speed(velocities)

    if n < 2 or not np.isfinite(min_dist) or speed == 0.0:
        return base_dt

    candidate = max_position_change_ratio * min_dist / speed
    return float(min(max(candidate, base_dt * MIN_STEP_FACTOR), base_dt * MAX_STEP_FACTOR))
