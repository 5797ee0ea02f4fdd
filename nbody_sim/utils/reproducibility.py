"""Reproducibility utilities for deterministic simulations."""

import numpy as np
from typing import Optional, Dict, Any


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random generator used for body initialization.

    Args:
        seed: Random seed; None draws fresh entropy from the OS

    Returns:
        NumPy Generator
    """
    return np.random.default_rng(seed)


def get_seed_info(rng: np.random.Generator, seed: Optional[int] = None) -> Dict[str, Any]:
    """Get information about a generator's state.

    Args:
        rng: Generator to describe
        seed: Optional seed to include in info

    Returns:
        Dictionary with seed information
    """
    info: Dict[str, Any] = {}

    if seed is not None:
        info['seed'] = seed

    state = rng.bit_generator.state
    info['bit_generator'] = state.get('bit_generator')
    info['state'] = state.get('state')

    return info
