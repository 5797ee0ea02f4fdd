"""
N-Body Simulator - interactive gravitational simulation of 2 to 5 bodies.

Features:
- Pairwise Newtonian gravity with semi-implicit Euler integration
- Adaptive time stepping bounded by velocity and proximity
- Seeded random initial conditions
- Matplotlib viewer with auto-follow camera
- CLI with conservation diagnostics
"""

__version__ = "0.1.0"

from nbody_sim.physics.body import Body
from nbody_sim.physics.engine import SimulationEngine
from nbody_sim.utils.config import SimulationConfig

__all__ = [
    "Body",
    "SimulationEngine",
    "SimulationConfig",
]
