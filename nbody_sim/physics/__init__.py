"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.engine import SimulationEngine

__all__ = ["Body", "ForceCalculator", "Diagnostics", "SimulationEngine"]
