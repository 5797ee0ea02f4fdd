"""Simulation engine: body set, lifecycle, and the integration step."""

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import SemiImplicitEulerIntegrator
from nbody_sim.physics.timestep import compute_adaptive_timestep
from nbody_sim.presets.ring import RandomRingPreset
from nbody_sim.utils.config import SimulationConfig, MIN_BODIES, MAX_BODIES, FORCE_METHODS
from nbody_sim.utils.reproducibility import make_rng

logger = logging.getLogger(__name__)

# Used when dt has been set to a non-positive value
DEFAULT_DT = SimulationConfig.dt


class SimulationEngine:
    """Owns a body set and its configuration and advances them in time.

    The engine never raises during normal operation: invalid mutation requests
    are ignored and degenerate geometry falls back to safe step sizes. It starts
    paused; ``step()`` does nothing until ``start()`` is called.

    The caller drives time. Call ``step()`` once per tick, or ``run_frame()``
    once per display frame to let ``speed_multiplier`` choose how many steps
    that frame gets. The multiplier never enters the per-step physics, so a
    trajectory depends only on how many steps were taken.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
        integrator: Optional[Integrator] = None
    ):
        """Initialize engine and draw the first body set.

        Args:
            config: Simulation configuration (defaults if None); held by
                reference so live edits to G, dt and max_trail_length apply
            rng: Random generator for initialization (seeded from config.seed if None)
            integrator: Integrator to use (default: semi-implicit Euler)
        """
        self.config = config if config is not None else SimulationConfig()
        clamped = min(max(self.config.num_bodies, MIN_BODIES), MAX_BODIES)
        if clamped != self.config.num_bodies:
            logger.debug("num_bodies %s out of range, using %d", self.config.num_bodies, clamped)
            self.config.num_bodies = clamped

        self.rng = rng if rng is not None else make_rng(self.config.seed)
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        method = self.config.force_method if self.config.force_method in FORCE_METHODS else "vectorized"
        self.force_calculator = ForceCalculator(method=method)

        self.running = False
        self.effective_time_step = self._base_dt()
        self.time = 0.0
        self.step_count = 0
        self._frame_accumulator = 0.0

        self.on_step_callback: Optional[Callable[["SimulationEngine"], None]] = None

        self.bodies: List[Body] = RandomRingPreset(self.config, self.rng).generate()

    # Lifecycle

    def reset(self):
        """Replace the body set with a fresh random draw; running state is kept."""
        self.bodies = RandomRingPreset(self.config, self.rng).generate()
        self.effective_time_step = self._base_dt()
        self.time = 0.0
        self.step_count = 0
        self._frame_accumulator = 0.0
        logger.info("Simulation reset with %d bodies", len(self.bodies))

    def start(self):
        self.running = True

    def pause(self):
        self.running = False

    def toggle_running(self):
        self.running = not self.running

    def is_running(self) -> bool:
        return self.running

    # Configuration changes

    def set_num_bodies(self, num_bodies: int):
        """Change the body count and re-initialize.

        Ignored unless 2 <= num_bodies <= 5 and it differs from the current count.
        """
        if not MIN_BODIES <= num_bodies <= MAX_BODIES or num_bodies == self.config.num_bodies:
            logger.debug("Ignoring set_num_bodies(%s)", num_bodies)
            return
        self.config.num_bodies = num_bodies
        logger.info("Body count changed to %d", num_bodies)
        self.reset()

    def set_speed_multiplier(self, speed_multiplier: float):
        """Set the playback speed; ignored unless positive."""
        if speed_multiplier > 0:
            self.config.speed_multiplier = speed_multiplier
        else:
            logger.debug("Ignoring non-positive speed multiplier %s", speed_multiplier)

    def set_adaptive_time_step(self, enabled: bool):
        self.config.use_adaptive_time_step = bool(enabled)

    # Integration

    def _base_dt(self) -> float:
        return self.config.dt if self.config.dt > 0 else DEFAULT_DT

    def _state_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        positions = np.array([b.position for b in self.bodies], dtype=np.float64).reshape(-1, 2)
        velocities = np.array([b.velocity for b in self.bodies], dtype=np.float64).reshape(-1, 2)
        masses = np.array([b.mass for b in self.bodies], dtype=np.float64)
        return positions, velocities, masses

    def step(self):
        """Advance the system by one time step (no-op while paused).

        Forces for every body come from the pre-step positions; velocities
        and positions are committed only after all forces are known.
        """
        if not self.running:
            return

        cfg = self.config
        positions, velocities, masses = self._state_arrays()

        base_dt = self._base_dt()
        trail_length = max(0, int(cfg.max_trail_length))

        dt = compute_adaptive_timestep(
            positions,
            velocities,
            base_dt,
            cfg.max_position_change_ratio,
            enabled=cfg.use_adaptive_time_step,
        )
        self.effective_time_step = dt

        if self.force_calculator.method != cfg.force_method and cfg.force_method in FORCE_METHODS:
            self.force_calculator = ForceCalculator(method=cfg.force_method)

        if self.bodies:
            forces = self.force_calculator.compute_forces(positions, masses, cfg.G)
            new_positions, new_velocities = self.integrator.step(
                positions, velocities, masses, forces, dt
            )

            for i, body in enumerate(self.bodies):
                body.velocity[:] = new_velocities[i]
                body.position[:] = new_positions[i]
                body.set_trail_capacity(trail_length)
                body.record_position()

        self.time += dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run_steps(self, k: int):
        """Run k steps, stopping early if the engine gets paused."""
        for _ in range(k):
            if not self.running:
                return
            self.step()

    def run_frame(self) -> int:
        """Advance one display frame at the current playback speed.

        Accumulates speed_multiplier and takes the whole number of steps it
        has built up, carrying the fraction into the next frame.

        Returns:
            Number of steps taken
        """
        if not self.running:
            return 0
        speed = self.config.speed_multiplier
        if speed <= 0:
            speed = 1.0
        self._frame_accumulator += speed
        n_steps = int(self._frame_accumulator)
        self._frame_accumulator -= n_steps
        self.run_steps(n_steps)
        return n_steps

    # Read surface

    def get_effective_time_step(self) -> float:
        """Time step used by the most recent step (base dt before the first)."""
        return self.effective_time_step

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        positions, velocities, masses = self._state_arrays()
        return positions, velocities, masses, self.time, self.step_count
