"""CLI main entry point."""

import argparse
import logging
import sys

import numpy as np

from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.engine import SimulationEngine
from nbody_sim.utils.config import (
    SimulationConfig,
    load_config,
    save_config,
    MASS_SAMPLING_MODES,
    FORCE_METHODS,
)
from nbody_sim.utils.reproducibility import make_rng, get_seed_info

logger = logging.getLogger(__name__)

# CLI option name -> config field
_OVERRIDES = {
    'bodies': 'num_bodies',
    'G': 'G',
    'dt': 'dt',
    'max_ratio': 'max_position_change_ratio',
    'speed': 'speed_multiplier',
    'trail': 'max_trail_length',
    'mass_sampling': 'mass_sampling',
    'force_method': 'force_method',
    'seed': 'seed',
}


def build_config(args) -> SimulationConfig:
    """Merge an optional config file with command-line overrides.

    Raises:
        ValueError: If the resulting configuration is invalid
    """
    config = load_config(args.config) if args.config else SimulationConfig()

    for option, field_name in _OVERRIDES.items():
        value = getattr(args, option, None)
        if value is not None:
            setattr(config, field_name, value)
    if args.adaptive is not None:
        config.use_adaptive_time_step = (args.adaptive == 'on')

    config.validate()
    return config


def run_headless(engine: SimulationEngine, steps: int, debug_every: int):
    """Step the engine and print a conservation table."""
    diagnostics = Diagnostics(G=engine.config.G)

    pos, vel, mass, _, _ = engine.get_state()
    K0, U0, E0 = diagnostics.compute_energies(pos, vel, mass)
    P0 = diagnostics.compute_momentum(vel, mass)

    print(f"Masses: {', '.join(f'{m:.1f}' for m in mass)}")
    print(f"{'Step':<8} {'Time':<10} {'dt':<10} {'K':<14} {'U':<14} {'E':<14} {'|P|':<12} {'dE/E0':<10}")
    print("-" * 96)
    print(f"{0:<8} {0.0:<10.3f} {engine.get_effective_time_step():<10.5f} "
          f"{K0:<14.4g} {U0:<14.4g} {E0:<14.4g} {np.linalg.norm(P0):<12.4g} {0.0:<10.4f}%")

    engine.start()
    for step in range(1, steps + 1):
        engine.step()

        if step % debug_every == 0 or step == steps:
            pos, vel, mass, t, _ = engine.get_state()
            K, U, E = diagnostics.compute_energies(pos, vel, mass)
            P = diagnostics.compute_momentum(vel, mass)
            dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
            print(f"{step:<8} {t:<10.3f} {engine.get_effective_time_step():<10.5f} "
                  f"{K:<14.4g} {U:<14.4g} {E:<14.4g} {np.linalg.norm(P):<12.4g} {dE:<10.4f}%")

    momentum_drift = np.linalg.norm(diagnostics.compute_momentum(vel, mass) - P0)
    print(f"Momentum drift: {momentum_drift:.3e}")
    print("Simulation complete!")


def run_viewer(engine: SimulationEngine):
    """Open the interactive viewer (imports matplotlib's GUI stack lazily)."""
    from nbody_sim.render.viewer import SimulationViewer

    viewer = SimulationViewer(engine)
    engine.start()
    viewer.show()


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="N-Body Simulator - gravitational simulation of 2 to 5 bodies")

    parser.add_argument('--config', type=str, default=None,
                       help='Load parameters from a .json or .yaml file')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective configuration to a .json or .yaml file')

    # Physics
    parser.add_argument('--bodies', type=int, default=None,
                       help='Number of bodies (2-5, default: 3)')
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant (default: 1000)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Base time step (default: 0.02)')
    parser.add_argument('--adaptive', type=str, choices=['on', 'off'], default=None,
                       help='Adaptive time stepping (default: on)')
    parser.add_argument('--max-ratio', type=float, default=None,
                       help='Max fraction of the closest gap a body may travel per step (default: 0.01)')
    parser.add_argument('--force-method', type=str, choices=list(FORCE_METHODS), default=None,
                       help='Force summation method (default: vectorized)')

    # Initialization
    parser.add_argument('--mass-sampling', type=str, choices=list(MASS_SAMPLING_MODES), default=None,
                       help='log: mass = 10**U(min, max); linear: mass = U(min, max)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')

    # Playback
    parser.add_argument('--speed', type=float, default=None,
                       help='Playback speed multiplier for the viewer (default: 1.0)')
    parser.add_argument('--trail', type=int, default=None,
                       help='Trail length in positions (default: 100)')

    # Run mode
    parser.add_argument('--render', action='store_true',
                       help='Open the interactive viewer instead of running headless')
    parser.add_argument('--steps', type=int, default=1000,
                       help='Number of steps for a headless run')
    parser.add_argument('--debug-every', type=int, default=100,
                       help='Print diagnostics every N steps')
    parser.add_argument('--log-level', type=str, default='WARNING',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level')

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        config = build_config(args)
    except (ValueError, OSError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Configuration saved to {args.save_config}")

    rng = make_rng(config.seed)
    logger.debug("Initial RNG state: %s", get_seed_info(rng, config.seed))
    engine = SimulationEngine(config, rng=rng)
    print(f"Bodies: {config.num_bodies}, G: {config.G}, dt: {config.dt}, "
          f"adaptive: {config.use_adaptive_time_step}, seed: {config.seed}")

    if args.render:
        run_viewer(engine)
    else:
        run_headless(engine, args.steps, max(1, args.debug_every))


if __name__ == '__main__':
    main()
