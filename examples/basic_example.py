"""Basic example of using the n-body engine headless."""

from nbody_sim import SimulationEngine, SimulationConfig
from nbody_sim.physics.diagnostics import Diagnostics


def main():
    """Run a seeded three-body simulation and report conservation."""
    config = SimulationConfig(num_bodies=3, G=1000.0, dt=0.02, seed=42)
    engine = SimulationEngine(config)
    diagnostics = Diagnostics(G=config.G)

    pos, vel, mass, _, _ = engine.get_state()
    print(f"Initial energy: {diagnostics.compute_energies(pos, vel, mass)[2]:.3f}")

    engine.start()
    for step in range(1000):
        engine.step()
        if step % 200 == 0:
            pos, vel, mass, t, _ = engine.get_state()
            energy = diagnostics.compute_energies(pos, vel, mass)[2]
            print(f"Step {step}: Time={t:.2f}, dt={engine.get_effective_time_step():.4f}, Energy={energy:.3f}")

    pos, vel, mass, _, _ = engine.get_state()
    print(f"Final momentum: {diagnostics.compute_momentum(vel, mass)}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
