"""Open the interactive viewer on a five-body system at double speed."""

from nbody_sim import SimulationEngine, SimulationConfig
from nbody_sim.render.viewer import SimulationViewer


def main():
    config = SimulationConfig(num_bodies=5, speed_multiplier=2.0, max_trail_length=300)
    engine = SimulationEngine(config)
    viewer = SimulationViewer(engine)
    engine.start()
    viewer.show()


if __name__ == "__main__":
    main()
