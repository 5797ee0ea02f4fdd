"""Tests for the matplotlib viewer (headless Agg backend)."""

from types import SimpleNamespace

import matplotlib
matplotlib.use("Agg")

import pytest
from nbody_sim.physics.engine import SimulationEngine
from nbody_sim.render.viewer import SimulationViewer
from nbody_sim.utils.config import SimulationConfig


@pytest.fixture
def viewer():
    engine = SimulationEngine(SimulationConfig(seed=5, num_bodies=3))
    v = SimulationViewer(engine)
    yield v
    v.close()


def test_update_advances_running_engine(viewer):
    """Each frame runs the engine and refreshes the artists."""
    viewer.engine.start()
    viewer.update(0)

    assert viewer.engine.step_count == 1
    assert len(viewer.trail_lines) == 3
    assert "running" in viewer.ax.get_title()


def test_update_while_paused(viewer):
    """Frames drawn while paused leave the simulation untouched."""
    viewer.update(0)
    assert viewer.engine.step_count == 0
    assert "paused" in viewer.ax.get_title()


def test_key_controls(viewer):
    """Keyboard shortcuts map onto engine operations."""
    engine = viewer.engine

    viewer.on_key(SimpleNamespace(key=' '))
    assert engine.is_running()

    viewer.on_key(SimpleNamespace(key='4'))
    viewer.update(0)
    assert len(engine.bodies) == 4
    assert len(viewer.trail_lines) == 4

    adaptive = engine.config.use_adaptive_time_step
    viewer.on_key(SimpleNamespace(key='a'))
    assert engine.config.use_adaptive_time_step is not adaptive

    viewer.on_key(SimpleNamespace(key='+'))
    assert engine.config.speed_multiplier == pytest.approx(1.5)

    viewer.on_key(SimpleNamespace(key='f'))
    assert viewer.camera.auto_follow is False
