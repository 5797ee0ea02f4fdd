"""Interactive 2D viewer using matplotlib."""

import logging
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from nbody_sim.physics.engine import SimulationEngine
from nbody_sim.render.camera import Camera

logger = logging.getLogger(__name__)

SPEED_FACTOR = 1.5

HELP_TEXT = (
    "space: run/pause   r: reset   2-5: bodies   a: adaptive dt   "
    "+/-: speed   f: follow"
)


class SimulationViewer:
    """Animated view of a SimulationEngine.

    Each animation frame calls ``engine.run_frame()``, so the playback speed
    multiplier decides how many physics steps a frame covers.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        dpi: int = 100,
        interval_ms: int = 16,
        show_trails: bool = True
    ):
        """Initialize viewer.

        Args:
            engine: Engine to display and drive
            dpi: Dots per inch
            interval_ms: Delay between animation frames
            show_trails: Whether to draw body trails
        """
        self.engine = engine
        self.interval_ms = interval_ms
        self.show_trails = show_trails
        self.width = float(engine.config.canvas_width)
        self.height = float(engine.config.canvas_height)

        self.camera = Camera()
        self.animation: Optional[FuncAnimation] = None

        self.fig, self.ax = plt.subplots(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key)
        self.fig.text(0.01, 0.01, HELP_TEXT, fontsize=8, color='0.6')

        self.scatter = None
        self.trail_lines = []
        self._build_artists()

    def _build_artists(self):
        """(Re)create one trail line per body and the body scatter."""
        self.ax.clear()
        self.ax.set_facecolor('#101018')
        self.ax.set_xticks([])
        self.ax.set_yticks([])

        bodies = self.engine.bodies
        self.trail_lines = [
            self.ax.plot([], [], '-', color=b.color, alpha=0.5, linewidth=1.0)[0]
            for b in bodies
        ]
        self.scatter = self.ax.scatter(
            [b.position[0] for b in bodies],
            [b.position[1] for b in bodies],
            c=[b.color for b in bodies],
            s=[b.radius ** 2 for b in bodies],
            edgecolors='white', linewidths=0.5, zorder=3
        )

    def _title(self) -> str:
        state = "running" if self.engine.is_running() else "paused"
        cfg = self.engine.config
        adaptive = "adaptive" if cfg.use_adaptive_time_step else "fixed"
        return (f"{len(self.engine.bodies)} bodies | dt={self.engine.get_effective_time_step():.4f} "
                f"({adaptive}) | speed x{cfg.speed_multiplier:g} | {state}")

    def update(self, frame: int = 0):
        """Advance and redraw one frame."""
        self.engine.run_frame()

        bodies = self.engine.bodies
        if len(bodies) != len(self.trail_lines):
            self._build_artists()

        self.camera.follow(bodies, self.width, self.height)
        region = self.camera.visible_region(self.width, self.height)
        self.ax.set_xlim(region.min_x, region.max_x)
        # Canvas convention: y grows downward
        self.ax.set_ylim(region.max_y, region.min_y)

        if bodies:
            offsets = np.array([b.position for b in bodies])
            self.scatter.set_offsets(offsets)
            self.scatter.set_sizes([(b.radius * self.camera.zoom) ** 2 for b in bodies])

        for line, body in zip(self.trail_lines, bodies):
            if self.show_trails and len(body.trail) > 1:
                trail = np.array(body.trail)
                line.set_data(trail[:, 0], trail[:, 1])
            else:
                line.set_data([], [])

        self.ax.set_title(self._title(), fontsize=10)
        return [self.scatter, *self.trail_lines]

    def on_key(self, event):
        """Keyboard controls."""
        key = event.key
        if key == ' ':
            self.engine.toggle_running()
        elif key == 'r':
            self.engine.reset()
            self._build_artists()
        elif key in ('2', '3', '4', '5'):
            self.engine.set_num_bodies(int(key))
        elif key == 'a':
            self.engine.set_adaptive_time_step(not self.engine.config.use_adaptive_time_step)
        elif key in ('+', '='):
            self.engine.set_speed_multiplier(self.engine.config.speed_multiplier * SPEED_FACTOR)
        elif key == '-':
            self.engine.set_speed_multiplier(self.engine.config.speed_multiplier / SPEED_FACTOR)
        elif key == 'f':
            self.camera.auto_follow = not self.camera.auto_follow
        else:
            return
        logger.debug("Key '%s' handled", key)

    def show(self):
        """Start the animation loop and block until the window closes."""
        self.animation = FuncAnimation(
            self.fig, self.update, interval=self.interval_ms, cache_frame_data=False
        )
        plt.show()

    def close(self):
        """Close the viewer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
