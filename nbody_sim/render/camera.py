"""Auto-follow camera for keeping the bodies in view."""

from dataclasses import dataclass
from typing import NamedTuple, Sequence

import numpy as np

from nbody_sim.physics.body import Body

ESCAPE_FACTOR = 3.0
PADDING_FRACTION = 0.2
MIN_PADDING = 50.0
MIN_EXTENT_FRACTION = 0.2
SMOOTHING = 0.1


class BoundingBox(NamedTuple):
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def center(self):
        return (self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def compute_bounding_box(bodies: Sequence[Body], width: float, height: float) -> BoundingBox:
    """Region worth showing: bodies and their trails, padded.

    Bodies farther than 3 * max(width, height) from the mean position count as
    escaping and are left out, unless that would leave fewer than two bodies.

    Args:
        bodies: Bodies to frame
        width: Viewport width
        height: Viewport height

    Returns:
        Padded bounding box in world coordinates
    """
    if not bodies:
        return BoundingBox(-width / 2, width / 2, -height / 2, height / 2)

    positions = np.array([b.position for b in bodies], dtype=np.float64)
    mean = positions.mean(axis=0)
    escape_threshold = max(width, height) * ESCAPE_FACTOR
    distances = np.linalg.norm(positions - mean, axis=1)

    kept = [b for b, d in zip(bodies, distances) if d < escape_threshold]
    if len(kept) <= 1:
        kept = list(bodies)

    points = [tuple(b.position) for b in kept]
    for b in kept:
        points.extend(b.trail)
    points = np.array(points, dtype=np.float64)

    min_x, min_y = points.min(axis=0)
    max_x, max_y = points.max(axis=0)

    pad_x = max((max_x - min_x) * PADDING_FRACTION, MIN_PADDING)
    pad_y = max((max_y - min_y) * PADDING_FRACTION, MIN_PADDING)
    min_x, max_x = min_x - pad_x, max_x + pad_x
    min_y, max_y = min_y - pad_y, max_y + pad_y

    min_width = width * MIN_EXTENT_FRACTION
    min_height = height * MIN_EXTENT_FRACTION
    if max_x - min_x < min_width:
        cx = (min_x + max_x) / 2
        min_x, max_x = cx - min_width / 2, cx + min_width / 2
    if max_y - min_y < min_height:
        cy = (min_y + max_y) / 2
        min_y, max_y = cy - min_height / 2, cy + min_height / 2

    return BoundingBox(float(min_x), float(max_x), float(min_y), float(max_y))


@dataclass
class Camera:
    """Viewport transform: screen = world * zoom + (x, y)."""
    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0
    auto_follow: bool = True

    def follow(self, bodies: Sequence[Body], width: float, height: float):
        """Ease zoom and offset toward framing the bodies (no-op without auto_follow)."""
        if not self.auto_follow:
            return

        box = compute_bounding_box(bodies, width, height)
        target_zoom = min(width / box.width, height / box.height, 1.0)
        self.zoom += (target_zoom - self.zoom) * SMOOTHING

        cx, cy = box.center
        target_x = width / 2 - cx * self.zoom
        target_y = height / 2 - cy * self.zoom
        self.x += (target_x - self.x) * SMOOTHING
        self.y += (target_y - self.y) * SMOOTHING

    def visible_region(self, width: float, height: float) -> BoundingBox:
        """World-space rectangle currently on screen."""
        return BoundingBox(
            -self.x / self.zoom,
            (width - self.x) / self.zoom,
            -self.y / self.zoom,
            (height - self.y) / self.zoom,
        )
