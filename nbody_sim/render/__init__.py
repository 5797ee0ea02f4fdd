"""Rendering collaborators for the simulation engine."""

from nbody_sim.render.camera import Camera, BoundingBox, compute_bounding_box

__all__ = ["Camera", "BoundingBox", "compute_bounding_box"]
