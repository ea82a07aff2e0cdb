from __future__ import annotations

import math

import numpy as np

from typings.ray import Ray
from utils.vector_operations import normalize_vector, vec3


class PinholeCamera:
    """Pinhole camera looking down -z, with +y up and +x to the right."""

    def __init__(self, fov: float, position: np.ndarray | None = None) -> None:
        self.fov = float(fov)
        self.position = vec3(0.0, 0.0, 0.0) if position is None else np.asarray(position, dtype=float)

    def generate_ray(self, i: int, j: int, W: int, H: int) -> Ray:
        # image plane distance chosen so the vertical extent H spans the field of view
        dir_x = (float(j) + 0.5) - W / 2.0
        dir_y = -(float(i) + 0.5) + H / 2.0
        dir_z = -H / (2.0 * math.tan(self.fov / 2.0))
        direction = normalize_vector(vec3(dir_x, dir_y, dir_z))
        return Ray(origin=self.position, direction=direction)
