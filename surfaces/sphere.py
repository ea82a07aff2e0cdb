from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from typings.material import Material
from typings.ray import Ray
from utils.vector_operations import normalize_vector, vector_dot


@dataclass(frozen=True, slots=True, eq=False)
class Sphere:
    center: np.ndarray
    radius: float
    material: Material

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError("sphere radius must be positive")
        center = np.array(self.center, dtype=float)
        center.flags.writeable = False
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "radius", float(self.radius))

    def intersect(self, ray: Ray) -> float | None:
        """Distance along a unit-direction ray to the nearest non-negative hit, or None."""
        center_offset = self.center - ray.origin
        closest_approach = vector_dot(center_offset, ray.direction) # projection of the center onto the ray
        perpendicular_sq = vector_dot(center_offset, center_offset) - closest_approach * closest_approach
        radius_sq = self.radius * self.radius
        if perpendicular_sq > radius_sq:
            return None

        half_chord = math.sqrt(radius_sq - perpendicular_sq)
        t_near = closest_approach - half_chord
        t_far = closest_approach + half_chord
        if t_near < 0.0:
            # origin is inside the sphere or past the near root
            t_near = t_far
        if t_near < 0.0:
            return None
        return t_near

    def normal_at(self, point: np.ndarray) -> np.ndarray:
        return normalize_vector(point - self.center)
