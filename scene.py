from __future__ import annotations

from typing import List

import numpy as np

from surfaces.sphere import Sphere
from typings.hit import Hit
from typings.light import Light
from typings.material import Material
from typings.ray import Ray

FAR_PLANE: float = 1000.0 # hits at or beyond this distance count as background


class Scene:
    """Insertion-ordered spheres and point lights.

    Filled once during setup, then only read while rendering.
    """

    def __init__(self) -> None:
        self.spheres: List[Sphere] = []
        self.lights: List[Light] = []

    def add_sphere(self, center: np.ndarray, radius: float, material: Material) -> Sphere:
        sphere = Sphere(center, radius, material)
        self.spheres.append(sphere)
        return sphere

    def add_light(self, position: np.ndarray, intensity: float) -> Light:
        light = Light(position, intensity)
        self.lights.append(light)
        return light

    def nearest_hit(self, ray: Ray, far_plane: float = FAR_PLANE) -> Hit | None:
        """Find the closest sphere hit by linear scan; the first sphere wins exact ties."""
        best_distance = float("inf")
        best_hit: Hit | None = None
        for sphere in self.spheres:
            distance = sphere.intersect(ray)
            if distance is None or not distance < best_distance:
                continue
            best_distance = distance
            hit_point = ray.at(distance)
            best_hit = Hit(
                t=distance,
                point=hit_point,
                normal=sphere.normal_at(hit_point),
                material=sphere.material,
            )

        if best_distance < far_plane:
            return best_hit
        return None
