"""Unit tests for ray-sphere intersection.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere
- Ray starting inside sphere
- Sphere behind the ray origin
- Ray tangent to sphere
"""

import dataclasses
import math

import numpy as np
import pytest

from surfaces.sphere import Sphere
from typings.ray import Ray
from utils.vector_operations import normalize_vector, vec3


def make_ray(origin, direction):
    return Ray(origin=vec3(*origin), direction=normalize_vector(vec3(*direction)))


class TestSphereBasics:
    """Tests for Sphere construction."""

    def test_fields(self, matte_gray):
        sphere = Sphere(vec3(1.0, 2.0, 3.0), 0.5, matte_gray)
        np.testing.assert_allclose(sphere.center, [1.0, 2.0, 3.0])
        assert sphere.radius == 0.5
        assert sphere.material is matte_gray

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_non_positive_radius_rejected(self, matte_gray, radius):
        with pytest.raises(ValueError):
            Sphere(vec3(0.0, 0.0, 0.0), radius, matte_gray)

    def test_immutable(self, matte_gray):
        sphere = Sphere(vec3(0.0, 0.0, -5.0), 1.0, matte_gray)
        with pytest.raises(dataclasses.FrozenInstanceError):
            sphere.radius = 2.0
        with pytest.raises(ValueError):
            sphere.center[0] = 4.0

    def test_normal_at_surface_point(self, matte_gray):
        sphere = Sphere(vec3(0.0, 0.0, -10.0), 2.0, matte_gray)
        np.testing.assert_allclose(sphere.normal_at(vec3(0.0, 2.0, -10.0)), [0.0, 1.0, 0.0])


class TestSphereIntersection:
    """Tests for Sphere.intersect."""

    def test_ray_through_center_reports_near_root(self, matte_gray):
        sphere = Sphere(vec3(0.0, 0.0, -10.0), 2.0, matte_gray)
        assert sphere.intersect(make_ray((0, 0, 0), (0, 0, -1))) == pytest.approx(8.0)

    def test_miss(self, matte_gray):
        sphere = Sphere(vec3(5.0, 0.0, -10.0), 1.0, matte_gray)
        assert sphere.intersect(make_ray((0, 0, 0), (0, 0, -1))) is None

    def test_pointing_away_from_sphere_misses(self, matte_gray):
        sphere = Sphere(vec3(0.0, 0.0, -10.0), 2.0, matte_gray)
        assert sphere.intersect(make_ray((0, 0, 0), (0, 0, 1))) is None

    @pytest.mark.parametrize("direction", [(0, 0, 1), (1, 0, 0), (0.3, -1.0, 0.2), (-1, 1, 1)])
    def test_any_direction_away_from_center_misses(self, matte_gray, direction):
        # origin outside the sphere, direction with a negative component toward the center
        sphere = Sphere(vec3(-4.0, 0.5, -10.0), 3.0, matte_gray)
        ray = make_ray((0, 0, 0), direction)
        assert np.dot(sphere.center - ray.origin, ray.direction) < 0.0
        assert sphere.intersect(ray) is None

    def test_origin_inside_uses_far_root(self, matte_gray):
        sphere = Sphere(vec3(0.0, 0.0, 0.0), 3.0, matte_gray)
        assert sphere.intersect(make_ray((0, 0, 0), (0, 1, 0))) == pytest.approx(3.0)

    def test_origin_inside_off_center(self, matte_gray):
        sphere = Sphere(vec3(0.0, 0.0, 0.0), 2.0, matte_gray)
        assert sphere.intersect(make_ray((0, 0, 1), (0, 0, -1))) == pytest.approx(3.0)

    def test_tangent_ray_hits_once(self, matte_gray):
        sphere = Sphere(vec3(1.0, 0.0, -10.0), 1.0, matte_gray)
        assert sphere.intersect(make_ray((0, 0, 0), (0, 0, -1))) == pytest.approx(10.0)

    def test_reference_sphere_distance(self, matte_gray):
        """Ray aimed at the center of the sphere at (-3, 0, -16), radius 2."""
        sphere = Sphere(vec3(-3.0, 0.0, -16.0), 2.0, matte_gray)
        distance = sphere.intersect(make_ray((0, 0, 0), (-3, 0, -16)))
        assert distance is not None
        assert distance == pytest.approx(math.sqrt(265.0) - 2.0)
        assert distance == pytest.approx(14.0, abs=0.5)
