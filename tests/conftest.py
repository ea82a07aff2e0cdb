"""Shared fixtures for the ray tracer tests."""

import pytest

from render_settings import RenderSettings
from typings.material import Material
from utils.vector_operations import vec3


@pytest.fixture
def settings():
    return RenderSettings()


@pytest.fixture
def diffuse_white():
    """Pure diffuse white surface: only the diffuse term contributes."""
    return Material(albedo=vec3(1.0, 0.0, 0.0), diffuse_color=vec3(1.0, 1.0, 1.0), specular_exponent=1.0)


@pytest.fixture
def matte_gray():
    return Material(albedo=vec3(1.0, 0.0, 0.0), diffuse_color=vec3(0.5, 0.5, 0.5), specular_exponent=1.0)


@pytest.fixture
def shiny():
    """Specular-only surface."""
    return Material(albedo=vec3(0.0, 1.0, 0.0), diffuse_color=vec3(0.3, 0.3, 0.3), specular_exponent=1.0)


@pytest.fixture
def perfect_mirror():
    """Reflection-only surface."""
    return Material(albedo=vec3(0.0, 0.0, 1.0), diffuse_color=vec3(1.0, 1.0, 1.0), specular_exponent=1.0)

