from __future__ import annotations

from typing import Callable, Dict

from scene import Scene
from typings.material import Material
from utils.vector_operations import vec3

IVORY = Material(albedo=vec3(0.6, 0.3, 0.1), diffuse_color=vec3(0.4, 0.4, 0.3), specular_exponent=50.0)
RED_RUBBER = Material(albedo=vec3(0.9, 0.1, 0.0), diffuse_color=vec3(0.3, 0.1, 0.1), specular_exponent=10.0)
MIRROR = Material(albedo=vec3(0.0, 10.0, 0.8), diffuse_color=vec3(1.0, 1.0, 1.0), specular_exponent=1425.0)


def build_single_sphere_scene() -> Scene:
    """One unlit ivory sphere left of center; only the reflected background shows on it."""
    scene = Scene()
    scene.add_sphere(vec3(-3.0, 0.0, -16.0), 2.0, IVORY)
    return scene


def build_default_scene() -> Scene:
    scene = Scene()
    scene.add_sphere(vec3(-3.0, 0.0, -16.0), 2.0, IVORY)
    scene.add_sphere(vec3(-1.0, -1.5, -12.0), 2.0, MIRROR)
    scene.add_sphere(vec3(1.5, -0.5, -18.0), 3.0, RED_RUBBER)
    scene.add_sphere(vec3(7.0, 5.0, -18.0), 4.0, MIRROR)

    scene.add_light(vec3(-20.0, 20.0, 20.0), 1.5)
    scene.add_light(vec3(30.0, 50.0, -25.0), 1.8)
    scene.add_light(vec3(30.0, 20.0, 30.0), 1.7)
    return scene


SCENE_PRESETS: Dict[str, Callable[[], Scene]] = {
    "single_sphere": build_single_sphere_scene,
    "default": build_default_scene,
}


def build_scene(name: str) -> Scene:
    try:
        builder = SCENE_PRESETS[name]
    except KeyError:
        raise ValueError("Unknown scene preset: {}".format(name)) from None
    return builder()
