from __future__ import annotations

import numpy as np

from camera import PinholeCamera
from framebuffer import Framebuffer
from image_export import save_image
from render_settings import RenderSettings
from scene import Scene
from typings.ray import Ray
from utils.vector_operations import (
    normalize_vector,
    reflect_vector,
    vector_dot,
    vector_length,
)

# Recursion depth is either an active level (int) or exhausted (None).
Depth = int | None

WHITE = np.ones(3, dtype=float)


def next_depth(depth: Depth, max_depth: int) -> Depth:
    """Advance an active depth by one; past max_depth it becomes exhausted."""
    if depth is None or depth + 1 > max_depth:
        return None
    return depth + 1


def offset_origin(point: np.ndarray, normal: np.ndarray, direction: np.ndarray, epsilon: float) -> np.ndarray:
    """Push a secondary ray origin off the surface, to the side the ray leaves through."""
    if vector_dot(direction, normal) >= 0.0:
        return point + normal * epsilon
    return point - normal * epsilon


# Recursive shading with hard shadows + mirror reflection
def trace(
    ray: Ray,
    scene: Scene,
    settings: RenderSettings,
    depth: Depth = 0,
) -> np.ndarray:
    """
    Color seen along a ray.
    Combines diffuse + specular lighting from every unoccluded light with
    a recursively traced reflection, weighted by the material albedo.
    An exhausted depth returns the background without querying the scene.
    """
    if depth is None:
        return settings.background_color.copy()

    best_hit = scene.nearest_hit(ray, settings.far_plane)

    if best_hit is None:
        return settings.background_color.copy()

    material = best_hit.material
    hit_point = best_hit.point
    surface_normal = best_hit.normal

    reflect_dir = normalize_vector(reflect_vector(ray.direction, surface_normal))
    reflect_origin = offset_origin(hit_point, surface_normal, reflect_dir, settings.bias_epsilon)
    reflect_color = trace(
        Ray(origin=reflect_origin, direction=reflect_dir),
        scene,
        settings,
        next_depth(depth, settings.max_depth),
    )

    diffuse_intensity = 0.0
    specular_intensity = 0.0
    for light in scene.lights:
        to_light = light.position - hit_point
        light_direction = normalize_vector(to_light)
        light_distance = vector_length(to_light)

        shadow_origin = offset_origin(hit_point, surface_normal, light_direction, settings.bias_epsilon)
        shadow_hit = scene.nearest_hit(Ray(origin=shadow_origin, direction=light_direction), settings.far_plane)
        if shadow_hit is not None and vector_length(shadow_hit.point - shadow_origin) < light_distance:
            continue

        diffuse_intensity += light.intensity * max(0.0, vector_dot(light_direction, surface_normal))

        # Phong: max(dot(R, V), 0)^exponent with R = -reflect(-L, N)
        mirrored = -reflect_vector(-light_direction, surface_normal)
        r_dot_v = max(0.0, vector_dot(mirrored, ray.direction))
        specular_intensity += light.intensity * r_dot_v ** material.specular_exponent

    albedo = material.albedo
    return (
        material.diffuse_color * diffuse_intensity * albedo[0]
        + WHITE * specular_intensity * albedo[1]
        + reflect_color * albedo[2]
    )


def render(
    scene: Scene,
    width: int,
    height: int,
    settings: RenderSettings | None = None,
    camera: PinholeCamera | None = None,
) -> Framebuffer:
    """Trace one primary ray per pixel, then tone-map the whole buffer."""
    if settings is None:
        settings = RenderSettings()
    if camera is None:
        camera = PinholeCamera(settings.fov)

    framebuffer = Framebuffer(width, height)
    for i in range(height):
        for j in range(width):
            ray = camera.generate_ray(i, j, width, height)
            framebuffer[i, j] = trace(ray, scene, settings, depth=0)

    framebuffer.tone_map()
    return framebuffer


def render_to_file(
    scene: Scene,
    width: int,
    height: int,
    output_path: str,
    settings: RenderSettings | None = None,
    camera: PinholeCamera | None = None,
) -> Framebuffer:
    framebuffer = render(scene, width, height, settings, camera)
    save_image(framebuffer.width, framebuffer.height, framebuffer.to_bytes(), output_path)
    return framebuffer
