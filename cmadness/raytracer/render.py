"""Whitted-style ray tracing of a scene into an RGB byte buffer."""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from cmadness.raytracer.scene import ObjectType, Scene, SceneObject
from cmadness.raytracer.vector import Vec3

_EPSILON = 0.01
_PARALLEL_LIMIT = 1e-6
_FAR = 1e9
_BACKGROUND = Vec3(0.2, 0.2, 0.2)
_AMBIENT = 0.1
_SHININESS = 16
_MAX_DEPTH = 2
_MIN_REFLECT = 0.05
_EYE = Vec3(0.0, 0.0, 0.0)


def intersect_sphere(origin: Vec3, direction: Vec3, obj: SceneObject) -> Optional[float]:
    """Return the nearest ray distance to the sphere beyond a small epsilon, or None."""
    oc = origin - obj.position
    b = 2 * oc.dot(direction)
    c = oc.dot(oc) - obj.radius * obj.radius
    discriminant = b * b - 4 * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    for t in ((-b - root) / 2, (-b + root) / 2):
        if t > _EPSILON:
            return t
    return None


def intersect_plane(origin: Vec3, direction: Vec3, obj: SceneObject) -> Optional[float]:
    """Return the ray distance to the plane, or None if parallel or behind."""
    denom = obj.normal.dot(direction)
    if abs(denom) < _PARALLEL_LIMIT:
        return None
    t = (obj.position - origin).dot(obj.normal) / denom
    return t if t > _EPSILON else None


def intersect(origin: Vec3, direction: Vec3, obj: SceneObject) -> Optional[float]:
    """Intersect a ray with any scene object."""
    if obj.kind is ObjectType.SPHERE:
        return intersect_sphere(origin, direction, obj)
    if obj.kind is ObjectType.PLANE:
        return intersect_plane(origin, direction, obj)
    return None


def _in_shadow(scene: Scene, point: Vec3, to_light: Vec3, distance: float, hit: SceneObject) -> bool:
    for obj in scene.objects:
        if obj is hit:
            continue
        t = intersect(point, to_light, obj)
        if t is not None and _EPSILON < t < distance:
            return True
    return False


def trace_ray(scene: Scene, origin: Vec3, direction: Vec3, depth: int) -> Vec3:
    """Return the colour seen along a ray, each component clamped to at most 1."""
    nearest_t = _FAR
    hit: Optional[SceneObject] = None
    for obj in scene.objects:
        t = intersect(origin, direction, obj)
        if t is not None and 0 < t < nearest_t:
            nearest_t, hit = t, obj
    if hit is None:
        return _BACKGROUND

    point = origin + direction * nearest_t
    normal = (point - hit.position).normalized() if hit.kind is ObjectType.SPHERE else hit.normal
    color = hit.color * _AMBIENT

    for light in scene.lights:
        offset = light.position - point
        to_light = offset.normalized()
        shadowed = _in_shadow(scene, point, to_light, offset.dot(to_light), hit)
        diffuse = max(0.0, normal.dot(to_light))
        reflected = normal * (2 * normal.dot(to_light)) - to_light
        specular = max(0.0, reflected.dot(-direction)) ** _SHININESS
        if not shadowed:
            color = color + hit.color * diffuse + light.color * specular

    if depth < _MAX_DEPTH and hit.reflect > _MIN_REFLECT:
        bounce = direction - normal * (2 * direction.dot(normal))
        reflected_color = trace_ray(scene, point + normal * _EPSILON, bounce.normalized(), depth + 1)
        color = color + reflected_color * hit.reflect

    return Vec3(min(color.x, 1.0), min(color.y, 1.0), min(color.z, 1.0))


def primary_ray(x: int, y: int, width: int, height: int) -> Vec3:
    """Return the unit direction of the camera ray through pixel (x, y)."""
    fx = (2 * (x + 0.5) / width - 1) * width / height
    fy = 1 - 2 * (y + 0.5) / height
    return Vec3(fx, fy, -1.0).normalized()


def _render_rows(scene: Scene, width: int, height: int, rows: range, image: bytearray) -> None:
    for y in rows:
        for x in range(width):
            color = trace_ray(scene, _EYE, primary_ray(x, y, width, height), 0)
            index = (y * width + x) * 3
            image[index:index + 3] = bytes((int(255 * color.x), int(255 * color.y), int(255 * color.z)))


def render_scene(scene: Scene, width: int, height: int, threads: int) -> bytes:
    """Render the scene as row-major RGB bytes, splitting rows across threads."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if threads < 1:
        raise ValueError("at least one thread is required")
    image = bytearray(width * height * 3)
    bands = [range(height * t // threads, height * (t + 1) // threads) for t in range(threads)]
    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(_render_rows, scene, width, height, band, image) for band in bands]
        for future in futures:
            future.result()
    return bytes(image)