"""Scene description: spheres, planes and point lights."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from cmadness.raytracer.vector import Vec3


class ObjectType(enum.Enum):
    """The kinds of primitive a scene can hold."""

    SPHERE = "sphere"
    PLANE = "plane"


@dataclass(frozen=True)
class SceneObject:
    """A sphere (position, radius) or plane (point on it, normal)."""

    kind: ObjectType
    position: Vec3
    normal: Vec3
    color: Vec3
    radius: float = 0.0
    reflect: float = 0.0


@dataclass(frozen=True)
class Light:
    """A point light."""

    position: Vec3
    color: Vec3


@dataclass
class Scene:
    """Objects and lights to be rendered."""

    objects: list[SceneObject] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)


def default_scene() -> Scene:
    """Return the built-in scene: two spheres over a white floor, one light."""
    origin = Vec3(0.0, 0.0, 0.0)
    return Scene(
        objects=[
            SceneObject(ObjectType.SPHERE, Vec3(0, 0, -5), origin, Vec3(1, 0, 0), 1.0, 0.7),
            SceneObject(ObjectType.SPHERE, Vec3(2, 0, -6), origin, Vec3(0, 1, 0), 1.0, 0.2),
            SceneObject(ObjectType.PLANE, Vec3(0, -1, 0), Vec3(0, 1, 0), Vec3(1, 1, 1), 0.0, 0.1),
        ],
        lights=[Light(Vec3(5, 5, -2), Vec3(1, 1, 1))],
    )