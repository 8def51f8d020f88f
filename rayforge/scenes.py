"""
Built-in scenes.
"""

from __future__ import annotations

from .vec3 import Color, Point3
from .shapes import Sphere, HittableList
from .materials import Lambertian, Metal


def create_default_scene() -> HittableList:
    """Two diffuse and two metal spheres resting on a large ground sphere."""
    world = HittableList()

    material_ground = Lambertian(Color(0.8, 0.8, 0.0))
    material_center = Lambertian(Color(0.7, 0.3, 0.3))
    material_left = Metal(Color(0.8, 0.8, 0.8))
    material_right = Metal(Color(0.8, 0.6, 0.2))

    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, material_center))
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, material_ground))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, material_left))
    world.add(Sphere(Point3(1.0, 0.0, 1.0), 0.5, material_right))

    return world
