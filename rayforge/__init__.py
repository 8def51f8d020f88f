"""
RayForge - A Python Sphere Ray Tracer

Renders a fixed scene of spheres with recursive ray tracing:
- Lambertian diffuse and mirror metal materials
- Nearest-hit sphere intersection
- Bounded bounce loop with a sky gradient background
- PPM (P3) and PNG output
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, Color, unit_vector, reflect
from .ray import Ray
from .shapes import HitRecord, Hittable, Sphere, HittableList
from .materials import Material, ScatterResult, Lambertian, Metal
from .camera import Camera
from .renderer import Renderer, RenderSettings, ray_color, sky_color, write_ppm
from .scenes import create_default_scene
