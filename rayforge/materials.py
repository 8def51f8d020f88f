"""
Surface materials.

Implements:
- Lambertian diffuse
- Metal (mirror reflection)

A material is immutable once built, so one instance may back any number
of shapes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .vec3 import Vec3, Color, reflect, unit_vector
from .ray import Ray

if TYPE_CHECKING:
    from .shapes import HitRecord


@dataclass(frozen=True)
class ScatterResult:
    """Result of a material scatter operation."""
    scattered_ray: Ray
    attenuation: Color


class Material(ABC):
    """Abstract base class for materials."""

    @abstractmethod
    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[ScatterResult]:
        """Compute the scattered ray and attenuation.

        Args:
            ray_in: The incoming ray
            hit: The intersection being shaded

        Returns:
            ScatterResult if ray scatters, None if absorbed
        """
        pass


@dataclass(frozen=True)
class Lambertian(Material):
    """Diffuse material with Lambertian (ideal matte) scattering.

    Always scatters; energy loss is carried entirely by the albedo.
    """
    albedo: Color

    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[ScatterResult]:
        scatter_direction = hit.normal + Vec3.random_unit_vector()

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = hit.normal

        return ScatterResult(
            scattered_ray=Ray(hit.point, scatter_direction),
            attenuation=self.albedo
        )


@dataclass(frozen=True)
class Metal(Material):
    """Metallic material with specular reflection."""
    albedo: Color

    def scatter(self, ray_in: Ray, hit: HitRecord) -> Optional[ScatterResult]:
        reflected = reflect(unit_vector(ray_in.direction), hit.normal)

        # Reflections that point into the surface are absorbed
        if reflected.dot(hit.normal) <= 0:
            return None

        return ScatterResult(
            scattered_ray=Ray(hit.point, reflected),
            attenuation=self.albedo
        )
