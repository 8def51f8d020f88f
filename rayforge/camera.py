"""
Camera module for generating primary rays.

A fixed pinhole camera at the origin looking down -z through a flat
viewport one focal length away.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A pinhole camera with an axis-aligned viewport."""

    def __init__(
        self,
        aspect_ratio: float = 16.0 / 9.0,
        viewport_height: float = 2.0,
        focal_length: float = 1.0,
        origin: Point3 = None
    ):
        """Create a camera.

        Args:
            aspect_ratio: Width / Height ratio of the viewport
            viewport_height: Height of the viewport in world units
            focal_length: Distance from the origin to the viewport
            origin: Camera position in world space (default: the origin)
        """
        for name, value in (
            ('aspect_ratio', aspect_ratio),
            ('viewport_height', viewport_height),
            ('focal_length', focal_length),
        ):
            if not value > 0:
                raise ValueError(f"Camera {name} must be positive, got {value}")

        viewport_width = aspect_ratio * viewport_height

        self.origin = origin if origin is not None else Point3(0, 0, 0)
        self.horizontal = Vec3(viewport_width, 0, 0)
        self.vertical = Vec3(0, viewport_height, 0)
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2
            - self.vertical / 2
            - Vec3(0, 0, focal_length)
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray for the given UV coordinates on the image plane.

        Args:
            u: Horizontal coordinate [0, 1] (0 = left, 1 = right)
            v: Vertical coordinate [0, 1] (0 = bottom, 1 = top)

        Returns:
            A ray from the camera through the specified point
        """
        direction = (
            self.lower_left_corner
            + self.horizontal * u
            + self.vertical * v
            - self.origin
        )
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return f"Camera(origin={self.origin!r}, lower_left_corner={self.lower_left_corner!r})"
