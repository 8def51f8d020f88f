"""
Renderer module - the heart of the ray tracer.

Implements:
- Ray color resolution (bounded bounce loop with a sky gradient on miss)
- Per-pixel sample averaging
- Gamma correction and 8-bit quantization
- PPM (P3) and Pillow image output
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Callable, TextIO
import sys

import numpy as np

from .vec3 import Color, unit_vector
from .ray import Ray
from .camera import Camera
from .shapes import Hittable
from .utils import random_double

# Lower bound of the hit search; keeps bounced rays off their own surface
T_MIN = 0.001

SKY_WHITE = (1.0, 1.0, 1.0)
SKY_BLUE = (0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Color:
    """Background seen by a ray that escapes the scene.

    Blends white (looking straight down) into sky blue (straight up)
    by the height of the unit direction.
    """
    unit_direction = unit_vector(ray.direction)
    t = 0.5 * (unit_direction.y + 1.0)
    return Color(*SKY_WHITE) * (1.0 - t) + Color(*SKY_BLUE) * t


def ray_color(ray: Ray, world: Hittable, depth: int) -> Color:
    """Compute the linear radiance carried back along a ray.

    Each bounce multiplies the material attenuation into a running
    throughput. The walk ends on a miss (sky color), on absorption
    (black), or after `depth` bounces (black).

    Args:
        ray: The ray to trace
        world: The scene to trace against
        depth: Maximum number of bounces

    Returns:
        Unclamped linear color for this ray
    """
    throughput = Color(1.0, 1.0, 1.0)

    while depth > 0:
        hit_record = world.hit(ray, T_MIN, float('inf'))

        if hit_record is None:
            return throughput * sky_color(ray)

        if hit_record.material is None:
            return Color(0, 0, 0)

        scatter_result = hit_record.material.scatter(ray, hit_record)
        if scatter_result is None:
            return Color(0, 0, 0)

        throughput = throughput * scatter_result.attenuation
        ray = scatter_result.scattered_ray
        depth -= 1

    # Bounce budget exhausted
    return Color(0, 0, 0)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 100
    max_depth: int = 50
    gamma: float = 2.0

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if not self.gamma > 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")


class Renderer:
    """Single-threaded scanline renderer."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Hittable, camera: Camera) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Args:
            scene: The scene to render (any Hittable)
            camera: The camera to render from

        Returns:
            Linear HDR image of shape (height, width, 3), top row first
        """
        width = self.settings.width
        height = self.settings.height
        samples = self.settings.samples_per_pixel
        max_depth = self.settings.max_depth

        denom_u = max(width - 1, 1)
        denom_v = max(height - 1, 1)

        image = np.zeros((height, width, 3), dtype=np.float64)

        for row in range(height):
            j = height - 1 - row
            for i in range(width):
                pixel_color = Color(0, 0, 0)

                for _ in range(samples):
                    u = (i + random_double()) / denom_u
                    v = (j + random_double()) / denom_v
                    pixel_color += ray_color(camera.get_ray(u, v), scene, max_depth)

                image[row, i] = pixel_color.to_array() / samples

            if self._progress_callback:
                self._progress_callback((row + 1) / height)

        return image

    def to_ldr(self, hdr_image: np.ndarray) -> np.ndarray:
        """Convert HDR image to 8-bit LDR with gamma correction.

        Args:
            hdr_image: Linear image array (float64)

        Returns:
            LDR image as uint8 array
        """
        corrected = np.power(np.clip(hdr_image, 0, None), 1.0 / self.settings.gamma)
        return (256 * np.clip(corrected, 0.0, 0.999)).astype(np.uint8)

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save image to file.

        Args:
            image: Image array (HDR or LDR)
            filename: Output filename (extension determines format)
        """
        if image.dtype == np.float64 or image.dtype == np.float32:
            image = self.to_ldr(image)

        if filename.lower().endswith('.ppm'):
            with open(filename, 'w') as f:
                write_ppm(image, f)
        else:
            from PIL import Image as PILImage

            pil_image = PILImage.fromarray(image, 'RGB')
            pil_image.save(filename)


def write_ppm(ldr_image: np.ndarray, stream: TextIO = None) -> None:
    """Write an 8-bit image as plain-text PPM (P3).

    Args:
        ldr_image: uint8 array of shape (height, width, 3), top row first
        stream: Text stream to write to (default: stdout)
    """
    if stream is None:
        stream = sys.stdout

    height, width = ldr_image.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in ldr_image:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")
