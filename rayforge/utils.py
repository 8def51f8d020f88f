"""
Small numeric helpers shared across the renderer.

The uniform random source lives here: every randomized operation in the
package draws from `random_double` / `random_double_range`, so seeding
this module makes a render reproducible.
"""

from __future__ import annotations
import math
from typing import Optional

import numpy as np


def seed(value: Optional[int]) -> None:
    """Seed the global random source (None reseeds from OS entropy)."""
    np.random.seed(value)


def random_double() -> float:
    """Return a random real in [0, 1)."""
    return float(np.random.random())


def random_double_range(min_val: float, max_val: float) -> float:
    """Return a random real in [min_val, max_val)."""
    return min_val + (max_val - min_val) * random_double()


def clamp(x: float, min_val: float, max_val: float) -> float:
    if x < min_val:
        return min_val
    if x > max_val:
        return max_val
    return x


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
