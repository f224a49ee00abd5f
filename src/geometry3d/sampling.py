"""
Uniform sampling of directions on the unit sphere.

The polar angle is drawn as acos(2u - 1) rather than uniformly, otherwise
samples bunch up at the poles. See
http://mathworld.wolfram.com/SpherePointPicking.html
"""

import math
import random
import threading
from typing import Optional

import numpy as np

_local = threading.local()


def thread_rng() -> random.Random:
    """Return the calling thread's own random generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def random_unit_components(rng: random.Random) -> tuple[float, float, float]:
    phi = rng.random() * math.pi * 2.0
    theta = math.acos(2.0 * rng.random() - 1.0)
    return (
        math.sin(theta) * math.cos(phi),
        math.sin(theta) * math.sin(phi),
        math.cos(theta),
    )


def random_unit_array(n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Draw many unit directions at once.

    Args:
        n: The number of directions.
        rng: A numpy Generator, a fresh default_rng() when not given.

    Returns:
        np.ndarray: An (n, 3) float64 array, one unit vector per row.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"sample count must be non-negative, got {n}")
    if rng is None:
        rng = np.random.default_rng()
    phi = rng.uniform(0.0, 2.0 * np.pi, n)
    theta = np.arccos(2.0 * rng.uniform(0.0, 1.0, n) - 1.0)
    sin_theta = np.sin(theta)
    return np.column_stack((sin_theta * np.cos(phi), sin_theta * np.sin(phi), np.cos(theta)))
