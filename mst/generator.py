"""
Random point cloud generation.
"""

from typing import List, Optional

import numpy as np

from .point import Point, MAX_COLOR
from .vector import Vector3D


def generate_points(
    n: int,
    spread_bound: float,
    rng: Optional[np.random.Generator] = None
) -> List[Point]:
    """
    Place n points uniformly inside the cube [-spread_bound, spread_bound]^3.

    Each point gets an independent color drawn uniformly from 0x000000-0xFFFFFF.
    n == 0 gives an empty cloud; negative arguments are rejected.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if spread_bound < 0:
        raise ValueError(f"spread_bound must be >= 0, got {spread_bound}")

    if rng is None:
        rng = np.random.default_rng()

    positions = rng.uniform(-spread_bound, spread_bound, size=(n, 3))
    colors = rng.integers(0, MAX_COLOR + 1, size=n)

    return [
        Point(idx, Vector3D.from_array(positions[idx]), int(colors[idx]))
        for idx in range(n)
    ]


def positions_array(points: List[Point]) -> np.ndarray:
    """Stack point positions into an (N, 3) array."""
    if not points:
        return np.empty((0, 3))
    return np.array([p.position.to_tuple() for p in points])
