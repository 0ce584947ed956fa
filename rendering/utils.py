"""
Rendering utility functions.
"""

from typing import List, Optional, Tuple, Union

import numpy as np
from matplotlib import colors as mcolors

from config.render_config import BACKGROUNDS
from mst.point import unpack_color

RGB = Tuple[float, float, float]
ColorLike = Union[int, str, Tuple[float, float, float]]


def to_rgb(color: ColorLike) -> RGB:
    """Accept a packed 0xRRGGBB int, a matplotlib color string or an RGB triple."""
    if isinstance(color, (int, np.integer)):
        return unpack_color(int(color))
    r, g, b = mcolors.to_rgb(color)
    return (float(r), float(g), float(b))


def gradient_segments(
    start: Tuple[float, float, float],
    end: Tuple[float, float, float],
    color_start: RGB,
    color_end: RGB,
    n: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a line into n sub-segments colored by linear interpolation.

    Returns (segments, colors): segments has shape (n, 2, 3), colors (n, 3).
    Sub-segment k is sampled at its midpoint (k + 0.5) / n.
    """
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    c0 = np.asarray(color_start, dtype=float)
    c1 = np.asarray(color_end, dtype=float)

    t = np.linspace(0.0, 1.0, n + 1)[:, None]
    knots = start + (end - start) * t
    segments = np.stack([knots[:-1], knots[1:]], axis=1)

    mid = ((np.arange(n) + 0.5) / n)[:, None]
    seg_colors = c0 + (c1 - c0) * mid

    return segments, seg_colors


def pick_background(rng: Optional[np.random.Generator] = None) -> str:
    """Random choice between the available background themes."""
    if rng is None:
        rng = np.random.default_rng()
    names: List[str] = sorted(BACKGROUNDS)
    return names[int(rng.integers(0, len(names)))]
