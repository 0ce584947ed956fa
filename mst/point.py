"""
Point class - a colored node of the point cloud.
"""

from typing import Tuple

from .vector import Vector3D

MAX_COLOR = 0xFFFFFF


def unpack_color(color: int) -> Tuple[float, float, float]:
    """0xRRGGBB -> (r, g, b) floats in [0, 1]."""
    return (
        ((color >> 16) & 0xFF) / 255.0,
        ((color >> 8) & 0xFF) / 255.0,
        (color & 0xFF) / 255.0,
    )


class Point:
    __slots__ = ('_index', '_position', '_color')

    def __init__(self, index: int, position: Vector3D, color: int):
        if not 0 <= color <= MAX_COLOR:
            raise ValueError(f"color must be in [0, 0xFFFFFF], got {color:#x}")
        self._index = int(index)
        self._position = position.copy()
        self._color = int(color)

    @property
    def index(self) -> int:
        return self._index

    @property
    def position(self) -> Vector3D:
        # Copy so callers cannot move the point
        return self._position.copy()

    @property
    def color(self) -> int:
        return self._color

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return unpack_color(self._color)

    @property
    def hex_color(self) -> str:
        return f"#{self._color:06x}"

    def __repr__(self) -> str:
        return f"Point({self._index}, {self._position}, {self.hex_color})"
