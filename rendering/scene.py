"""
Scene state shared by all renderers: primitives and orbit camera controls.
"""

from dataclasses import dataclass, field
from typing import List, Union

from mst.vector import Vector3D

RGB = tuple


@dataclass
class PointPrimitive:
    position: Vector3D
    color: RGB


@dataclass
class LinePrimitive:
    start: Vector3D
    end: Vector3D
    color_start: RGB
    color_end: RGB


Primitive = Union[PointPrimitive, LinePrimitive]


@dataclass
class Scene:
    """Ordered container of everything that has been added so far."""
    points: List[PointPrimitive] = field(default_factory=list)
    lines: List[LinePrimitive] = field(default_factory=list)

    def add(self, handle: Primitive):
        if isinstance(handle, PointPrimitive):
            self.points.append(handle)
        elif isinstance(handle, LinePrimitive):
            self.lines.append(handle)
        else:
            raise TypeError(f"Cannot add {type(handle).__name__} to scene")

    def __len__(self) -> int:
        return len(self.points) + len(self.lines)


@dataclass
class OrbitControls:
    """
    Orbit camera around the origin. Angles in degrees, speed in degrees/second.
    Panning is not supported.
    """
    auto_rotate: bool = False
    auto_rotate_speed: float = 12.0
    azimuth: float = -60.0
    elevation: float = 20.0

    zoom: float = 1.0
    target_zoom: float = 1.0
    min_zoom: float = 0.25
    max_zoom: float = 4.0

    enable_damping: bool = True
    damping_factor: float = 0.05
    enable_pan: bool = False

    def toggle_auto_rotate(self) -> bool:
        self.auto_rotate = not self.auto_rotate
        return self.auto_rotate

    def zoom_by(self, factor: float):
        self.target_zoom = min(self.max_zoom, max(self.min_zoom, self.target_zoom * factor))

    def update(self, dt_ms: float = 0.0):
        if self.auto_rotate:
            self.azimuth = (self.azimuth + self.auto_rotate_speed * dt_ms / 1000.0) % 360.0

        if self.enable_damping:
            self.zoom += (self.target_zoom - self.zoom) * self.damping_factor
        else:
            self.zoom = self.target_zoom
