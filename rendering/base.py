"""
Base renderer class defining the interface the MST animation draws through.
"""

from abc import ABC, abstractmethod

from config.render_config import MSTRenderConfig
from mst.vector import Vector3D
from .scene import Scene, OrbitControls, PointPrimitive, LinePrimitive, Primitive
from .utils import ColorLike, to_rgb


class Renderer(ABC):
    def __init__(self, config: MSTRenderConfig = None):
        self.config = config or MSTRenderConfig()
        self.scene = Scene()
        self.controls = OrbitControls(
            auto_rotate_speed=self.config.auto_rotate_speed,
            elevation=self.config.initial_elevation,
            enable_damping=self.config.enable_damping,
            damping_factor=self.config.damping_factor,
        )
        self.frame_count = 0

    def create_point(self, position: Vector3D, color: ColorLike) -> PointPrimitive:
        return PointPrimitive(position.copy(), to_rgb(color))

    def create_edge_line(
        self,
        pos_a: Vector3D,
        color_a: ColorLike,
        pos_b: Vector3D,
        color_b: ColorLike
    ) -> LinePrimitive:
        return LinePrimitive(pos_a.copy(), pos_b.copy(), to_rgb(color_a), to_rgb(color_b))

    def add_to_scene(self, handle: Primitive):
        self.scene.add(handle)
        self._draw(handle)

    def render_frame(self, dt_ms: float = 0.0):
        """Per-frame tick: move the camera, then redraw."""
        self.controls.update(dt_ms)
        self.frame_count += 1
        return self._redraw()

    @abstractmethod
    def _draw(self, handle: Primitive):
        pass

    @abstractmethod
    def _redraw(self):
        pass
