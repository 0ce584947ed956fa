"""
Rendering module for the MST animation.
Scene state is backend independent; matplotlib draws it in 3D.
"""

from .base import Renderer
from .scene import Scene, OrbitControls, PointPrimitive, LinePrimitive
from .headless import HeadlessRenderer
from .mpl_renderer import MatplotlibRenderer, frames_for_reveal, frame_time_ms
from .utils import to_rgb, gradient_segments, pick_background
