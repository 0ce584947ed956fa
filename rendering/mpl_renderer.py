"""
MST renderer using matplotlib's mplot3d.

Points are scatter markers; every edge is split into short sub-segments so
its color fades from one endpoint color to the other.
"""

import math
from pathlib import Path
from typing import Callable, List, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import colors as mcolors
from matplotlib.animation import FuncAnimation
from mpl_toolkits.mplot3d.art3d import Line3DCollection
from tqdm import tqdm

from config.render_config import MSTRenderConfig, BACKGROUNDS
from mst.scheduler import EventQueue, VirtualClock
from .base import Renderer
from .scene import PointPrimitive, LinePrimitive
from .utils import gradient_segments, pick_background

ZOOM_STEP = 1.1
AUTO_ROTATE_KEY = 't'


class MatplotlibRenderer(Renderer):
    def __init__(
        self,
        config: MSTRenderConfig = None,
        spread_bound: float = 1.0,
        rng: Optional[np.random.Generator] = None
    ):
        super().__init__(config)
        self.background = self.config.background or pick_background(rng)
        self.spread_bound = spread_bound if spread_bound > 0 else 1.0

        self._point_xyz: List[tuple] = []
        self._point_colors: List[tuple] = []
        self._scatter = None

        self._segments: List[np.ndarray] = []
        self._segment_colors: List[np.ndarray] = []
        self._lines: Optional[Line3DCollection] = None

        self._last_tick: Optional[float] = None
        self._on_start: Optional[Callable[[], None]] = None
        self.animation: Optional[FuncAnimation] = None

        self._create_figure()

    def _create_figure(self):
        fig_color, pane_color = BACKGROUNDS[self.background]

        self.fig = plt.figure(figsize=self.config.figsize, dpi=self.config.dpi)
        self.fig.patch.set_facecolor(fig_color)
        self.ax = self.fig.add_subplot(projection='3d')
        self.ax.set_facecolor(fig_color)
        for axis in (self.ax.xaxis, self.ax.yaxis, self.ax.zaxis):
            axis.set_pane_color(mcolors.to_rgba(pane_color, 0.35))
        self.ax.set_axis_off()

        bound = self.spread_bound
        self.ax.set_xlim(-bound, bound)
        self.ax.set_ylim(-bound, bound)
        self.ax.set_zlim(-bound, bound)
        self.ax.set_box_aspect((1, 1, 1), zoom=self.controls.zoom)
        self.ax.view_init(elev=self.controls.elevation, azim=self.controls.azimuth)

        self.fig.canvas.mpl_connect('scroll_event', self._on_scroll)
        self.fig.canvas.mpl_connect('key_press_event', self._on_key)

    def _on_scroll(self, event):
        if event.button == 'up':
            self.controls.zoom_by(ZOOM_STEP)
        elif event.button == 'down':
            self.controls.zoom_by(1 / ZOOM_STEP)

    def _on_key(self, event):
        if event.key == AUTO_ROTATE_KEY:
            self.controls.toggle_auto_rotate()

    def _draw(self, handle):
        if isinstance(handle, PointPrimitive):
            self._point_xyz.append(handle.position.to_tuple())
            self._point_colors.append(handle.color)

            if self._scatter is not None:
                self._scatter.remove()
            xyz = np.array(self._point_xyz)
            self._scatter = self.ax.scatter(
                xyz[:, 0], xyz[:, 1], xyz[:, 2],
                c=np.array(self._point_colors),
                s=self.config.point_size,
                depthshade=False
            )

        elif isinstance(handle, LinePrimitive):
            segments, seg_colors = gradient_segments(
                handle.start.to_tuple(), handle.end.to_tuple(),
                handle.color_start, handle.color_end,
                self.config.line_segments
            )
            self._segments.extend(segments)
            self._segment_colors.extend(seg_colors)

            # Created lazily: mplot3d cannot project an empty collection
            if self._lines is None:
                self._lines = Line3DCollection(
                    self._segments,
                    colors=self._segment_colors,
                    linewidths=self.config.line_width
                )
                self.ax.add_collection3d(self._lines)
            else:
                self._lines.set_segments(self._segments)
                self._lines.set_color(self._segment_colors)

    def _redraw(self):
        self.ax.view_init(elev=self.controls.elevation, azim=self.controls.azimuth)
        self.ax.set_box_aspect((1, 1, 1), zoom=self.controls.zoom)
        return [a for a in (self._scatter, self._lines) if a is not None]

    def render_frame(self, dt_ms: float = 0.0):
        # Keep whatever rotation the user applied with the mouse
        self.controls.azimuth = self.ax.azim
        self.controls.elevation = self.ax.elev
        return super().render_frame(dt_ms)

    def _tick(self, frame_idx: int, queue: EventQueue):
        clock = queue.clock
        if isinstance(clock, VirtualClock):
            clock.advance_to(max(clock.now(), frame_time_ms(frame_idx, self.config.fps)))

        if self._on_start is not None:
            on_start, self._on_start = self._on_start, None
            on_start()

        now = clock.now()
        dt = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now

        queue.run_pending()
        return self.render_frame(dt)

    def animate(
        self,
        queue: EventQueue,
        frames: Optional[int] = None,
        save_path: Optional[str] = None,
        on_start: Optional[Callable[[], None]] = None
    ) -> FuncAnimation:
        """
        Drive the reveal and the camera from a FuncAnimation.

        Each frame runs the reveal events that are due, then redraws.
        With save_path the animation is written as a GIF; the queue should use
        a VirtualClock so the reveal follows frame time, not export time.
        on_start runs once, on the first frame, before any event is dispatched.
        """
        if save_path and frames is None:
            raise ValueError("frames is required when saving an animation")

        self._on_start = on_start

        self.animation = FuncAnimation(
            self.fig,
            self._tick,
            frames=frames,
            init_func=lambda: [],
            fargs=(queue,),
            interval=self.config.frame_interval_ms,
            blit=False,
            repeat=False,
            cache_frame_data=False
        )

        if save_path:
            Path(save_path).parent.mkdir(parents=True, exist_ok=True)
            fps = self.config.fps
            with tqdm(total=frames, desc="Rendering MST frames") as bar:
                self.animation.save(
                    save_path,
                    writer='pillow',
                    fps=fps,
                    savefig_kwargs={'facecolor': self.fig.get_facecolor()},
                    progress_callback=lambda i, n: bar.update(1)
                )
            print(f"Saved animation to {save_path}")
        else:
            plt.show()

        return self.animation

    def save_frame(self, output_path: str):
        self._redraw()
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(output_path, facecolor=self.fig.get_facecolor())

    def close(self):
        plt.close(self.fig)


def frame_time_ms(frame_idx: int, fps: int) -> float:
    """Virtual time of a frame in ms, multiplied before dividing."""
    return frame_idx * 1000.0 / fps


def frames_for_reveal(num_edges: int, edge_delay_ms: float, fps: int, orbit_seconds: float = 0.0) -> int:
    """Frames needed to show every edge, plus orbit_seconds of free rotation."""
    reveal_ms = max(num_edges - 1, 0) * edge_delay_ms
    last_frame = int(math.ceil(reveal_ms * fps / 1000.0))
    if frame_time_ms(last_frame, fps) < reveal_ms:
        last_frame += 1
    return last_frame + 1 + int(math.ceil(orbit_seconds * fps))
