"""
KruskalGraph - wires point generation, MST construction and the staged
reveal to a renderer.

All state lives on the instance; the renderer and the event queue are
passed in, so several graphs can share one queue or one scene.
"""

from typing import List, Optional, TYPE_CHECKING

import numpy as np

from config.mst_config import MSTConfig
from .edge import Edge
from .generator import generate_points
from .kruskal import build_mst, total_weight
from .point import Point
from .profiling import profile_block
from .scheduler import EventQueue, RevealScheduler, RevealState

if TYPE_CHECKING:
    from rendering.base import Renderer


class KruskalGraph:
    def __init__(
        self,
        config: MSTConfig,
        renderer: 'Renderer',
        queue: EventQueue,
        rng: Optional[np.random.Generator] = None,
        start_reveal: bool = True
    ):
        self.config = config
        self.renderer = renderer
        self.queue = queue

        self.points: List[Point] = generate_points(
            config.num_points,
            config.spread_bound,
            rng if rng is not None else config.make_rng()
        )
        self.edges: List[Edge] = build_mst(
            self.points,
            dedup=config.dedup_edges,
            path_compression=config.path_compression
        )

        with profile_block("KruskalGraph.add_points"):
            for point in self.points:
                self.renderer.add_to_scene(self.renderer.create_point(point.position, point.color))

        self.reveal: Optional[RevealState] = None
        if start_reveal:
            self.start_reveal()

    def start_reveal(self) -> RevealState:
        """
        Schedule the edge reveal relative to the current queue time.
        Calling it again returns the reveal already in progress.
        """
        if self.reveal is None:
            with profile_block("KruskalGraph.start_reveal"):
                self.reveal = RevealScheduler(self.queue, self.config.edge_delay_ms).schedule(
                    self.edges, self.points, self._draw_edge, self._on_revealed
                )
        return self.reveal

    def _draw_edge(self, edge: Edge, p1: Point, p2: Point):
        line = self.renderer.create_edge_line(p1.position, p1.color, p2.position, p2.color)
        self.renderer.add_to_scene(line)

    def _on_revealed(self):
        self.renderer.controls.auto_rotate = True

    @property
    def total_weight(self) -> float:
        return total_weight(self.edges)

    @property
    def reveal_duration_ms(self) -> float:
        """Time from start_reveal() until the last edge is due."""
        return max(len(self.edges) - 1, 0) * self.config.edge_delay_ms
