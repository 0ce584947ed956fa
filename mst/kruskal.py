"""
MSTBuilder - Kruskal's algorithm over the complete graph of a point cloud.

Every pair of points is a candidate edge weighted by Euclidean distance.
Candidates are visited in ascending distance order and an edge is accepted
whenever its endpoints still belong to different sets of the disjoint-set
forest. The accepted edges, in acceptance order, form the spanning tree and
drive the reveal animation, so they are never re-sorted.
"""

from operator import attrgetter
from typing import Callable, List, Optional, Sequence

import numpy as np
from scipy.spatial.distance import pdist, squareform

from .edge import Edge
from .generator import positions_array
from .point import Point
from .profiling import profile
from .union_find import DisjointSet


class MSTBuilder:
    def __init__(
        self,
        points: Sequence[Point],
        dedup: bool = True,
        path_compression: bool = False,
        verbose: bool = False
    ):
        self.points: List[Point] = list(points)
        self.dedup = dedup
        self.verbose = verbose
        self.forest = DisjointSet(len(self.points), path_compression=path_compression)
        self.candidates: List[Edge] = []
        self.selected: List[Edge] = []
        self.num_candidates = 0
        self._cursor = 0

        self._initialize()

    def _initialize(self):
        self.candidates = self._sort_candidates(self._generate_candidates())
        self.num_candidates = len(self.candidates)

        if self.verbose:
            print(f"Initialized MST builder:")
            print(f"  Points: {len(self.points)}")
            print(f"  Candidate edges: {self.num_candidates} "
                  f"({'unordered pairs' if self.dedup else 'both directions'})")

    @profile
    def _generate_candidates(self) -> List[Edge]:
        """
        Edges of the complete graph, in row-major (i, j) order.
        dedup=False also emits (j, i), with the exact same distance as (i, j).
        """
        n = len(self.points)
        if n < 2:
            return []

        positions = positions_array(self.points)
        condensed = pdist(positions)

        if self.dedup:
            src, dst = np.triu_indices(n, k=1)
            distances = condensed
        else:
            matrix = squareform(condensed)
            src, dst = np.nonzero(~np.eye(n, dtype=bool))
            distances = matrix[src, dst]

        return [
            Edge(int(i), int(j), float(d))
            for i, j, d in zip(src, dst, distances)
        ]

    @profile
    def _sort_candidates(self, candidates: List[Edge]) -> List[Edge]:
        # sorted() is stable: equal distances keep generation order
        return sorted(candidates, key=attrgetter('distance'))

    @property
    def target_edges(self) -> int:
        return max(len(self.points) - 1, 0)

    @property
    def is_complete(self) -> bool:
        return (
            len(self.selected) >= self.target_edges
            or self._cursor >= len(self.candidates)
        )

    def step(self) -> Optional[Edge]:
        """
        Examine the next candidate.
        Returns the edge if it was accepted, None if it closed a cycle
        or the build is already complete.
        """
        if self.is_complete:
            return None

        edge = self.candidates[self._cursor]
        self._cursor += 1

        if not self.forest.union(edge.src, edge.dst):
            return None

        self.selected.append(edge)
        return edge

    @profile
    def build(self, callback: Optional[Callable[['MSTBuilder', Edge], None]] = None) -> List[Edge]:
        """
        Run the selection loop until N-1 edges are accepted.
        Optional callback is called after each accepted edge with (builder, edge).
        Returns the accepted edges in acceptance order.
        """
        while not self.is_complete:
            edge = self.step()
            if edge is not None and callback:
                callback(self, edge)

        examined = self._cursor
        # Candidates are only needed during selection
        self.candidates = []

        if self.verbose:
            print(f"MST complete after examining {examined}/{self.num_candidates} candidates")
            print(f"  Edges: {len(self.selected)}")
            print(f"  Total weight: {total_weight(self.selected):.3f}")

        return list(self.selected)


def build_mst(
    points: Sequence[Point],
    dedup: bool = True,
    path_compression: bool = False,
    verbose: bool = False
) -> List[Edge]:
    """Minimum spanning tree edges of the complete graph over points, in acceptance order."""
    return MSTBuilder(points, dedup=dedup, path_compression=path_compression, verbose=verbose).build()


def total_weight(edges: Sequence[Edge]) -> float:
    return float(sum(e.distance for e in edges))


def is_spanning_tree(edges: Sequence[Edge], num_points: int) -> bool:
    """True if edges are exactly num_points - 1 acyclic edges joining every point."""
    if len(edges) != max(num_points - 1, 0):
        return False

    forest = DisjointSet(num_points)
    for edge in edges:
        if not forest.union(edge.src, edge.dst):
            return False

    return forest.component_count <= 1
