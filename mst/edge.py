"""
Edge class - a weighted connection between two points of the cloud.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Edge:
    src: int
    dst: int
    distance: float

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.src, self.dst)

    @property
    def key(self) -> Tuple[int, int]:
        """Direction-free identity, (i, j) and (j, i) share it."""
        return (min(self.src, self.dst), max(self.src, self.dst))

    def __repr__(self) -> str:
        return f"Edge({self.src} -> {self.dst}, d={self.distance:.3f})"
