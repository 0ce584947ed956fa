"""
Kruskal minimum spanning tree over a random 3D point cloud,
revealed edge by edge in acceptance order.
"""

from .vector import Vector3D
from .point import Point
from .edge import Edge
from .generator import generate_points
from .union_find import DisjointSet
from .kruskal import MSTBuilder, build_mst, total_weight, is_spanning_tree
from .scheduler import (
    EventQueue,
    RevealScheduler,
    RevealState,
    VirtualClock,
    WallClock
)
from .graph import KruskalGraph

__all__ = [
    'Vector3D',
    'Point',
    'Edge',
    'generate_points',
    'DisjointSet',
    'MSTBuilder',
    'build_mst',
    'total_weight',
    'is_spanning_tree',
    'EventQueue',
    'RevealScheduler',
    'RevealState',
    'VirtualClock',
    'WallClock',
    'KruskalGraph'
]
