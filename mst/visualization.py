"""
Static visualization utilities for a finished MST.
"""

from collections import Counter
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .edge import Edge
from .generator import positions_array
from .point import Point


def visualize_mst(
    points: List[Point],
    edges: List[Edge],
    edge_color: str = 'black',
    edge_width: float = 1.0,
    point_size: float = 20.0,
    figsize: Tuple[int, int] = (10, 10),
    save_path: Optional[str] = None,
    show: bool = True
):
    """Plot all points and MST edges at once."""
    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(projection='3d')

    xyz = positions_array(points)
    if len(points) > 0:
        ax.scatter(
            xyz[:, 0], xyz[:, 1], xyz[:, 2],
            c=[p.rgb for p in points],
            s=point_size,
            depthshade=False
        )

    if edges:
        segments = [[xyz[e.src], xyz[e.dst]] for e in edges]
        ax.add_collection3d(Line3DCollection(segments, colors=edge_color, linewidths=edge_width))

    if len(points) > 0:
        bound = float(np.abs(xyz).max()) or 1.0
        ax.set_xlim(-bound, bound)
        ax.set_ylim(-bound, bound)
        ax.set_zlim(-bound, bound)
    ax.set_box_aspect((1, 1, 1))
    ax.set_title(f"{len(points)} points, {len(edges)} edges")

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def degree_counts(edges: List[Edge], num_points: int) -> List[int]:
    """Number of MST edges touching each point."""
    counts = Counter()
    for e in edges:
        counts[e.src] += 1
        counts[e.dst] += 1
    return [counts[i] for i in range(num_points)]


def plot_mst_statistics(
    edges: List[Edge],
    num_points: int,
    save_path: Optional[str] = None,
    show: bool = True
):
    """Plot statistics about the spanning tree."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    lengths = [e.distance for e in edges]
    axes[0].hist(lengths, bins=30, color='steelblue', edgecolor='black')
    axes[0].set_xlabel('Edge Length')
    axes[0].set_ylabel('Count')
    axes[0].set_title('Edge Length Distribution')

    degrees = degree_counts(edges, num_points)
    max_degree = max(degrees) if degrees else 0
    per_degree = [degrees.count(d) for d in range(max_degree + 1)]
    axes[1].bar(range(max_degree + 1), per_degree, color='darkorange', edgecolor='black')
    axes[1].set_xlabel('Node Degree')
    axes[1].set_ylabel('Node Count')
    axes[1].set_title('Nodes per Degree')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
