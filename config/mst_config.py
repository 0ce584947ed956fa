"""
Configuration for the Kruskal MST builder.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class MSTConfig:
    num_points: int = 64
    size_multiplier: float = 2
    spread_bound: Optional[float] = None  # None = num_points * size_multiplier

    edge_delay_ms: float = 16.0  # Delay between two consecutive edge reveals

    # Keep only i < j candidates. False = both (i, j) and (j, i)
    dedup_edges: bool = True
    path_compression: bool = False

    output_dir: str = 'outputs/mst'
    random_seed: Optional[int] = None
    profile: bool = False

    def __post_init__(self):
        if self.num_points < 0:
            raise ValueError(f"num_points must be >= 0, got {self.num_points}")
        if self.spread_bound is None:
            self.spread_bound = self.num_points * self.size_multiplier
        if self.spread_bound < 0:
            raise ValueError(f"spread_bound must be >= 0, got {self.spread_bound}")
        if self.edge_delay_ms < 0:
            raise ValueError(f"edge_delay_ms must be >= 0, got {self.edge_delay_ms}")

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.random_seed)

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'MSTConfig':
        """Create MST Config from PipelineConfig."""
        return cls(
            num_points=pipeline_config.num_points,
            size_multiplier=pipeline_config.size_multiplier,
            spread_bound=pipeline_config.spread_bound,
            edge_delay_ms=pipeline_config.edge_delay_ms,
            dedup_edges=pipeline_config.dedup_edges,
            path_compression=pipeline_config.path_compression,
            output_dir=str(pipeline_config.mst_output_dir),
            random_seed=pipeline_config.random_seed,
            profile=pipeline_config.profile,
        )
