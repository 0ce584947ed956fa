"""
Unified configuration for the MST visualizer.

This is the single source of truth for the whole run:
point generation, MST construction, reveal timing and rendering.
"""

from dataclasses import dataclass, asdict, fields
from typing import Optional
from pathlib import Path
import json


@dataclass
class PipelineConfig:
    """
    Unified configuration for the MST visualizer.
    All output paths are derived from output_base and run_name.
    """

    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'
    run_name: str = 'kruskal'

    # ==================== POINT SETTINGS ====================
    num_points: int = 64
    size_multiplier: float = 2
    spread_bound: Optional[float] = None

    # ==================== MST SETTINGS ====================
    dedup_edges: bool = True
    path_compression: bool = False

    # ==================== REVEAL SETTINGS ====================
    edge_delay_ms: float = 16.0

    # ==================== RENDERING SETTINGS ====================
    render_size: float = 10.0
    render_dpi: int = 100
    render_fps: int = 60
    point_size: float = 30.0
    line_width: float = 1.2
    line_segments: int = 8
    background: Optional[str] = None
    auto_rotate_speed: float = 12.0
    enable_damping: bool = True
    damping_factor: float = 0.05
    initial_elevation: float = 20.0
    orbit_seconds: float = 6.0  # extra frames after the reveal when saving a GIF

    # ==================== MISC ====================
    random_seed: Optional[int] = None
    profile: bool = False

    # ==================== DERIVED PATHS ====================
    @property
    def mst_output_dir(self) -> Path:
        return Path(self.output_base) / 'mst'

    @property
    def gif_path(self) -> Path:
        return self.mst_output_dir / f'{self.run_name}_reveal.gif'

    @property
    def snapshot_path(self) -> Path:
        return self.mst_output_dir / f'{self.run_name}_tree.png'

    @property
    def stats_path(self) -> Path:
        return self.mst_output_dir / f'{self.run_name}_stats.png'

    # ==================== DIRECTORY CREATION ====================
    def create_output_dirs(self):
        """Create all output directories."""
        self.mst_output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/pipeline.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(PipelineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        print(f"Warning: ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    return PipelineConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: PipelineConfig, path: str = 'config/pipeline.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)

    print(f"Saved config to {config_path}")
