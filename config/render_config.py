"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# name -> (figure color, pane color)
BACKGROUNDS = {
    'corona': ('#1b0f24', '#3a1f3d'),
    'redeclipse': ('#120606', '#3b0d0d'),
}


@dataclass
class MSTRenderConfig:
    figsize: Tuple[float, float] = (10.0, 10.0)
    dpi: int = 100
    fps: int = 60

    point_size: float = 30.0
    line_width: float = 1.2
    line_segments: int = 8  # sub-segments per edge for the color gradient

    background: Optional[str] = None  # None = random pick from BACKGROUNDS

    auto_rotate_speed: float = 12.0  # degrees per second (one orbit in 30s)
    enable_damping: bool = True
    damping_factor: float = 0.05
    initial_elevation: float = 20.0

    def __post_init__(self):
        if self.background is not None and self.background not in BACKGROUNDS:
            raise KeyError(
                f"Unknown background '{self.background}', "
                f"choose one of {sorted(BACKGROUNDS)}"
            )
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
        if self.line_segments < 1:
            raise ValueError(f"line_segments must be >= 1, got {self.line_segments}")

    @property
    def frame_interval_ms(self) -> float:
        return 1000.0 / self.fps

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'MSTRenderConfig':
        """Create Render Config from PipelineConfig."""
        return cls(
            figsize=(pipeline_config.render_size, pipeline_config.render_size),
            dpi=pipeline_config.render_dpi,
            fps=pipeline_config.render_fps,
            point_size=pipeline_config.point_size,
            line_width=pipeline_config.line_width,
            line_segments=pipeline_config.line_segments,
            background=pipeline_config.background,
            auto_rotate_speed=pipeline_config.auto_rotate_speed,
            enable_damping=pipeline_config.enable_damping,
            damping_factor=pipeline_config.damping_factor,
            initial_elevation=pipeline_config.initial_elevation,
        )
