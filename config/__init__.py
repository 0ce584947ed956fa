"""
Configuration module.
"""

from .pipeline import PipelineConfig, load_config, save_config
from .mst_config import MSTConfig
from .render_config import MSTRenderConfig, BACKGROUNDS

__all__ = [
    'PipelineConfig',
    'load_config',
    'save_config',
    'MSTConfig',
    'MSTRenderConfig',
    'BACKGROUNDS'
]
