"""避障策略模块"""
from .readings import extract_readings, direction_indices
from .fixed_threshold import FixedThresholdPolicy, detect_obstacles, compute_command

__all__ = [
    'extract_readings',
    'direction_indices',
    'FixedThresholdPolicy',
    'detect_obstacles',
    'compute_command',
]
