"""
方向读数提取

按比例索引从距离序列中取出前/左/右三个读数。

索引约定 (N = 距离序列长度):
    front = ranges[0]
    left  = ranges[N * 5 // 6]   (约 300°)
    right = ranges[N // 6]       (约 60°)

使用比例索引，不按 angle_min/angle_increment 做角度查找。
"""
from typing import Sequence, Tuple, Union

import numpy as np

from ..core.data_types import DirectionalReadings, SensorSnapshot
from ..core.exceptions import MalformedSnapshotError


def direction_indices(size: int) -> Tuple[int, int, int]:
    """
    计算前/左/右读数的索引

    Args:
        size: 距离序列长度 N (>= 1)

    Returns:
        (front_idx, left_idx, right_idx)
    """
    return 0, (size * 5) // 6, size // 6


def extract_readings(ranges: Union[SensorSnapshot, Sequence[float], np.ndarray],
                     min_ranges: int = 1) -> DirectionalReadings:
    """
    提取三方向读数

    Args:
        ranges: SensorSnapshot 或距离序列
        min_ranges: 最小序列长度，不足时无法安全索引

    Returns:
        DirectionalReadings，读数原样返回 (inf/nan 不做处理)

    Raises:
        MalformedSnapshotError: 序列长度小于 min_ranges (至少为 1)
    """
    if isinstance(ranges, SensorSnapshot):
        ranges = ranges.ranges

    size = len(ranges)
    required = max(int(min_ranges), 1)
    if size < required:
        raise MalformedSnapshotError(size, required)

    front_idx, left_idx, right_idx = direction_indices(size)
    return DirectionalReadings(
        front=float(ranges[front_idx]),
        left=float(ranges[left_idx]),
        right=float(ranges[right_idx]),
    )
