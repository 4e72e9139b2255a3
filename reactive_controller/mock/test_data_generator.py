"""
测试数据生成器

生成用于测试和演示的激光快照，以及简单的独轮车运动学积分。

扫描方向约定:
    与 sensor_msgs/LaserScan 一致，索引 0 为正前方，角度逆时针递增，
    ranges[N // 6] 位于 60°，ranges[N * 5 // 6] 位于 300°。
"""
import time
import math
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from ..core.data_types import SensorSnapshot, Header


def create_test_snapshot(
    size: int = 12,
    default: float = 1.0,
    overrides: Optional[Dict[int, float]] = None,
    frame_id: str = 'base_link'
) -> SensorSnapshot:
    """
    创建测试激光快照

    Args:
        size: 距离序列长度
        default: 所有读数的默认值 (m)
        overrides: {索引: 距离} 覆盖指定读数
        frame_id: 坐标系 ID

    Returns:
        SensorSnapshot 对象

    Example:
        >>> snapshot = create_test_snapshot(12, 1.0, {0: 0.3})
        >>> snapshot.ranges[0]
        0.3
    """
    ranges = np.full(size, default, dtype=np.float64)
    for index, value in (overrides or {}).items():
        ranges[index] = value

    increment = 2.0 * math.pi / size if size > 0 else 0.0
    return SensorSnapshot(
        ranges=ranges,
        header=Header(stamp=time.time(), frame_id=frame_id),
        angle_min=0.0,
        angle_max=increment * (size - 1) if size > 0 else 0.0,
        angle_increment=increment,
    )


def _ray_box_distance(x: float, y: float, angles: np.ndarray,
                      half_size: float) -> np.ndarray:
    """从方形房间内部一点沿各方向到墙壁的距离"""
    dx = np.cos(angles)
    dy = np.sin(angles)

    with np.errstate(divide='ignore', invalid='ignore'):
        tx = np.where(dx > 0, (half_size - x) / dx,
                      np.where(dx < 0, (-half_size - x) / dx, np.inf))
        ty = np.where(dy > 0, (half_size - y) / dy,
                      np.where(dy < 0, (-half_size - y) / dy, np.inf))
    return np.minimum(tx, ty)


def _ray_circle_distance(x: float, y: float, angles: np.ndarray,
                         cx: float, cy: float, radius: float) -> np.ndarray:
    """沿各方向到圆形障碍物的距离，未命中为 inf"""
    dx = np.cos(angles)
    dy = np.sin(angles)
    ox = x - cx
    oy = y - cy

    # |o + t*d|^2 = r^2, |d| = 1
    b = ox * dx + oy * dy
    c = ox * ox + oy * oy - radius * radius
    disc = b * b - c

    dist = np.full(angles.shape, np.inf)
    hit = disc >= 0
    sqrt_disc = np.sqrt(np.where(hit, disc, 0.0))
    t_near = -b - sqrt_disc
    t_far = -b + sqrt_disc
    t = np.where(t_near > 0, t_near, t_far)
    hit &= t > 0
    dist[hit] = t[hit]
    return dist


def create_room_scan(
    x: float = 0.0,
    y: float = 0.0,
    theta: float = 0.0,
    half_size: float = 2.0,
    num_ranges: int = 360,
    obstacles: Sequence[Tuple[float, float, float]] = (),
    range_max: float = 10.0,
    noise_std: float = 0.0,
    rng: Optional[np.random.Generator] = None,
    frame_id: str = 'base_link'
) -> SensorSnapshot:
    """
    创建方形房间内的合成激光扫描

    Args:
        x, y: 机器人位置 (m)，房间中心为原点
        theta: 机器人朝向 (rad)
        half_size: 房间半边长 (m)
        num_ranges: 距离序列长度
        obstacles: 圆形障碍物列表 [(cx, cy, radius), ...]
        range_max: 最大量程，超出的读数置为 inf
        noise_std: 高斯噪声标准差 (m)
        rng: 随机数生成器，None 时使用 np.random.default_rng()
        frame_id: 坐标系 ID

    Returns:
        SensorSnapshot 对象
    """
    increment = 2.0 * math.pi / num_ranges
    angles = theta + increment * np.arange(num_ranges)

    ranges = _ray_box_distance(x, y, angles, half_size)
    for cx, cy, radius in obstacles:
        ranges = np.minimum(ranges, _ray_circle_distance(x, y, angles, cx, cy, radius))

    if noise_std > 0:
        rng = rng or np.random.default_rng()
        ranges = ranges + rng.normal(0.0, noise_std, size=ranges.shape)
        ranges = np.maximum(ranges, 0.0)

    ranges = np.where(ranges > range_max, np.inf, ranges)

    return SensorSnapshot(
        ranges=ranges,
        header=Header(stamp=time.time(), frame_id=frame_id),
        angle_min=0.0,
        angle_max=increment * (num_ranges - 1),
        angle_increment=increment,
        range_min=0.0,
        range_max=range_max,
    )


def step_unicycle(x: float, y: float, theta: float,
                  linear_x: float, angular_z: float,
                  dt: float) -> Tuple[float, float, float]:
    """独轮车模型前向积分一步"""
    x += linear_x * math.cos(theta) * dt
    y += linear_x * math.sin(theta) * dt
    theta = math.atan2(math.sin(theta + angular_z * dt),
                       math.cos(theta + angular_z * dt))
    return x, y, theta
