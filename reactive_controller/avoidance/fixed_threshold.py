"""
固定阈值避障策略

反射式策略，不做规划、不做滤波、不调速:

    linear  = linear_speed   若前方无障碍，否则 0
    angular = +angular_speed 若左侧有障碍
              -angular_speed 若右侧有障碍
              两侧都有障碍时正负抵消，角速度为 0

障碍物判定: 读数严格小于 obstacle_distance。
nan 与任何数比较都为 False，inf 大于阈值，因此无回波读数都视为无障碍。
"""
from typing import Dict, Any, Optional

from ..core.data_types import DirectionalReadings, ObstacleFlags, VelocityCommand
from ..core.interfaces import IAvoidancePolicy
from ..config.avoidance_config import AVOIDANCE_CONFIG


def detect_obstacles(readings: DirectionalReadings,
                     obstacle_distance: float) -> ObstacleFlags:
    """判定三个方向是否被阻挡"""
    return ObstacleFlags(
        front=readings.front < obstacle_distance,
        left=readings.left < obstacle_distance,
        right=readings.right < obstacle_distance,
    )


def compute_command(obstacles: ObstacleFlags, linear_speed: float,
                    angular_speed: float) -> VelocityCommand:
    """根据障碍物判定结果生成速度命令"""
    cmd = VelocityCommand()

    if not obstacles.front:
        cmd.linear_x = linear_speed

    # 叠加式转向，两侧同时阻挡时相互抵消
    if obstacles.left:
        cmd.angular_z += angular_speed
    if obstacles.right:
        cmd.angular_z -= angular_speed

    return cmd


class FixedThresholdPolicy(IAvoidancePolicy):
    """
    固定阈值避障策略

    Attributes:
        obstacle_distance: 障碍物距离阈值 (m)
        linear_speed: 前进线速度 (m/s)
        angular_speed: 转向角速度 (rad/s)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            config: 完整配置字典，读取其中的 'avoidance' 部分；
                    缺省的键使用 AVOIDANCE_CONFIG 中的默认值
        """
        avoidance_config = (config or {}).get('avoidance', {})
        self.obstacle_distance = float(avoidance_config.get(
            'obstacle_distance', AVOIDANCE_CONFIG['obstacle_distance']))
        self.linear_speed = float(avoidance_config.get(
            'linear_speed', AVOIDANCE_CONFIG['linear_speed']))
        self.angular_speed = float(avoidance_config.get(
            'angular_speed', AVOIDANCE_CONFIG['angular_speed']))

    def detect(self, readings: DirectionalReadings) -> ObstacleFlags:
        return detect_obstacles(readings, self.obstacle_distance)

    def decide(self, obstacles: ObstacleFlags) -> VelocityCommand:
        return compute_command(obstacles, self.linear_speed, self.angular_speed)

    def __repr__(self) -> str:
        return (f"FixedThresholdPolicy(obstacle_distance={self.obstacle_distance}, "
                f"linear_speed={self.linear_speed}, angular_speed={self.angular_speed})")
