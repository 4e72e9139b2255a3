"""
数据类型定义

本模块定义了避障控制器使用的核心数据类型。

坐标系说明:
===========

base_link (机体坐标系)
   - 原点在机器人中心
   - X轴朝前，Y轴朝左，Z轴朝上
   - 激光快照和速度命令都在此坐标系下

激光索引约定:
=============

距离序列均匀覆盖 360°，索引 0 为正前方。
控制器按比例索引取读数（而不是按角度查找）:
   - front = ranges[0]
   - left  = ranges[N * 5 // 6]
   - right = ranges[N // 6]

数据流:
   SensorSnapshot → DirectionalReadings → ObstacleFlags → VelocityCommand

关键数据类型:
   - SensorSnapshot: 一帧激光扫描 (LaserScan 兼容)，构造后不可变
   - VelocityCommand: 控制输出，线速度 + 偏航角速度
"""
from dataclasses import dataclass, field
from typing import Dict, Any, Sequence, Union
import math

import numpy as np


# 模拟 ROS Header
@dataclass
class Header:
    """ROS Header 模拟"""
    stamp: float = 0.0  # 时间戳 (秒)
    frame_id: str = ""
    seq: int = 0


@dataclass(frozen=True, eq=False)
class SensorSnapshot:
    """激光快照 (sensor_msgs/LaserScan 兼容)

    Attributes:
        ranges: 距离序列 (只读 numpy 数组)，索引 0 为正前方
        header: 消息头
        angle_min: 起始角度 (rad)
        angle_max: 终止角度 (rad)
        angle_increment: 角度分辨率 (rad)
        range_min: 最小有效距离 (m)
        range_max: 最大有效距离 (m)

    Note:
        无效读数 (inf/nan/超量程) 原样保留，不做过滤。
        ranges 在构造时被复制并设为只读，外部修改原序列不影响快照。
    """
    ranges: Union[Sequence[float], np.ndarray]
    header: Header = field(default_factory=Header)
    angle_min: float = 0.0
    angle_max: float = 2.0 * math.pi
    angle_increment: float = 0.0
    range_min: float = 0.0
    range_max: float = float('inf')

    def __post_init__(self):
        ranges = np.array(self.ranges, dtype=np.float64).reshape(-1)
        ranges.setflags(write=False)
        # frozen dataclass 只能通过 object.__setattr__ 写入
        object.__setattr__(self, 'ranges', ranges)

    def __len__(self) -> int:
        return int(self.ranges.shape[0])

    @property
    def size(self) -> int:
        """距离序列长度 N"""
        return len(self)

    def valid_mask(self) -> np.ndarray:
        """有效读数掩码 (有限且在 [range_min, range_max] 内)，控制器诊断中统计有效读数个数"""
        with np.errstate(invalid='ignore'):
            return (np.isfinite(self.ranges)
                    & (self.ranges >= self.range_min)
                    & (self.ranges <= self.range_max))


@dataclass
class DirectionalReadings:
    """单个控制周期提取的三个方向读数 (m)"""
    front: float
    left: float
    right: float

    def to_dict(self) -> Dict[str, float]:
        return {'front': self.front, 'left': self.left, 'right': self.right}


@dataclass
class ObstacleFlags:
    """三个方向是否存在障碍物"""
    front: bool = False
    left: bool = False
    right: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {'front': self.front, 'left': self.left, 'right': self.right}


@dataclass
class VelocityCommand:
    """速度命令

    Attributes:
        linear_x: 前进线速度 (m/s)，对应 geometry_msgs/Twist linear.x
        angular_z: 偏航角速度 (rad/s)，对应 angular.z，左转为正
    """
    linear_x: float = 0.0
    angular_z: float = 0.0

    def copy(self) -> 'VelocityCommand':
        return VelocityCommand(linear_x=self.linear_x, angular_z=self.angular_z)

    def to_dict(self) -> Dict[str, Any]:
        return {'linear_x': self.linear_x, 'angular_z': self.angular_z}
