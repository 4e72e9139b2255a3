"""
激光扫描适配器

核心数据类型: reactive_controller.core.data_types.SensorSnapshot
ROS 消息: sensor_msgs/LaserScan
"""
from typing import Any, Optional, Callable

from reactive_controller.core.data_types import SensorSnapshot, Header
from .base import IMsgConverter


class ScanAdapter(IMsgConverter):
    """
    激光扫描适配器

    LaserScan 原样转换为 SensorSnapshot，不过滤 inf/nan，也不检查长度:
    长度不足的扫描由控制器在控制周期内跳过。
    """

    def __init__(self, default_frame_id: str = 'base_link',
                 get_time_func: Optional[Callable[[], float]] = None):
        super().__init__(get_time_func)
        self._default_frame_id = default_frame_id

    def to_core(self, ros_msg: Any) -> SensorSnapshot:
        """ROS LaserScan → SensorSnapshot"""
        stamp = self._ros_time_to_sec(ros_msg.header.stamp)
        if stamp <= 0:
            stamp = self._get_current_time()

        return SensorSnapshot(
            ranges=ros_msg.ranges,
            header=Header(
                stamp=stamp,
                frame_id=ros_msg.header.frame_id or self._default_frame_id,
            ),
            angle_min=float(ros_msg.angle_min),
            angle_max=float(ros_msg.angle_max),
            angle_increment=float(ros_msg.angle_increment),
            range_min=float(ros_msg.range_min),
            range_max=float(ros_msg.range_max),
        )
