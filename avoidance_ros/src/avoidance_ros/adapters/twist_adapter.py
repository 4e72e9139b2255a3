"""
速度命令适配器

核心数据类型: reactive_controller.core.data_types.VelocityCommand
ROS 消息: geometry_msgs/Twist
"""
from typing import Any, Optional, Callable

from reactive_controller.core.data_types import VelocityCommand
from .base import IMsgConverter


class TwistAdapter(IMsgConverter):
    """
    速度命令适配器

    只填写 linear.x 和 angular.z，其余分量为 0。
    """

    def __init__(self, twist_cls: Optional[type] = None,
                 get_time_func: Optional[Callable[[], float]] = None):
        """
        Args:
            twist_cls: Twist 消息类，None 时延迟导入 geometry_msgs.msg.Twist
            get_time_func: 获取当前时间的函数
        """
        super().__init__(get_time_func)
        self._twist_cls = twist_cls

    def _new_twist(self) -> Any:
        if self._twist_cls is None:
            try:
                from geometry_msgs.msg import Twist
            except ImportError:
                raise ImportError("ROS messages not available")
            self._twist_cls = Twist
        return self._twist_cls()

    def to_ros(self, core_data: VelocityCommand) -> Any:
        """VelocityCommand → ROS Twist"""
        msg = self._new_twist()
        msg.linear.x = float(core_data.linear_x)
        msg.angular.z = float(core_data.angular_z)
        return msg

    def create_stop_cmd(self) -> Any:
        """创建零速 Twist"""
        return self.to_ros(VelocityCommand())
