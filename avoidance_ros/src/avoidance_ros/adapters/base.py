"""
适配器基类接口

支持 ROS1 和 ROS2 双版本。
"""
from abc import ABC
from typing import Any, Optional, Callable
import time as _time

from ..utils.ros_compat import ros_time_to_sec


class IMsgConverter(ABC):
    """
    消息转换器接口

    定义 ROS 消息与 reactive_controller 数据类型之间的转换。
    输入方向的适配器 (激光) 重写 to_core，输出方向的适配器 (速度) 重写 to_ros。
    """

    def __init__(self, get_time_func: Optional[Callable[[], float]] = None):
        """
        Args:
            get_time_func: 获取当前时间的函数，用于支持仿真时间。
                          None 时使用系统时间
        """
        self._get_time_func = get_time_func

    def to_core(self, ros_msg: Any) -> Any:
        """ROS 消息 → reactive_controller 数据类型"""
        raise NotImplementedError(f"{self.__class__.__name__} does not support to_core()")

    def to_ros(self, core_data: Any) -> Any:
        """reactive_controller 数据类型 → ROS 消息"""
        raise NotImplementedError(f"{self.__class__.__name__} does not support to_ros()")

    def _get_current_time(self) -> float:
        """获取当前时间（秒），仿真时间未初始化 (返回 0) 时回退到系统时间"""
        if self._get_time_func is not None:
            t = self._get_time_func()
            if t > 0:
                return t
        return _time.time()

    def _ros_time_to_sec(self, stamp) -> float:
        return ros_time_to_sec(stamp)
