"""枚举定义"""
from enum import IntEnum


class ControllerState(IntEnum):
    """控制器状态枚举"""
    WAITING_FOR_DATA = 0     # 尚未收到任何激光数据
    ACTIVE = 1               # 已有激光数据，每个周期输出速度命令

