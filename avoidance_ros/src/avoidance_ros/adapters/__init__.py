"""
适配器层 - ROS 消息与 reactive_controller 数据类型的双向转换

适配器列表:
- ScanAdapter: sensor_msgs/LaserScan <-> SensorSnapshot
- TwistAdapter: geometry_msgs/Twist <-> VelocityCommand
"""
from .base import IMsgConverter
from .scan_adapter import ScanAdapter
from .twist_adapter import TwistAdapter

__all__ = [
    'IMsgConverter',
    'ScanAdapter',
    'TwistAdapter',
]
