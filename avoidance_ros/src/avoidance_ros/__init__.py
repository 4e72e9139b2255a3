"""
avoidance_ros - ROS 胶水层

将 reactive_controller 纯算法库接入 ROS1/ROS2:
订阅 LaserScan，按固定频率运行控制周期，发布 Twist。

模块结构:
- node/: 节点层 (ROS1/ROS2 节点，共享基类)
- adapters/: 适配器层 (LaserScan/Twist 消息转换)
- utils/: 工具层 (参数加载、错误处理、ROS 兼容)
"""

__version__ = "1.0.0"
