"""
反应式避障控制器 (Reactive Controller)

版本: v1.0.0

基于激光扫描的反射式避障控制器，不依赖地图和规划。

特性:
- 三方向读数: 按比例索引取前/左/右距离
- 固定阈值判定: 读数小于阈值即视为障碍物
- 叠加式转向: 左侧阻挡右转，右侧阻挡左转，两侧阻挡时不转向
- 与传输层解耦: 只暴露 on_snapshot / run_control_cycle 两个入口
- ROS 兼容: ROS1/ROS2 胶水代码位于 avoidance_ros 包

使用示例:
    from reactive_controller import ReactiveController, SensorSnapshot

    controller = ReactiveController()
    controller.on_snapshot(SensorSnapshot(ranges))
    cmd = controller.run_control_cycle()
"""

__version__ = "1.0.0"
__author__ = "Reactive Avoidance Team"

# 导出主要类和配置
from .manager.reactive_controller import ReactiveController
from .config.default_config import DEFAULT_CONFIG, get_config_value, validate_config
from .config.loader import load_config
from .core.enums import ControllerState
from .core.data_types import (
    Header, SensorSnapshot, DirectionalReadings, ObstacleFlags, VelocityCommand,
)
from .core.exceptions import (
    ControllerError, ConfigurationError, ConfigValidationError,
    ControllerRuntimeError, MalformedSnapshotError,
)
from .core.interfaces import ILifecycleComponent, IAvoidancePolicy
from .avoidance.fixed_threshold import FixedThresholdPolicy
from .avoidance.readings import extract_readings

__all__ = [
    # 版本
    '__version__',
    # 控制器
    'ReactiveController',
    # 配置
    'DEFAULT_CONFIG', 'get_config_value', 'validate_config', 'load_config',
    # 枚举
    'ControllerState',
    # 数据类型
    'Header', 'SensorSnapshot', 'DirectionalReadings', 'ObstacleFlags',
    'VelocityCommand',
    # 异常
    'ControllerError', 'ConfigurationError', 'ConfigValidationError',
    'ControllerRuntimeError', 'MalformedSnapshotError',
    # 接口与策略
    'ILifecycleComponent', 'IAvoidancePolicy',
    'FixedThresholdPolicy', 'extract_readings',
]
