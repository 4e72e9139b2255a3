"""
参数读取工具

以配置字典为模板，从 ROS 参数服务器逐项读取并覆盖。

参数路径使用 '/' 分隔 (如 'avoidance/obstacle_distance')，
ROS2 策略内部转换为 '.' 分隔的参数名 ('avoidance.obstacle_distance')。
"""
from typing import Dict, Any, List
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# 参数读取策略
# =============================================================================

class IParamStrategy(ABC):
    """参数读取策略接口"""

    @abstractmethod
    def get_param(self, param_path: str, default: Any) -> Any:
        """读取参数，不存在时返回 default"""
        pass

    @abstractmethod
    def has_param(self, param_path: str) -> bool:
        pass


class ROS1Strategy(IParamStrategy):
    """
    ROS1 参数读取策略

    查找顺序: 私有参数 (~param) > 全局参数 > 默认值
    """

    def __init__(self, private_namespace: bool = True):
        import rospy
        self._rospy = rospy
        self._private = private_namespace

    def get_param(self, param_path: str, default: Any) -> Any:
        if self._private and self._rospy.has_param(f"~{param_path}"):
            return self._rospy.get_param(f"~{param_path}")
        return self._rospy.get_param(param_path, default)

    def has_param(self, param_path: str) -> bool:
        if self._private and self._rospy.has_param(f"~{param_path}"):
            return True
        return self._rospy.has_param(param_path)


class ROS2Strategy(IParamStrategy):
    """
    ROS2 参数读取策略

    首次读取时以默认值声明参数，参数文件或命令行中的值会覆盖默认值。
    参数声明为动态类型: 覆盖值的类型可以与默认值不同 (如 1 与 1.0)，
    由 convert_param_type 统一转换为默认值类型。
    """

    def __init__(self, node):
        from rcl_interfaces.msg import ParameterDescriptor
        self._node = node
        self._descriptor_cls = ParameterDescriptor

    @staticmethod
    def _to_ros2_name(param_path: str) -> str:
        return param_path.replace('/', '.')

    def get_param(self, param_path: str, default: Any) -> Any:
        name = self._to_ros2_name(param_path)
        if not self._node.has_parameter(name):
            self._node.declare_parameter(
                name, default, self._descriptor_cls(dynamic_typing=True))
        return self._node.get_parameter(name).value

    def has_param(self, param_path: str) -> bool:
        return self._node.has_parameter(self._to_ros2_name(param_path))


class DictStrategy(IParamStrategy):
    """
    字典参数策略

    从 {'avoidance/linear_speed': 0.1} 形式的扁平字典读取，用于非 ROS 环境和测试。
    """

    def __init__(self, params: Dict[str, Any] = None):
        self._params = dict(params or {})

    def get_param(self, param_path: str, default: Any) -> Any:
        return self._params.get(param_path, default)

    def has_param(self, param_path: str) -> bool:
        return param_path in self._params


class DefaultStrategy(DictStrategy):
    """默认参数策略 (非 ROS 环境)，始终返回默认值"""

    def __init__(self):
        super().__init__({})


# =============================================================================
# 类型转换
# =============================================================================

def convert_param_type(ros_value: Any, default_value: Any) -> Any:
    """
    将参数值转换为与默认值一致的类型

    YAML 中的 1 和 1.0 会被解析为不同类型，这里以默认值类型为准。
    无法转换时返回默认值。

    Args:
        ros_value: 从参数服务器读取的值
        default_value: 默认值 (决定目标类型)
    """
    if default_value is None or ros_value is None:
        return default_value if ros_value is None else ros_value

    # bool 是 int 的子类，需要先判断
    if isinstance(default_value, bool):
        if isinstance(ros_value, str):
            return ros_value.strip().lower() in ('true', '1', 'yes', 'on')
        return bool(ros_value)

    if isinstance(default_value, int):
        if isinstance(ros_value, bool):
            return default_value
        if isinstance(ros_value, float) and not ros_value.is_integer():
            logger.warning(f"Parameter value {ros_value} truncated to int {int(ros_value)}")
        try:
            return int(ros_value)
        except (ValueError, TypeError):
            return default_value

    if isinstance(default_value, float):
        if isinstance(ros_value, bool):
            return default_value
        try:
            return float(ros_value)
        except (ValueError, TypeError):
            return default_value

    if isinstance(default_value, str):
        return str(ros_value)

    return ros_value


def load_params_recursive(config: Dict[str, Any], prefix: str,
                          strategy: IParamStrategy) -> List[str]:
    """
    按模板字典递归读取参数 (原地修改 config)

    Args:
        config: 配置模板，叶子节点的值作为默认值
        prefix: 当前路径前缀，如 'avoidance'
        strategy: 参数读取策略

    Returns:
        被覆盖的参数路径列表
    """
    overridden = []
    for key, value in config.items():
        param_path = f"{prefix}/{key}" if prefix else key

        if isinstance(value, dict):
            overridden.extend(load_params_recursive(value, param_path, strategy))
            continue

        new_value = convert_param_type(strategy.get_param(param_path, value), value)
        if new_value != value:
            logger.debug(f"Parameter override: {param_path} = {new_value}")
            overridden.append(param_path)
        config[key] = new_value
    return overridden


def get_strategy(node=None, ros_version: int = None) -> IParamStrategy:
    """
    按 ROS 版本选择参数读取策略

    Args:
        node: ROS2 节点，ROS1 和非 ROS 环境为 None
        ros_version: ROS 版本 (1 或 2)，None 时自动检测
    """
    if ros_version is None:
        from .ros_compat import ROS_VERSION
        ros_version = ROS_VERSION

    if ros_version == 2 and node is not None:
        return ROS2Strategy(node)
    if ros_version == 1:
        return ROS1Strategy()
    return DefaultStrategy()
