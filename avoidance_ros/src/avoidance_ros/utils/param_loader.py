"""
参数加载器

以 reactive_controller 的 DEFAULT_CONFIG 为模板，从 ROS 参数服务器加载配置:
1. 深拷贝 DEFAULT_CONFIG
2. 逐项读取 ROS 参数，存在则覆盖默认值
3. 使用核心库的 validate_config 统一验证

话题和队列深度是 ROS 层特有的配置，不进入 DEFAULT_CONFIG，
由 get_topics() / get_queue_config() 单独读取。
"""
from typing import Dict, Any
import copy
import logging

from reactive_controller.config.default_config import DEFAULT_CONFIG, validate_config

from .param_utils import get_strategy, load_params_recursive, convert_param_type

logger = logging.getLogger(__name__)


# =============================================================================
# 话题配置 (仅 ROS 层使用)
#
# 默认使用相对话题名，部署时通过 remap 或参数接到实际话题
# =============================================================================
TOPICS_DEFAULTS = {
    'scan': 'input_scan',       # 输入: sensor_msgs/LaserScan
    'cmd_vel': 'output_vel',    # 输出: geometry_msgs/Twist
}

# =============================================================================
# 队列深度 (仅 ROS 层使用)
# =============================================================================
QUEUE_DEFAULTS = {
    'scan_queue_size': 100,
    'cmd_queue_size': 100,
}


class ParamLoader:
    """
    参数加载器

    使用示例:
        # ROS1
        config = ParamLoader.load(None)

        # ROS2
        config = ParamLoader.load(node)
        topics = ParamLoader.get_topics(node)
    """

    @staticmethod
    def load(node=None, validate: bool = True, strict: bool = True) -> Dict[str, Any]:
        """
        加载参数

        Args:
            node: ROS2 节点 (ROS2) 或 None (ROS1/非 ROS)
            validate: 是否进行配置验证
            strict: 严格模式，ERROR 级别也阻止启动 (FATAL 总是阻止)

        Returns:
            合并后的配置字典

        Raises:
            ConfigValidationError: 配置验证失败
        """
        config = copy.deepcopy(DEFAULT_CONFIG)
        strategy = get_strategy(node)

        overridden = load_params_recursive(config, '', strategy)
        if overridden:
            logger.info(f"Parameters overridden from ROS: {', '.join(overridden)}")

        if validate:
            validate_config(config, raise_on_error=True, strict=strict)

        avoidance = config['avoidance']
        logger.info(
            f"Loaded config: ctrl_freq={config['system']['ctrl_freq']}Hz, "
            f"obstacle_distance={avoidance['obstacle_distance']}, "
            f"linear_speed={avoidance['linear_speed']}, "
            f"angular_speed={avoidance['angular_speed']}"
        )
        return config

    @staticmethod
    def get_topics(node=None) -> Dict[str, str]:
        """获取话题配置 (参数前缀 topics/)"""
        strategy = get_strategy(node)
        return {
            key: str(strategy.get_param(f"topics/{key}", default))
            for key, default in TOPICS_DEFAULTS.items()
        }

    @staticmethod
    def get_queue_config(node=None) -> Dict[str, int]:
        """获取订阅/发布队列深度 (参数前缀 queue/)"""
        strategy = get_strategy(node)
        config = {}
        for key, default in QUEUE_DEFAULTS.items():
            value = convert_param_type(strategy.get_param(f"queue/{key}", default), default)
            config[key] = value if value > 0 else default
        return config
