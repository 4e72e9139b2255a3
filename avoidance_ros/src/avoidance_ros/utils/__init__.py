"""
工具层 - 参数加载、错误处理与 ROS 兼容
"""
from .param_loader import ParamLoader, TOPICS_DEFAULTS, QUEUE_DEFAULTS
from .param_utils import (
    IParamStrategy, ROS1Strategy, ROS2Strategy, DictStrategy, DefaultStrategy,
    get_strategy, load_params_recursive, convert_param_type
)
from .error_handler import ErrorHandler
from .ros_compat import (
    ROS_VERSION, ROS_AVAILABLE,
    get_time_sec, ros_time_to_sec,
    log_info, log_warn, log_error, log_warn_throttle,
)

__all__ = [
    # 参数加载
    'ParamLoader',
    'TOPICS_DEFAULTS',
    'QUEUE_DEFAULTS',
    # 参数工具
    'IParamStrategy',
    'ROS1Strategy',
    'ROS2Strategy',
    'DictStrategy',
    'DefaultStrategy',
    'get_strategy',
    'load_params_recursive',
    'convert_param_type',
    # 错误处理
    'ErrorHandler',
    # ROS 兼容层
    'ROS_VERSION',
    'ROS_AVAILABLE',
    'get_time_sec',
    'ros_time_to_sec',
    'log_info',
    'log_warn',
    'log_error',
    'log_warn_throttle',
]
