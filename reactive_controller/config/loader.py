"""配置文件加载

以 DEFAULT_CONFIG 为模板，叠加 YAML 配置文件和覆盖字典，最后统一验证。

YAML 文件格式与 DEFAULT_CONFIG 结构一致，只需写出要修改的键:

    avoidance:
      obstacle_distance: 0.6
    system:
      ctrl_freq: 10

也接受两种 ROS 参数文件的写法:

    reactive_controller:          # 根键包裹
      avoidance: ...

    reactive_avoidance_node:      # ROS2 节点参数文件
      ros__parameters:
        avoidance: ...
"""
from typing import Dict, Any, Optional
import copy
import logging
import os

import yaml

from ..core.exceptions import ConfigurationError
from .default_config import DEFAULT_CONFIG, validate_config

logger = logging.getLogger(__name__)

# ROS 参数文件中的根键
ROOT_KEY = 'reactive_controller'
ROS2_PARAMS_KEY = 'ros__parameters'


def merge_config(base: Dict[str, Any], override: Dict[str, Any],
                 path: str = '') -> Dict[str, Any]:
    """
    递归合并配置（原地修改 base）

    只允许覆盖 base 中已存在的键，未知键视为配置错误（通常是拼写错误）。

    Args:
        base: 基础配置
        override: 覆盖配置
        path: 当前键路径，用于错误信息

    Returns:
        合并后的 base

    Raises:
        ConfigurationError: override 包含未知键或结构不匹配
    """
    for key, value in override.items():
        key_path = f'{path}.{key}' if path else str(key)
        if key not in base:
            raise ConfigurationError(f'Unknown config key: {key_path}')

        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ConfigurationError(
                    f'Config section {key_path} must be a mapping, got {type(value).__name__}'
                )
            merge_config(base[key], value, key_path)
        else:
            if value != base[key]:
                logger.debug(f"Parameter override: {key_path} = {value}")
            base[key] = value
    return base


def load_yaml_file(path: str) -> Dict[str, Any]:
    """
    读取 YAML 配置文件

    Raises:
        ConfigurationError: 文件不存在、YAML 语法错误或根节点不是映射
    """
    if not os.path.isfile(path):
        raise ConfigurationError(f'Config file not found: {path}')

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Invalid YAML in {path}: {e}') from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f'Config file {path} must contain a mapping, got {type(data).__name__}'
        )

    return _unwrap_ros_params(data)


def _unwrap_ros_params(data: Dict[str, Any]) -> Dict[str, Any]:
    """去掉 ROS 参数文件的外层包裹 (根键或 <node>/ros__parameters)"""
    if ROOT_KEY in data and isinstance(data[ROOT_KEY], dict):
        return data[ROOT_KEY]

    if len(data) == 1:
        node_params = next(iter(data.values()))
        if isinstance(node_params, dict) and isinstance(node_params.get(ROS2_PARAMS_KEY), dict):
            return node_params[ROS2_PARAMS_KEY]
    return data


def load_config(path: Optional[str] = None,
                overrides: Optional[Dict[str, Any]] = None,
                validate: bool = True,
                strict: bool = True) -> Dict[str, Any]:
    """
    加载配置

    1. 深拷贝 DEFAULT_CONFIG 作为基础配置
    2. 合并 YAML 配置文件 (可选)
    3. 合并覆盖字典 (可选)
    4. 配置验证

    Args:
        path: YAML 配置文件路径
        overrides: 覆盖字典，结构与 DEFAULT_CONFIG 一致
        validate: 是否进行配置验证
        strict: 是否严格模式 (ERROR 级别也阻止启动)

    Returns:
        合并后的配置字典

    Raises:
        ConfigurationError: 文件或结构错误
        ConfigValidationError: 配置验证失败
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path:
        merge_config(config, load_yaml_file(path))
        logger.info(f"Loaded config file: {path}")

    if overrides:
        merge_config(config, copy.deepcopy(overrides))

    if validate:
        validate_config(config, raise_on_error=True, strict=strict)

    avoidance = config['avoidance']
    logger.info(
        f"Config: ctrl_freq={config['system']['ctrl_freq']}Hz, "
        f"obstacle_distance={avoidance['obstacle_distance']}, "
        f"linear_speed={avoidance['linear_speed']}, "
        f"angular_speed={avoidance['angular_speed']}"
    )
    return config
