"""配置模块

提供统一的配置接口，支持：
- 默认配置 (DEFAULT_CONFIG)
- 配置验证 (validate_config)
- YAML 配置文件加载 (load_config)

配置文件结构:
- system_config.py: 系统基础配置
- avoidance_config.py: 避障策略配置
- validation.py: 配置验证逻辑
- loader.py: 配置文件加载

使用示例:
    from reactive_controller.config import load_config

    config = load_config('avoidance_params.yaml',
                         overrides={'avoidance': {'linear_speed': 0.1}})
"""

from .default_config import (
    DEFAULT_CONFIG,
    CONFIG_VALIDATION_RULES,
    validate_config,
    get_config_value,
    ConfigValidationError,
    ValidationSeverity,
    SYSTEM_CONFIG,
    AVOIDANCE_CONFIG,
    DIAGNOSTICS_CONFIG,
)
from .loader import load_config, load_yaml_file, merge_config

__all__ = [
    'DEFAULT_CONFIG',
    'CONFIG_VALIDATION_RULES',
    'validate_config',
    'get_config_value',
    'ConfigValidationError',
    'ValidationSeverity',
    'SYSTEM_CONFIG',
    'AVOIDANCE_CONFIG',
    'DIAGNOSTICS_CONFIG',
    'load_config',
    'load_yaml_file',
    'merge_config',
]
