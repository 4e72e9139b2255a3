"""默认配置

按关注点拆分的配置字典在这里合并为 DEFAULT_CONFIG:
- system_config.py: 控制频率、诊断
- avoidance_config.py: 阈值和速度
- validation.py: 规则表与一致性检查
- loader.py: YAML 文件叠加

DEFAULT_CONFIG 是共享模板，修改前先深拷贝:
    config = copy.deepcopy(DEFAULT_CONFIG)
    config['avoidance']['obstacle_distance'] = 0.8
"""
from typing import Dict, Any, List

from .system_config import (
    SYSTEM_CONFIG,
    DIAGNOSTICS_CONFIG,
    SYSTEM_VALIDATION_RULES,
)
from .avoidance_config import AVOIDANCE_CONFIG, AVOIDANCE_VALIDATION_RULES

from .validation import (
    ConfigValidationError,
    ValidationIssue,
    ValidationSeverity,
    get_config_value,
    validate_full_config,
)


# 顶层段名即 YAML 文件中允许出现的段名
DEFAULT_CONFIG: Dict[str, Any] = {
    'system': SYSTEM_CONFIG.copy(),
    'avoidance': AVOIDANCE_CONFIG.copy(),
    'diagnostics': DIAGNOSTICS_CONFIG.copy(),
}

CONFIG_VALIDATION_RULES: Dict[str, tuple] = {
    **SYSTEM_VALIDATION_RULES,
    **AVOIDANCE_VALIDATION_RULES,
}


def validate_config(config: Dict[str, Any], raise_on_error: bool = True,
                    strict: bool = True) -> List[ValidationIssue]:
    """
    使用 CONFIG_VALIDATION_RULES 验证配置

    Args:
        config: 配置字典
        raise_on_error: 存在阻止启动的问题时抛出 ConfigValidationError
        strict: ERROR 级别是否阻止启动 (FATAL 总是阻止)

    Returns:
        验证问题列表，元素可解包为 (key_path, message, severity)

    Example:
        >>> config = copy.deepcopy(DEFAULT_CONFIG)
        >>> config['avoidance']['angular_speed'] = 0.0
        >>> [(i.key, i.severity.name) for i in validate_config(config)]
        [('avoidance.angular_speed', 'WARNING')]
    """
    return validate_full_config(config, CONFIG_VALIDATION_RULES, raise_on_error, strict)


__all__ = [
    'DEFAULT_CONFIG',
    'CONFIG_VALIDATION_RULES',
    'validate_config',
    'get_config_value',
    'ConfigValidationError',
    'ValidationIssue',
    'ValidationSeverity',
    'SYSTEM_CONFIG',
    'AVOIDANCE_CONFIG',
    'DIAGNOSTICS_CONFIG',
]
