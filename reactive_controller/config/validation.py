"""配置验证

两类检查:
- 规则表检查: {key_path: (min, max, description)}，数值类型和取值范围
- 一致性检查: 参数组合是否让控制器失去意义 (永远检测不到障碍物、永远不转向等)

严重级别:
- FATAL: 总是阻止启动
- ERROR: 严格模式下阻止启动，非严格模式只记录
- WARNING: 只记录
"""
from typing import Dict, Any, List, NamedTuple, Optional, Tuple, Callable
from enum import Enum
import logging

from ..core.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """验证问题严重级别"""
    FATAL = 'fatal'
    ERROR = 'error'
    WARNING = 'warning'


class ValidationIssue(NamedTuple):
    """单条验证问题，可按 (key, message, severity) 解包"""
    key: str
    message: str
    severity: ValidationSeverity


def _is_numeric(value) -> bool:
    # bool 是 int 的子类，不算数值
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_config_value(
    config: Dict[str, Any],
    key_path: str,
    default: Any = None,
    fallback_config: Optional[Dict[str, Any]] = None
) -> Any:
    """
    按点分隔路径读取配置值

    Args:
        config: 配置字典
        key_path: 如 'avoidance.obstacle_distance'
        default: 两处都找不到时的返回值
        fallback_config: config 中缺失时改从这里读取

    Example:
        >>> get_config_value({'avoidance': {'linear_speed': 0.3}}, 'avoidance.linear_speed')
        0.3
    """
    node = config
    for key in key_path.split('.'):
        if not isinstance(node, dict) or key not in node:
            if fallback_config is None:
                return default
            return get_config_value(fallback_config, key_path, default)
        node = node[key]
    return node


def check_ranges(config: Dict[str, Any],
                 validation_rules: Dict[str, Tuple]) -> List[ValidationIssue]:
    """按规则表检查类型和范围，缺失的键跳过 (运行时使用默认值)"""
    issues = []
    for key_path, (min_val, max_val, description) in validation_rules.items():
        value = get_config_value(config, key_path)
        if value is None:
            continue

        if not _is_numeric(value):
            message = f'{description} 类型错误，期望数值，实际为 {type(value).__name__}'
        elif min_val is not None and value < min_val:
            message = f'{description} 值 {value} 小于最小值 {min_val}'
        elif max_val is not None and value > max_val:
            message = f'{description} 值 {value} 大于最大值 {max_val}'
        else:
            continue
        issues.append(ValidationIssue(key_path, message, ValidationSeverity.ERROR))
    return issues


# 一致性规则: (key_path, 值有问题时返回 True 的判定, 说明, 严重级别)
_CONSISTENCY_RULES: List[Tuple[str, Callable[[Any], bool], str, ValidationSeverity]] = [
    ('avoidance.obstacle_distance',
     lambda v: _is_numeric(v) and v <= 0,
     '障碍物距离阈值 ({}) 必须大于 0，否则永远检测不到障碍物',
     ValidationSeverity.FATAL),
    ('system.ctrl_freq',
     lambda v: _is_numeric(v) and v <= 0,
     '控制频率 ({}) 必须大于 0',
     ValidationSeverity.FATAL),
    ('avoidance.min_ranges',
     lambda v: not (_is_numeric(v) and isinstance(v, int) and v >= 1),
     '激光快照最小长度 ({}) 必须为 >= 1 的整数',
     ValidationSeverity.FATAL),
    ('avoidance.linear_speed',
     lambda v: _is_numeric(v) and v == 0,
     '前进线速度为 {}，机器人永远不会前进',
     ValidationSeverity.WARNING),
    ('avoidance.angular_speed',
     lambda v: _is_numeric(v) and v == 0,
     '转向角速度为 {}，机器人无法绕开侧方障碍物',
     ValidationSeverity.WARNING),
]


def check_consistency(config: Dict[str, Any]) -> List[ValidationIssue]:
    """检查参数取值是否让避障行为失效"""
    issues = []
    for key_path, is_bad, template, severity in _CONSISTENCY_RULES:
        value = get_config_value(config, key_path)
        if value is not None and is_bad(value):
            issues.append(ValidationIssue(key_path, template.format(value), severity))
    return issues


def _raise_for(issues: List[ValidationIssue], title: str):
    lines = '\n'.join(f'  - [{i.severity.name}] {i.key}: {i.message}' for i in issues)
    raise ConfigValidationError(f'{title}:\n{lines}', [(i.key, i.message) for i in issues])


def validate_full_config(
    config: Dict[str, Any],
    validation_rules: Dict[str, Tuple],
    raise_on_error: bool = True,
    strict: bool = True
) -> List[ValidationIssue]:
    """
    完整配置验证 (规则表 + 一致性)

    Args:
        config: 配置字典
        validation_rules: 规则表
        raise_on_error: 发现阻止启动的问题时是否抛出异常
        strict: True 时 ERROR 也阻止启动

    Returns:
        全部验证问题

    Raises:
        ConfigValidationError: raise_on_error=True 且存在阻止启动的问题
    """
    issues = check_ranges(config, validation_rules) + check_consistency(config)

    by_severity: Dict[ValidationSeverity, List[ValidationIssue]] = {s: [] for s in ValidationSeverity}
    for issue in issues:
        by_severity[issue.severity].append(issue)

    for issue in by_severity[ValidationSeverity.WARNING]:
        logger.warning(f"配置警告 [{issue.key}]: {issue.message}")

    if raise_on_error:
        if by_severity[ValidationSeverity.FATAL]:
            _raise_for(by_severity[ValidationSeverity.FATAL], '配置存在致命错误，无法启动')
        if strict and by_severity[ValidationSeverity.ERROR]:
            _raise_for(by_severity[ValidationSeverity.ERROR], '配置验证失败')

    for issue in by_severity[ValidationSeverity.ERROR]:
        logger.error(f"配置错误 [{issue.key}]: {issue.message}")

    return issues
