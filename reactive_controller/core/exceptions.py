"""
异常类型

    ControllerError
    ├── ConfigurationError          启动时: 配置文件或参数不可用
    │   └── ConfigValidationError   启动时: 参数超出范围或互相矛盾
    └── ControllerRuntimeError      控制周期内: 可恢复，跳过本周期
        └── MalformedSnapshotError  激光距离序列过短

配置错误阻止启动；运行时错误由 ReactiveController 捕获，
run_control_cycle() 返回 None，下一帧有效激光到达后自动恢复。
"""


class ControllerError(Exception):
    """控制器错误基类"""
    pass


# =============================================================================
# 配置错误
# =============================================================================

class ConfigurationError(ControllerError):
    """配置错误基类"""
    pass


class ConfigValidationError(ConfigurationError):
    """
    配置验证错误

    当配置参数不满足验证规则时抛出。

    Attributes:
        errors: 错误列表，每个元素为 (key_path, error_message)
    """

    def __init__(self, message: str, errors: list = None):
        super().__init__(message)
        self.errors = errors or []


# =============================================================================
# 运行时错误
# =============================================================================

class ControllerRuntimeError(ControllerError):
    """控制周期内的可恢复错误"""
    pass


class MalformedSnapshotError(ControllerRuntimeError):
    """
    激光快照格式错误

    当距离序列过短、无法安全提取前/左/右读数时抛出。
    控制器捕获后跳过本周期，不向外传播。

    Attributes:
        size: 实际距离序列长度
        min_size: 要求的最小长度
    """

    def __init__(self, size: int, min_size: int):
        super().__init__(
            f'Scan has {size} ranges, at least {min_size} required'
        )
        self.size = size
        self.min_size = min_size


# =============================================================================
# 导出列表
# =============================================================================

__all__ = [
    'ControllerError',
    'ConfigurationError',
    'ConfigValidationError',
    'ControllerRuntimeError',
    'MalformedSnapshotError',
]
