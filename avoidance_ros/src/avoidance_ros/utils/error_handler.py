"""
控制循环错误处理

核心控制器自身不会向外抛出异常 (空扫描等情况在内部跳过)，
这里处理的是胶水层意外失败，例如消息转换或发布出错。
"""
from typing import Any, Callable, Dict
import logging

logger = logging.getLogger(__name__)

# 代码缺陷，继续运行没有意义
STRUCTURAL_ERRORS = (TypeError, AttributeError, NameError, SystemError)


class ErrorHandler:
    """
    控制循环错误计数与日志策略

    - 结构性错误 (STRUCTURAL_ERRORS) 原样抛出
    - 前 max_consecutive_errors_detail 次逐条记录，之后每 error_summary_interval 次汇总一条
    - 连续错误计数封顶 max_error_count，成功周期后由调用方 reset()
    """

    def __init__(
        self,
        log_error_func: Callable[[str], None],
        config: Dict[str, Any] = None
    ):
        """
        Args:
            log_error_func: 错误日志回调 (节点的 _log_error)
            config: 可选键 max_consecutive_errors_detail / error_summary_interval / max_error_count
        """
        self._log_error = log_error_func

        config = config or {}
        self._detail_limit = config.get('max_consecutive_errors_detail', 10)
        self._summary_interval = config.get('error_summary_interval', 50)
        self._count_cap = config.get('max_error_count', 1000)

        self._consecutive_errors = 0
        self._total_errors = 0

    def reset(self):
        """清零连续错误计数 (累计计数保留)"""
        self._consecutive_errors = 0

    @property
    def consecutive_errors(self) -> int:
        return self._consecutive_errors

    @property
    def total_errors(self) -> int:
        return self._total_errors

    def handle_control_error(self, error: Exception) -> Dict[str, Any]:
        """
        处理一次控制循环异常

        Returns:
            错误诊断字典 (调用方同时发布停止命令)

        Raises:
            结构性错误原样抛出
        """
        if isinstance(error, STRUCTURAL_ERRORS):
            logger.critical(f"Structural error in control loop: {error!r}")
            raise error

        self._total_errors += 1
        self._consecutive_errors = min(self._consecutive_errors + 1, self._count_cap)
        count = self._consecutive_errors

        if count <= self._detail_limit:
            self._log_error(f'Control cycle failed ({count}): {error}')
        elif count % self._summary_interval == 0:
            self._log_error(f'Control cycle still failing ({count} consecutive errors): {error}')

        return {
            'error_message': str(error),
            'error_type': type(error).__name__,
            'consecutive_errors': count,
            'total_errors': self._total_errors,
            'cmd': {'linear_x': 0.0, 'angular_z': 0.0},
        }
