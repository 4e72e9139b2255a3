"""
避障节点基类

封装 ROS1 和 ROS2 节点的共享逻辑，避免代码重复。

功能:
- 控制器和适配器的创建
- 激光回调 → 控制器快照
- 控制循环核心逻辑 (定时器回调中调用)
- 错误处理和关闭时的停止命令
- reset / get_diagnostics 服务处理
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Tuple
import json

from reactive_controller.core.data_types import VelocityCommand
from reactive_controller.manager.reactive_controller import ReactiveController

from ..adapters import ScanAdapter, TwistAdapter
from ..utils.error_handler import ErrorHandler


class AvoidanceNodeBase(ABC):
    """
    避障节点基类

    子类需要实现:
    - _get_time(): 获取当前 ROS 时间
    - _log_info/warn/warn_throttle/error(): 日志方法
    - _publish_cmd(): 发布速度命令
    - _publish_stop_cmd(): 发布停止命令
    """

    def __init__(self):
        """初始化基类 (子类应在调用 super().__init__() 前完成 ROS 节点初始化)"""
        # 配置属性 (由子类在调用 _initialize() 前设置)
        self._params: Dict[str, Any] = {}
        self._topics: Dict[str, str] = {}
        self._default_frame_id: str = 'base_link'

        # 核心组件 (由 _initialize() 创建)
        self._controller: Optional[ReactiveController] = None
        self._scan_adapter: Optional[ScanAdapter] = None
        self._twist_adapter: Optional[TwistAdapter] = None
        self._error_handler: Optional[ErrorHandler] = None

        # 状态
        self._waiting_for_data = True
        self._warn_throttle_sec = 5.0
        self._last_error_diag: Optional[Dict[str, Any]] = None
        self._is_shutdown = False

    def _initialize(self):
        """
        初始化控制器组件

        子类应在加载参数后调用此方法。参数已由 ParamLoader 验证，这里不再重复验证。
        """
        self._controller = ReactiveController(self._params, validate_config=False)
        self._scan_adapter = ScanAdapter(
            default_frame_id=self._default_frame_id,
            get_time_func=self._get_time,
        )
        self._twist_adapter = TwistAdapter(get_time_func=self._get_time)
        self._error_handler = ErrorHandler(self._log_error)
        self._warn_throttle_sec = float(
            self._params.get('diagnostics', {}).get('warn_throttle_sec', 5.0))

    # ==================== 数据回调 ====================

    def _on_scan(self, msg: Any) -> None:
        """激光回调: 转换后交给控制器 (覆盖上一帧)"""
        try:
            snapshot = self._scan_adapter.to_core(msg)
        except ValueError as e:
            self._log_warn_throttle(self._warn_throttle_sec, f"Dropping unreadable scan: {e}")
            return
        self._controller.on_snapshot(snapshot)

    # ==================== 控制循环 ====================

    def _control_loop_core(self) -> Optional[VelocityCommand]:
        """
        控制循环核心逻辑

        Returns:
            速度命令；尚未收到激光数据、快照过短或发生错误时返回 None
        """
        if self._is_shutdown:
            return None

        try:
            cmd = self._controller.run_control_cycle()
        except Exception as e:
            self._last_error_diag = self._error_handler.handle_control_error(e)
            self._publish_stop_cmd()
            return None

        if cmd is None:
            if not self._controller.has_snapshot:
                self._log_warn_throttle(self._warn_throttle_sec, "Waiting for scan data...")
            return None

        if self._waiting_for_data:
            self._log_info("Scan received, starting control")
            self._waiting_for_data = False

        self._error_handler.reset()
        return cmd

    # ==================== 服务处理 ====================

    def _handle_reset(self):
        """处理重置请求: 丢弃缓存的激光数据，回到等待状态"""
        if self._controller is not None:
            self._controller.reset()
        if self._error_handler is not None:
            self._error_handler.reset()
        self._waiting_for_data = True
        self._last_error_diag = None
        self._log_info('Controller reset')

    def _handle_get_diagnostics(self) -> Optional[Dict[str, Any]]:
        """处理获取诊断请求"""
        if self._controller is None:
            return None
        diag = self._controller.get_diagnostics()
        health = self._controller.get_health_status()
        diag['healthy'] = health['healthy']
        diag['health_message'] = health['message']
        diag['topics'] = dict(self._topics)
        if self._error_handler is not None:
            diag['consecutive_errors'] = self._error_handler.consecutive_errors
            diag['total_errors'] = self._error_handler.total_errors
        if self._last_error_diag is not None:
            diag['last_error'] = self._last_error_diag['error_message']
        return diag

    def _diagnostics_trigger_result(self) -> Tuple[bool, str]:
        """
        get_diagnostics 服务应答 (std_srvs/Trigger)

        Returns:
            (success, message)，成功时 message 为诊断字典的 JSON 文本
        """
        diag = self._handle_get_diagnostics()
        if diag is None:
            return False, 'Diagnostics not available'
        return True, json.dumps(diag)

    def shutdown(self):
        """关闭节点: 发布一次停止命令后关闭控制器，重复调用无副作用"""
        if self._is_shutdown:
            return
        self._is_shutdown = True

        try:
            self._publish_stop_cmd()
        except Exception as e:
            # 中间件可能已先于节点关闭
            self._log_warn(f'Failed to publish stop command on shutdown: {e}')

        if self._controller is not None:
            self._controller.shutdown()
        self._log_info('Avoidance node shutdown')

    # ==================== 抽象方法 ====================

    @abstractmethod
    def _get_time(self) -> float:
        """获取当前时间（秒）"""
        pass

    @abstractmethod
    def _log_info(self, msg: str):
        pass

    @abstractmethod
    def _log_warn(self, msg: str):
        pass

    @abstractmethod
    def _log_warn_throttle(self, period: float, msg: str):
        """记录节流警告日志"""
        pass

    @abstractmethod
    def _log_error(self, msg: str):
        pass

    @abstractmethod
    def _publish_cmd(self, cmd: VelocityCommand):
        """发布速度命令"""
        pass

    @abstractmethod
    def _publish_stop_cmd(self):
        """发布停止命令"""
        pass
