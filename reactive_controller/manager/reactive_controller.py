"""
反应式避障控制器

持有最近一帧激光快照，每个控制周期从中提取前/左/右读数并生成速度命令。

数据流:
    激光回调 on_snapshot()  ──→  最新快照 (覆盖，不排队)
                                      ↓
    定时器 run_control_cycle() ──→ 三方向读数 → 障碍物判定 → 速度命令

状态:
    WAITING_FOR_DATA  尚未收到任何快照，控制周期为空操作 (返回 None)
    ACTIVE            已有快照，每个周期都返回命令 (包括零速命令)

线程模型:
    on_snapshot() 与 run_control_cycle() 可以在不同线程调用 (ROS1 回调线程、
    ROS2 多线程执行器)。快照引用的替换和读取在锁内完成，快照本身不可变，
    计算在锁外进行。每个周期使用周期开始时已完成写入的最新快照。
    reset() 可与控制周期并发 (ROS 服务线程)，进行中的周期结果被丢弃。
"""
from typing import Dict, Any, Optional
import logging
import threading

from ..core.data_types import (
    SensorSnapshot, DirectionalReadings, ObstacleFlags, VelocityCommand
)
from ..core.enums import ControllerState
from ..core.exceptions import MalformedSnapshotError
from ..core.interfaces import ILifecycleComponent, IAvoidancePolicy
from ..core.logging_config import ThrottledLogger
from ..config.default_config import DEFAULT_CONFIG, get_config_value
from ..config.default_config import validate_config as validate_config_dict
from ..avoidance.readings import extract_readings
from ..avoidance.fixed_threshold import FixedThresholdPolicy

logger = logging.getLogger(__name__)


class ReactiveController(ILifecycleComponent):
    """
    反应式避障控制器

    对外只有两个入口，由外部胶水代码接到任意传输层/调度器:
    - on_snapshot(snapshot): 激光数据到达
    - run_control_cycle(): 定时控制周期

    使用示例:
        controller = ReactiveController(config)
        controller.on_snapshot(SensorSnapshot(ranges))
        cmd = controller.run_control_cycle()
        if cmd is not None:
            publish(cmd)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 policy: Optional[IAvoidancePolicy] = None,
                 validate_config: bool = True, strict_mode: bool = True):
        """
        初始化控制器

        Args:
            config: 配置字典，None 时使用 DEFAULT_CONFIG
            policy: 避障策略，None 时使用 FixedThresholdPolicy
            validate_config: 是否在初始化时验证配置 (默认 True)
            strict_mode: 严格模式，ERROR 级别也阻止启动 (FATAL 总是阻止)

        Raises:
            ConfigValidationError: 配置验证失败
        """
        self.config = config if config is not None else DEFAULT_CONFIG

        if validate_config and config is not None:
            validate_config_dict(self.config, raise_on_error=True, strict=strict_mode)

        self._min_ranges = int(get_config_value(
            self.config, 'avoidance.min_ranges', fallback_config=DEFAULT_CONFIG))
        self._log_readings = bool(get_config_value(
            self.config, 'diagnostics.log_readings', fallback_config=DEFAULT_CONFIG))
        warn_throttle_sec = float(get_config_value(
            self.config, 'diagnostics.warn_throttle_sec', fallback_config=DEFAULT_CONFIG))

        self.policy: IAvoidancePolicy = policy or FixedThresholdPolicy(self.config)
        self._throttled = ThrottledLogger(logger, min_interval=warn_throttle_sec)

        # 最新快照，只在锁内读写引用；reset() 递增 _generation，
        # 进行中的周期据此丢弃结果
        self._lock = threading.Lock()
        self._latest_snapshot: Optional[SensorSnapshot] = None
        self._snapshots_received = 0
        self._generation = 0

        # 诊断 (锁内写入)
        self._cycles_run = 0
        self._cycles_skipped_no_data = 0
        self._cycles_skipped_malformed = 0
        self._last_readings: Optional[DirectionalReadings] = None
        self._last_obstacles: Optional[ObstacleFlags] = None
        self._last_command: Optional[VelocityCommand] = None
        self._last_snapshot_size: Optional[int] = None
        self._last_valid_ranges: Optional[int] = None

    # ==================== 入口 ====================

    def on_snapshot(self, snapshot: SensorSnapshot) -> None:
        """
        接收新的激光快照，无条件覆盖上一帧

        Args:
            snapshot: 新到达的激光快照
        """
        with self._lock:
            first = self._latest_snapshot is None
            self._latest_snapshot = snapshot
            self._snapshots_received += 1

        if first:
            logger.info(f"First scan received ({snapshot.size} ranges), controller active")

    def run_control_cycle(self) -> Optional[VelocityCommand]:
        """
        执行一个控制周期

        Returns:
            速度命令；未收到任何快照或快照过短时返回 None (本周期跳过)。
            周期计算期间控制器被 reset() 时同样返回 None，
            被丢弃的快照不会产生命令，也不计入诊断。
        """
        with self._lock:
            snapshot = self._latest_snapshot
            generation = self._generation
            if snapshot is None:
                self._cycles_skipped_no_data += 1
                return None

        try:
            readings = extract_readings(snapshot, self._min_ranges)
        except MalformedSnapshotError as e:
            with self._lock:
                if generation != self._generation:
                    return None
                self._last_snapshot_size = snapshot.size
                self._cycles_skipped_malformed += 1
            self._throttled.warning(f"Skipping control cycle: {e}", key='malformed_scan')
            return None

        obstacles = self.policy.detect(readings)
        cmd = self.policy.decide(obstacles)

        with self._lock:
            if generation != self._generation:
                return None
            self._cycles_run += 1
            self._last_snapshot_size = snapshot.size
            self._last_valid_ranges = int(snapshot.valid_mask().sum())
            self._last_readings = readings
            self._last_obstacles = obstacles
            self._last_command = cmd

        if self._log_readings:
            # 顺序与左-前-右的物理布局一致
            logger.info(f"{readings.left} {readings.front} {readings.right}")
        return cmd.copy()

    # ==================== 状态查询 ====================

    @property
    def has_snapshot(self) -> bool:
        with self._lock:
            return self._latest_snapshot is not None

    @property
    def control_period(self) -> float:
        """控制周期 (秒)"""
        ctrl_freq = get_config_value(self.config, 'system.ctrl_freq',
                                     fallback_config=DEFAULT_CONFIG)
        return 1.0 / ctrl_freq

    def get_state(self) -> ControllerState:
        if self.has_snapshot:
            return ControllerState.ACTIVE
        return ControllerState.WAITING_FOR_DATA

    def get_diagnostics(self) -> Dict[str, Any]:
        """获取诊断信息 (同一时刻的一致快照)"""
        with self._lock:
            if self._latest_snapshot is None:
                state = ControllerState.WAITING_FOR_DATA
            else:
                state = ControllerState.ACTIVE
            readings = self._last_readings
            obstacles = self._last_obstacles
            command = self._last_command
            return {
                'state': state.name,
                'snapshots_received': self._snapshots_received,
                'cycles_run': self._cycles_run,
                'cycles_skipped_no_data': self._cycles_skipped_no_data,
                'cycles_skipped_malformed': self._cycles_skipped_malformed,
                'last_snapshot_size': self._last_snapshot_size,
                'last_valid_ranges': self._last_valid_ranges,
                'last_readings': readings.to_dict() if readings else None,
                'last_obstacles': obstacles.to_dict() if obstacles else None,
                'last_command': command.to_dict() if command else None,
            }

    def get_health_status(self) -> Optional[Dict[str, Any]]:
        state = self.get_state()
        if state == ControllerState.WAITING_FOR_DATA:
            message = 'Waiting for first scan'
        elif self._cycles_skipped_malformed and self._last_readings is None:
            message = 'Only malformed scans received'
        else:
            message = 'OK'
        return {
            'healthy': message == 'OK',
            'state': state.name,
            'message': message,
            'details': self.get_diagnostics(),
        }

    # ==================== 生命周期 ====================

    def reset(self) -> None:
        """
        重置控制器

        丢弃缓存的快照和诊断计数，回到 WAITING_FOR_DATA。
        可以在控制周期进行中调用，该周期的结果被丢弃。
        """
        with self._lock:
            self._generation += 1
            self._latest_snapshot = None
            self._snapshots_received = 0
            self._cycles_run = 0
            self._cycles_skipped_no_data = 0
            self._cycles_skipped_malformed = 0
            self._last_readings = None
            self._last_obstacles = None
            self._last_command = None
            self._last_snapshot_size = None
            self._last_valid_ranges = None
        self._throttled.reset()
        self.policy.reset()

    def shutdown(self) -> None:
        logger.info("Shutting down ReactiveController")
        self.policy.shutdown()
        self.reset()
