"""核心数据类型测试"""
import math
import sys
import os

import numpy as np
import pytest

# 添加项目路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from reactive_controller.core.data_types import (
    Header, SensorSnapshot, DirectionalReadings, ObstacleFlags, VelocityCommand,
)
from reactive_controller.core.enums import ControllerState
from reactive_controller.core.exceptions import (
    ControllerError, ConfigurationError, ConfigValidationError,
    ControllerRuntimeError, MalformedSnapshotError,
)
from reactive_controller.config.default_config import DEFAULT_CONFIG, get_config_value


def test_snapshot_copies_input():
    """测试快照复制输入序列，外部修改不影响快照"""
    source = [1.0, 2.0, 3.0]
    snapshot = SensorSnapshot(source)
    source[0] = 99.0

    assert snapshot.ranges[0] == 1.0
    assert snapshot.ranges.dtype == np.float64
    print("✓ test_snapshot_copies_input passed")


def test_snapshot_is_read_only():
    """测试快照不可变"""
    snapshot = SensorSnapshot(np.ones(6))

    with pytest.raises(ValueError):
        snapshot.ranges[0] = 0.0

    with pytest.raises(AttributeError):
        snapshot.angle_min = 1.0
    print("✓ test_snapshot_is_read_only passed")


def test_snapshot_size():
    """测试快照长度"""
    assert SensorSnapshot([]).size == 0
    assert len(SensorSnapshot(np.zeros(360))) == 360
    # 多维输入被展平
    assert SensorSnapshot(np.zeros((2, 3))).size == 6
    print("✓ test_snapshot_size passed")


def test_snapshot_keeps_invalid_readings():
    """测试 inf/nan 原样保留，valid_mask 标记有效读数"""
    snapshot = SensorSnapshot([1.0, float('inf'), float('nan'), 0.05],
                              range_min=0.1, range_max=10.0)

    assert math.isinf(snapshot.ranges[1])
    assert math.isnan(snapshot.ranges[2])
    assert snapshot.valid_mask().tolist() == [True, False, False, False]
    print("✓ test_snapshot_keeps_invalid_readings passed")


def test_snapshot_header_default():
    """测试默认消息头"""
    snapshot = SensorSnapshot([1.0])
    assert isinstance(snapshot.header, Header)
    assert snapshot.header.frame_id == ""
    # 每个快照有独立的 Header
    assert SensorSnapshot([1.0]).header is not snapshot.header


def test_velocity_command_copy():
    """测试速度命令拷贝"""
    original = VelocityCommand(0.2, 0.5)
    copied = original.copy()
    original.linear_x = 1.0

    assert copied.linear_x == 0.2
    assert VelocityCommand() == VelocityCommand(0.0, 0.0)
    assert copied.to_dict() == {'linear_x': 0.2, 'angular_z': 0.5}


def test_readings_and_flags_to_dict():
    """测试读数与障碍物标志的字典形式 (诊断输出)"""
    readings = DirectionalReadings(front=1.0, left=2.0, right=3.0)
    assert readings.to_dict() == {'front': 1.0, 'left': 2.0, 'right': 3.0}

    flags = ObstacleFlags(front=True, right=True)
    assert flags.to_dict() == {'front': True, 'left': False, 'right': True}
    assert ObstacleFlags().to_dict() == {'front': False, 'left': False, 'right': False}


def test_exception_hierarchy():
    """测试异常层次结构"""
    assert issubclass(ConfigValidationError, ConfigurationError)
    assert issubclass(ConfigurationError, ControllerError)
    assert issubclass(MalformedSnapshotError, ControllerRuntimeError)
    assert issubclass(ControllerRuntimeError, ControllerError)

    e = MalformedSnapshotError(0, 1)
    assert e.size == 0
    assert e.min_size == 1
    assert '0' in str(e)

    e = ConfigValidationError('bad', [('a.b', 'msg')])
    assert e.errors == [('a.b', 'msg')]


def test_controller_state_values():
    """测试控制器状态枚举"""
    assert ControllerState.WAITING_FOR_DATA == 0
    assert ControllerState.ACTIVE == 1


def test_default_config_completeness():
    """测试默认配置包含所有必要的键"""
    for key in ('obstacle_distance', 'linear_speed', 'angular_speed', 'min_ranges'):
        assert key in DEFAULT_CONFIG['avoidance']
    assert DEFAULT_CONFIG['system']['ctrl_freq'] == 20
    assert DEFAULT_CONFIG['avoidance']['obstacle_distance'] == 0.5
    assert DEFAULT_CONFIG['avoidance']['linear_speed'] == 0.2
    assert DEFAULT_CONFIG['avoidance']['angular_speed'] == 0.5
    print("✓ test_default_config_completeness passed")


def test_get_config_value():
    """测试点分隔路径取值"""
    config = {'avoidance': {'linear_speed': 0.3}}

    assert get_config_value(config, 'avoidance.linear_speed') == 0.3
    assert get_config_value(config, 'avoidance.missing', default=7) == 7
    assert get_config_value(config, 'avoidance.angular_speed',
                            fallback_config=DEFAULT_CONFIG) == 0.5
    assert get_config_value(config, 'system.ctrl_freq') is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
