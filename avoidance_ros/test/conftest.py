"""
pytest 配置和共享 fixtures

Mock 类统一定义在 fixtures/ 目录中:
- fixtures/ros_message_mocks.py: ROS 消息类型 Mock
"""
import types

import pytest
import sys
import os

_test_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir = os.path.join(_test_dir, '..', 'src')
_project_root = os.path.join(_test_dir, '..', '..')

# avoidance_ros 在 src/ 下，reactive_controller 在仓库根目录
for _path in (_project_root, _src_dir, _test_dir):
    _path = os.path.normpath(_path)
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import (
    MockRosLaserScan,
    MockRosTwist,
    MockParameterDescriptor,
    create_mock_scan,
)


# =============================================================================
# pytest fixtures
# =============================================================================

@pytest.fixture
def mock_scan():
    """创建 12 个读数、全部为 1.0m 的 Mock LaserScan"""
    return create_mock_scan()


@pytest.fixture
def mock_time_func():
    """创建可控的时间函数"""
    current_time = [0.0]

    def get_time():
        return current_time[0]

    def set_time(t):
        current_time[0] = t

    get_time.set = set_time
    return get_time


@pytest.fixture
def mock_rcl_interfaces(monkeypatch):
    """在无 ROS2 环境中提供 rcl_interfaces.msg.ParameterDescriptor"""
    package = types.ModuleType('rcl_interfaces')
    msg = types.ModuleType('rcl_interfaces.msg')
    msg.ParameterDescriptor = MockParameterDescriptor
    package.msg = msg
    monkeypatch.setitem(sys.modules, 'rcl_interfaces', package)
    monkeypatch.setitem(sys.modules, 'rcl_interfaces.msg', msg)
    return msg


__all__ = [
    'MockRosLaserScan',
    'MockRosTwist',
    'create_mock_scan',
]
