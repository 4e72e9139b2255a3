"""
测试 fixtures - ROS 消息 Mock
"""
from .ros_message_mocks import (
    MockRosTime,
    MockRosHeader,
    MockRosLaserScan,
    MockRosVector3,
    MockRosTwist,
    MockParameterDescriptor,
    MockParameterTypeError,
    MockParamNode,
    create_mock_scan,
)

__all__ = [
    'MockRosTime',
    'MockRosHeader',
    'MockRosLaserScan',
    'MockRosVector3',
    'MockRosTwist',
    'MockParameterDescriptor',
    'MockParameterTypeError',
    'MockParamNode',
    'create_mock_scan',
]
