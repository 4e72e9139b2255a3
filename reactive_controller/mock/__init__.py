"""
模拟数据模块

仅用于测试和演示 (main.py)，不应在生产代码中使用。

    from reactive_controller.mock import create_test_snapshot, create_room_scan
"""
from .test_data_generator import (
    create_test_snapshot,
    create_room_scan,
    step_unicycle,
)

__all__ = [
    'create_test_snapshot',
    'create_room_scan',
    'step_unicycle',
]
