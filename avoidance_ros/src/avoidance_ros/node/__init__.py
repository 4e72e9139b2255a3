"""
Node Layer - Avoidance node implementations

Supports both ROS1 (Noetic) and ROS2 (Humble).
In non-ROS environments, only AvoidanceNodeBase is available.
"""
from .base_node import AvoidanceNodeBase

# ROS2 specific class, lazy import for non-ROS environments
try:
    from .avoidance_node import AvoidanceNode
except ImportError:
    AvoidanceNode = None

# ROS1 specific class
try:
    from .avoidance_node_ros1 import AvoidanceNodeROS1
except ImportError:
    AvoidanceNodeROS1 = None

__all__ = [
    'AvoidanceNodeBase',
    'AvoidanceNode',
    'AvoidanceNodeROS1',
]
