#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
避障节点入口

按检测到的 ROS 版本启动对应节点:
    ROS1: rosrun avoidance_ros avoidance_node.py
    ROS2: ros2 run avoidance_ros avoidance_node.py
"""

# 注意：不要在这里修改 sys.path！
# PYTHONPATH 已经由 source devel/setup.bash (或 install/setup.bash) 正确设置

import sys

from avoidance_ros.utils.ros_compat import ROS_VERSION, ROS_AVAILABLE, log_error


def main():
    if not ROS_AVAILABLE:
        log_error("Neither rclpy nor rospy is available, cannot start avoidance node")
        sys.exit(1)

    if ROS_VERSION == 2:
        from avoidance_ros.node.avoidance_node import main as ros2_main
        ros2_main()
    else:
        from avoidance_ros.node.avoidance_node_ros1 import main as ros1_main
        ros1_main()


if __name__ == '__main__':
    main()
