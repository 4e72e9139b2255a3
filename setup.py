#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reactive Controller 安装脚本

安装方法:
    # 可编辑安装 (推荐开发时使用)
    pip install -e .

    # 安装测试依赖
    pip install -e .[test]

ROS 胶水层 avoidance_ros 通过 catkin/colcon 单独构建，见 avoidance_ros/setup.py。
"""

from setuptools import setup, find_packages

setup(
    name='reactive-avoidance',
    version='1.0.0',
    author='Reactive Avoidance Team',
    description='基于激光前/左/右读数的反应式避障控制器',

    # 自动查找包
    packages=find_packages(include=['reactive_controller', 'reactive_controller.*']),

    # 依赖
    install_requires=[
        'numpy>=1.20.0',
        'PyYAML>=5.4.0',
    ],
    extras_require={
        'test': ['pytest>=6.0'],
    },

    entry_points={
        'console_scripts': [
            'reactive-avoidance-demo=reactive_controller.main:main',
        ],
    },

    # Python 版本要求
    python_requires='>=3.8',

    include_package_data=True,
    zip_safe=False,
)
