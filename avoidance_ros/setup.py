#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
ROS1 Noetic setup.py (用于 catkin_make)
"""
from setuptools import setup
from catkin_pkg.python_setup import generate_distutils_setup

setup_args = generate_distutils_setup(
    packages=['avoidance_ros', 'avoidance_ros.adapters', 'avoidance_ros.node', 'avoidance_ros.utils'],
    package_dir={'': 'src'},
)

setup(**setup_args)
