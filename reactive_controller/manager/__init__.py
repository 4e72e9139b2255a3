"""控制器管理模块"""
from .reactive_controller import ReactiveController

__all__ = ['ReactiveController']
