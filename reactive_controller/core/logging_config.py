"""
日志配置

所有模块都使用标准 logging:
    logger = logging.getLogger(__name__)

级别约定:
    DEBUG    参数覆盖等细节
    INFO     初始化、配置加载、首帧激光到达、关闭；
             diagnostics.log_readings 开启时每个控制周期的 "左 前 右" 读数
    WARNING  可恢复的数据问题 (快照过短被跳过)、配置警告
    ERROR    ROS 胶水层的控制循环异常

控制循环中可能每个周期都触发的警告必须经过 ThrottledLogger:
    throttled = ThrottledLogger(logger, min_interval=5.0)
    throttled.warning("Skipping control cycle: ...", key='malformed_scan')

ROS1 下 avoidance_ros.utils.ros_compat 会把这些日志转发到 rospy。
"""
import logging
import sys
import time
from typing import Callable, Dict, Optional

DEFAULT_FORMAT = '[%(name)s] %(levelname)s: %(message)s'
DEFAULT_LEVEL = logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    获取日志器，根日志器尚未配置时为其挂一个 stdout handler

    Args:
        name: 通常为 __name__
        level: 日志级别，None 时保持已有级别 (未设置则为 INFO)
    """
    logger = logging.getLogger(name)

    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(DEFAULT_LEVEL)
    return logger


def configure_logging(level: int = logging.INFO,
                      format_str: str = DEFAULT_FORMAT) -> None:
    """配置根日志器 (演示程序和 ROS2 节点入口调用一次)"""
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


class ThrottledLogger:
    """
    按 key 节流的日志器

    同一 key 在 min_interval 秒内只记录第一条；不带 key 的消息不节流。
    """

    def __init__(self, logger: logging.Logger, min_interval: float = 1.0,
                 time_func: Callable[[], float] = time.monotonic):
        self._logger = logger
        self._min_interval = min_interval
        self._time_func = time_func
        self._last_emitted: Dict[str, float] = {}

    def log(self, level: int, msg: str, key: Optional[str] = None, *args, **kwargs) -> bool:
        """
        记录一条日志

        Returns:
            是否实际输出
        """
        if key is not None:
            now = self._time_func()
            last = self._last_emitted.get(key)
            if last is not None and now - last < self._min_interval:
                return False
            self._last_emitted[key] = now
        self._logger.log(level, msg, *args, **kwargs)
        return True

    def reset(self) -> None:
        self._last_emitted.clear()

    def debug(self, msg: str, key: Optional[str] = None, *args, **kwargs) -> bool:
        return self.log(logging.DEBUG, msg, key, *args, **kwargs)

    def info(self, msg: str, key: Optional[str] = None, *args, **kwargs) -> bool:
        return self.log(logging.INFO, msg, key, *args, **kwargs)

    def warning(self, msg: str, key: Optional[str] = None, *args, **kwargs) -> bool:
        return self.log(logging.WARNING, msg, key, *args, **kwargs)

    def error(self, msg: str, key: Optional[str] = None, *args, **kwargs) -> bool:
        return self.log(logging.ERROR, msg, key, *args, **kwargs)
