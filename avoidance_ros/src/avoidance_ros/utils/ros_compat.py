"""
ROS 兼容层

同一份代码在 ROS1 (rospy)、ROS2 (rclpy) 和无 ROS 的环境 (单元测试) 下运行。
导入时检测一次 ROS 版本，优先 ROS2。

    from avoidance_ros.utils.ros_compat import ROS_VERSION, ros_time_to_sec
"""
import time
import logging
from typing import Dict

from reactive_controller.core.logging_config import ThrottledLogger

logger = logging.getLogger(__name__)


def _detect_ros_version() -> int:
    """返回 2 (rclpy)、1 (rospy) 或 0 (均不可用)"""
    try:
        import rclpy  # noqa: F401
        return 2
    except ImportError:
        pass
    try:
        import rospy  # noqa: F401
        return 1
    except ImportError:
        return 0


ROS_VERSION = _detect_ros_version()
ROS_AVAILABLE = ROS_VERSION != 0
logger.debug(f"ROS version detected: {ROS_VERSION}")


# ============================================================================
# 时间
# ============================================================================

def get_time_sec(node=None) -> float:
    """
    当前 ROS 时间（秒）

    仿真时间尚未收到 /clock 时 ROS 时钟为 0，此时使用系统时间。

    Args:
        node: ROS2 节点；ROS1 下忽略
    """
    ros_time = 0.0
    if ROS_VERSION == 1:
        import rospy
        ros_time = rospy.Time.now().to_sec()
    elif ROS_VERSION == 2 and node is not None:
        ros_time = node.get_clock().now().nanoseconds * 1e-9
    return ros_time if ros_time > 0 else time.time()


def ros_time_to_sec(stamp) -> float:
    """
    时间戳转秒

    接受 ROS2 builtin_interfaces/Time (sec/nanosec)、rospy.Time (to_sec 或 secs/nsecs)
    以及普通数值。
    """
    if hasattr(stamp, 'nanosec'):
        return stamp.sec + stamp.nanosec * 1e-9
    if hasattr(stamp, 'to_sec'):
        return stamp.to_sec()
    if hasattr(stamp, 'nsecs'):
        return stamp.secs + stamp.nsecs * 1e-9
    return float(stamp)


# ============================================================================
# 日志
# ============================================================================

class _RospyHandler(logging.Handler):
    """把 Python logging 记录转发到 rosout"""

    def emit(self, record):
        import rospy
        try:
            msg = self.format(record)
        except Exception:
            self.handleError(record)
            return
        if record.levelno >= logging.ERROR:
            rospy.logerr(msg)
        elif record.levelno >= logging.WARNING:
            rospy.logwarn(msg)
        elif record.levelno >= logging.INFO:
            rospy.loginfo(msg)
        else:
            rospy.logdebug(msg)


def _forward_logging_to_rospy():
    handler = _RospyHandler()
    handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))
    for name in ('avoidance_ros', 'reactive_controller'):
        package_logger = logging.getLogger(name)
        if not any(isinstance(h, _RospyHandler) for h in package_logger.handlers):
            package_logger.addHandler(handler)
            package_logger.setLevel(logging.DEBUG)


if ROS_VERSION == 1:
    _forward_logging_to_rospy()


def _log(level: int, msg: str):
    if ROS_VERSION == 1:
        import rospy
        {logging.INFO: rospy.loginfo,
         logging.WARNING: rospy.logwarn,
         logging.ERROR: rospy.logerr}[level](msg)
    else:
        logger.log(level, msg)


def log_info(msg: str):
    _log(logging.INFO, msg)


def log_warn(msg: str):
    _log(logging.WARNING, msg)


def log_error(msg: str):
    _log(logging.ERROR, msg)


# 每个节流周期一个 ThrottledLogger，消息文本作为 key
_throttled_by_period: Dict[float, ThrottledLogger] = {}


def log_warn_throttle(period: float, msg: str):
    """同一消息 period 秒内最多记录一次"""
    if ROS_VERSION == 1:
        import rospy
        rospy.logwarn_throttle(period, msg)
        return

    throttled = _throttled_by_period.setdefault(
        period, ThrottledLogger(logger, min_interval=period))
    throttled.warning(msg, key=msg)
