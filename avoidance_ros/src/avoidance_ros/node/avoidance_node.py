"""
避障 ROS2 节点

订阅 LaserScan，按 system.ctrl_freq 运行控制周期，发布 Twist。

继承 AvoidanceNodeBase，实现 ROS2 特定的接口。
"""
import rclpy
from rclpy.node import Node
from rclpy.executors import MultiThreadedExecutor
from rclpy.callback_groups import ReentrantCallbackGroup, MutuallyExclusiveCallbackGroup
from sensor_msgs.msg import LaserScan
from geometry_msgs.msg import Twist
from std_srvs.srv import Trigger

from reactive_controller.core.data_types import VelocityCommand
from reactive_controller.core.logging_config import configure_logging

from .base_node import AvoidanceNodeBase
from ..adapters import TwistAdapter
from ..utils import ParamLoader
from ..utils.ros_compat import get_time_sec


class AvoidanceNode(AvoidanceNodeBase, Node):
    """
    避障主节点 (ROS2)

    输入:
    - input_scan (sensor_msgs/LaserScan)

    输出:
    - output_vel (geometry_msgs/Twist)

    服务:
    - ~/reset (std_srvs/Trigger)
    - ~/get_diagnostics (std_srvs/Trigger，message 为 JSON 诊断)
    """

    def __init__(self):
        # 先初始化 ROS2 Node
        Node.__init__(self, 'reactive_avoidance_node')
        AvoidanceNodeBase.__init__(self)

        # 1. 加载参数
        self._params = ParamLoader.load(self)
        self._topics = ParamLoader.get_topics(self)
        queues = ParamLoader.get_queue_config(self)

        # 2. 回调组: 激光回调可与控制周期并发；控制周期与 reset 服务互斥
        self._sensor_cb_group = ReentrantCallbackGroup()
        self._control_cb_group = MutuallyExclusiveCallbackGroup()

        # 3. 初始化核心组件 (基类方法)
        self._initialize()
        self._twist_adapter = TwistAdapter(twist_cls=Twist, get_time_func=self._get_time)

        # 4. 创建 ROS2 接口
        self._scan_sub = self.create_subscription(
            LaserScan,
            self._topics['scan'],
            self._on_scan,
            queues['scan_queue_size'],
            callback_group=self._sensor_cb_group
        )
        self._cmd_pub = self.create_publisher(
            Twist, self._topics['cmd_vel'], queues['cmd_queue_size'])
        self._reset_srv = self.create_service(
            Trigger, '~/reset', self._reset_callback,
            callback_group=self._control_cb_group
        )
        self._diag_srv = self.create_service(
            Trigger, '~/get_diagnostics', self._get_diagnostics_callback,
            callback_group=self._control_cb_group
        )

        # 5. 创建控制定时器
        control_period = self._controller.control_period
        self._control_timer = self.create_timer(
            control_period,
            self._control_callback,
            callback_group=self._control_cb_group
        )

        self.get_logger().info(
            f"Avoidance node initialized (scan={self._topics['scan']}, "
            f"cmd_vel={self._topics['cmd_vel']}, period={control_period * 1000:.0f}ms)"
        )

    # ==================== 回调 ====================

    def _control_callback(self):
        cmd = self._control_loop_core()
        if cmd is not None:
            self._publish_cmd(cmd)

    def _reset_callback(self, request, response):
        self._handle_reset()
        response.success = True
        response.message = 'Controller reset'
        return response

    def _get_diagnostics_callback(self, request, response):
        response.success, response.message = self._diagnostics_trigger_result()
        return response

    # ==================== 基类抽象方法实现 ====================

    def _get_time(self) -> float:
        """获取当前 ROS 时间（秒），仿真时间未初始化时回退到系统时间"""
        return get_time_sec(self)

    def _log_info(self, msg: str):
        self.get_logger().info(msg)

    def _log_warn(self, msg: str):
        self.get_logger().warn(msg)

    def _log_warn_throttle(self, period: float, msg: str):
        self.get_logger().warn(msg, throttle_duration_sec=period)

    def _log_error(self, msg: str):
        self.get_logger().error(msg)

    def _publish_cmd(self, cmd: VelocityCommand):
        self._cmd_pub.publish(self._twist_adapter.to_ros(cmd))

    def _publish_stop_cmd(self):
        self._cmd_pub.publish(self._twist_adapter.create_stop_cmd())


def main(args=None):
    """主入口"""
    configure_logging()
    rclpy.init(args=args)

    node = AvoidanceNode()
    executor = MultiThreadedExecutor()
    executor.add_node(node)

    try:
        executor.spin()
    except KeyboardInterrupt:
        pass
    finally:
        node.shutdown()
        node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()


if __name__ == '__main__':
    main()
