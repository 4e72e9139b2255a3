"""
Avoidance ROS1 Node

Node implementation for ROS1 (Noetic).
Inherits from AvoidanceNodeBase for shared logic.

Usage:
    rosrun avoidance_ros avoidance_node.py
"""
try:
    import rospy
    from sensor_msgs.msg import LaserScan
    from geometry_msgs.msg import Twist
    from std_srvs.srv import Empty as EmptySrv, EmptyResponse, Trigger, TriggerResponse
    ROS1_AVAILABLE = True
except ImportError:
    ROS1_AVAILABLE = False

from reactive_controller.core.data_types import VelocityCommand

from .base_node import AvoidanceNodeBase
from ..adapters import TwistAdapter
from ..utils import ParamLoader
from ..utils.ros_compat import (
    get_time_sec, log_info, log_warn, log_warn_throttle, log_error
)


class AvoidanceNodeROS1(AvoidanceNodeBase):
    """
    Avoidance Node (ROS1)

    Inputs:
    - input_scan (sensor_msgs/LaserScan)

    Outputs:
    - output_vel (geometry_msgs/Twist)

    Services:
    - ~reset (std_srvs/Empty)
    - ~get_diagnostics (std_srvs/Trigger, JSON diagnostics in message)
    """

    def __init__(self):
        if not ROS1_AVAILABLE:
            raise RuntimeError("ROS1 (rospy) not available")

        rospy.init_node('reactive_avoidance_node', anonymous=False)
        AvoidanceNodeBase.__init__(self)

        # 1. Load parameters
        self._params = ParamLoader.load(node=None)
        self._topics = ParamLoader.get_topics(node=None)
        queues = ParamLoader.get_queue_config(node=None)

        # 2. Initialize core components (base class method)
        self._initialize()
        self._twist_adapter = TwistAdapter(twist_cls=Twist, get_time_func=self._get_time)

        # 3. Create ROS1 interfaces
        self._cmd_pub = rospy.Publisher(
            self._topics['cmd_vel'], Twist, queue_size=queues['cmd_queue_size'])
        self._scan_sub = rospy.Subscriber(
            self._topics['scan'], LaserScan, self._on_scan,
            queue_size=queues['scan_queue_size'])
        self._reset_srv = rospy.Service('~reset', EmptySrv, self._reset_callback)
        self._diag_srv = rospy.Service(
            '~get_diagnostics', Trigger, self._get_diagnostics_callback)

        # 4. Create control timer
        control_period = self._controller.control_period
        self._control_timer = rospy.Timer(
            rospy.Duration(control_period),
            self._control_callback
        )

        rospy.on_shutdown(self.shutdown)

        log_info(
            f"Avoidance node initialized (scan={self._topics['scan']}, "
            f"cmd_vel={self._topics['cmd_vel']}, period={control_period * 1000:.0f}ms)"
        )

    # ==================== Callbacks ====================

    def _control_callback(self, event):
        """Control timer callback"""
        cmd = self._control_loop_core()
        if cmd is not None:
            self._publish_cmd(cmd)

    def _reset_callback(self, request):
        self._handle_reset()
        return EmptyResponse()

    def _get_diagnostics_callback(self, request):
        success, message = self._diagnostics_trigger_result()
        return TriggerResponse(success=success, message=message)

    # ==================== Abstract Method Implementations ====================

    def _get_time(self) -> float:
        """Get current ROS time (seconds)"""
        return get_time_sec()

    def _log_info(self, msg: str):
        log_info(msg)

    def _log_warn(self, msg: str):
        log_warn(msg)

    def _log_warn_throttle(self, period: float, msg: str):
        log_warn_throttle(period, msg)

    def _log_error(self, msg: str):
        log_error(msg)

    def _publish_cmd(self, cmd: VelocityCommand):
        self._cmd_pub.publish(self._twist_adapter.to_ros(cmd))

    def _publish_stop_cmd(self):
        self._cmd_pub.publish(self._twist_adapter.create_stop_cmd())

    def shutdown(self):
        """Stop the control timer before publishing the final stop command"""
        if getattr(self, '_control_timer', None) is not None:
            self._control_timer.shutdown()
        AvoidanceNodeBase.shutdown(self)

    def run(self):
        """Run the node"""
        log_info("Avoidance node running...")
        rospy.spin()


def main():
    """Main entry point"""
    try:
        node = AvoidanceNodeROS1()
        node.run()
    except rospy.ROSInterruptException:
        pass


if __name__ == '__main__':
    main()
