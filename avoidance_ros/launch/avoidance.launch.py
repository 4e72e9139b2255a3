"""
避障 ROS2 启动文件

使用方法:
    ros2 launch avoidance_ros avoidance.launch.py
    ros2 launch avoidance_ros avoidance.launch.py scan_topic:=/scan cmd_vel_topic:=/cmd_vel
"""
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration, PathJoinSubstitution
from launch_ros.actions import Node
from launch_ros.substitutions import FindPackageShare


def generate_launch_description():
    pkg_share = FindPackageShare('avoidance_ros')

    use_sim_time_arg = DeclareLaunchArgument(
        'use_sim_time',
        default_value='false',
        description='Use simulation time'
    )

    ctrl_freq_arg = DeclareLaunchArgument(
        'ctrl_freq',
        default_value='20',
        description='Control frequency (Hz)'
    )

    scan_topic_arg = DeclareLaunchArgument(
        'scan_topic',
        default_value='input_scan',
        description='sensor_msgs/LaserScan input topic'
    )

    cmd_vel_topic_arg = DeclareLaunchArgument(
        'cmd_vel_topic',
        default_value='output_vel',
        description='geometry_msgs/Twist output topic'
    )

    base_config = PathJoinSubstitution([
        pkg_share, 'config', 'avoidance_params.yaml'
    ])

    avoidance_node = Node(
        package='avoidance_ros',
        executable='avoidance_node.py',
        name='reactive_avoidance_node',
        output='screen',
        parameters=[
            base_config,
            {
                'system.ctrl_freq': LaunchConfiguration('ctrl_freq'),
                'use_sim_time': LaunchConfiguration('use_sim_time'),
            }
        ],
        remappings=[
            ('input_scan', LaunchConfiguration('scan_topic')),
            ('output_vel', LaunchConfiguration('cmd_vel_topic')),
        ],
    )

    return LaunchDescription([
        use_sim_time_arg,
        ctrl_freq_arg,
        scan_topic_arg,
        cmd_vel_topic_arg,
        avoidance_node,
    ])
