"""
反应式避障控制器主入口 - 演示脚本

在合成的方形房间中运行控制器，用独轮车模型积分速度命令并打印轨迹。
使用模拟数据，不适用于生产环境。

生产环境使用示例:
    from reactive_controller import ReactiveController, load_config

    controller = ReactiveController(load_config('avoidance_params.yaml'))

    # 激光回调
    controller.on_snapshot(SensorSnapshot(scan.ranges))

    # 定时器回调
    cmd = controller.run_control_cycle()

演示用法:
    python -m reactive_controller.main
    python -m reactive_controller.main --config avoidance_params.yaml --steps 400 -v
"""
import argparse
import logging
import sys

from .config.loader import load_config
from .core.exceptions import ConfigurationError
from .core.logging_config import configure_logging
from .manager.reactive_controller import ReactiveController
from .mock.test_data_generator import create_room_scan, step_unicycle


def main(argv=None) -> int:
    """主函数"""
    parser = argparse.ArgumentParser(
        description='反应式避障控制器演示',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--config', type=str, default=None,
                        help='YAML 配置文件路径 (默认: 内置默认配置)')
    parser.add_argument('--steps', type=int, default=200,
                        help='仿真步数 (默认: 200)')
    parser.add_argument('--room', type=float, default=2.0,
                        help='房间半边长 (m) (默认: 2.0)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='输出每个周期的 "左 前 右" 读数和 DEBUG 日志')
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"配置错误: {e}", file=sys.stderr)
        return 1

    # 演示默认只打印轨迹摘要
    if not args.verbose:
        config['diagnostics']['log_readings'] = False

    controller = ReactiveController(config, validate_config=False)
    dt = controller.control_period

    print("=" * 60)
    print("反应式避障控制器 (Reactive Avoidance Controller)")
    print("=" * 60)
    print(f"控制频率: {config['system']['ctrl_freq']} Hz")
    print(f"障碍物阈值: {config['avoidance']['obstacle_distance']} m")
    print(f"房间尺寸: {2 * args.room:.1f} m x {2 * args.room:.1f} m")
    print("-" * 60)

    # 房间中偏右放一根柱子
    obstacles = [(0.8, -0.4, 0.2)]
    x, y, theta = -1.0, 0.0, 0.0

    for i in range(args.steps):
        controller.on_snapshot(create_room_scan(x, y, theta, half_size=args.room,
                                                obstacles=obstacles))
        cmd = controller.run_control_cycle()
        if cmd is None:
            continue

        x, y, theta = step_unicycle(x, y, theta, cmd.linear_x, cmd.angular_z, dt)

        if i % 20 == 0:
            print(f"Step {i:4d}: pos=({x:+.2f}, {y:+.2f}), theta={theta:+.2f} rad, "
                  f"v={cmd.linear_x:.2f}, omega={cmd.angular_z:+.2f}")

    print("-" * 60)
    diag = controller.get_diagnostics()
    print(f"最终状态: {diag['state']}")
    print(f"控制周期: {diag['cycles_run']}，最后读数: {diag['last_readings']}")

    controller.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
