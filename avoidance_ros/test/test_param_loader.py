"""
ParamLoader 单元测试

测试配置加载器的核心功能:
1. 递归加载 ROS 参数
2. 类型转换
3. 默认值回退
4. 话题和队列配置
"""
import copy
import sys
import os

import pytest
from unittest.mock import MagicMock, patch

_test_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(_test_dir, '..', 'src'))

from reactive_controller.config.default_config import DEFAULT_CONFIG
from reactive_controller.core.exceptions import ConfigValidationError
from fixtures import MockParamNode, MockParameterTypeError


class TestParamTypeConversion:
    """测试类型转换功能"""

    def test_convert_int_to_float(self):
        """测试 int -> float 转换 (YAML 可能将 1.0 写成 1)"""
        from avoidance_ros.utils.param_utils import convert_param_type

        result = convert_param_type(1, 0.5)
        assert isinstance(result, float)
        assert result == 1.0

    def test_convert_float_to_int(self):
        from avoidance_ros.utils.param_utils import convert_param_type

        result = convert_param_type(10.0, 20)
        assert isinstance(result, int)
        assert result == 10

    def test_convert_bool_preserved(self):
        from avoidance_ros.utils.param_utils import convert_param_type

        assert convert_param_type(False, True) is False
        assert convert_param_type('false', True) is False
        assert convert_param_type('True', False) is True

    def test_bool_not_accepted_as_number(self):
        """测试 bool 不会被当作数值"""
        from avoidance_ros.utils.param_utils import convert_param_type

        assert convert_param_type(True, 0.5) == 0.5
        assert convert_param_type(True, 20) == 20

    def test_unconvertible_falls_back_to_default(self):
        from avoidance_ros.utils.param_utils import convert_param_type

        assert convert_param_type('fast', 0.5) == 0.5
        assert convert_param_type('many', 20) == 20

    def test_convert_string(self):
        from avoidance_ros.utils.param_utils import convert_param_type

        assert convert_param_type('/scan', 'input_scan') == '/scan'

    def test_convert_none(self):
        from avoidance_ros.utils.param_utils import convert_param_type

        assert convert_param_type(None, 0.5) == 0.5
        assert convert_param_type(0.5, None) == 0.5


class TestParamStrategies:
    """测试参数读取策略"""

    def test_default_strategy_returns_default(self):
        from avoidance_ros.utils.param_utils import DefaultStrategy

        strategy = DefaultStrategy()
        assert strategy.get_param('avoidance/linear_speed', 0.2) == 0.2
        assert strategy.has_param('avoidance/linear_speed') is False

    def test_dict_strategy(self):
        from avoidance_ros.utils.param_utils import DictStrategy

        strategy = DictStrategy({'avoidance/linear_speed': 0.1})
        assert strategy.get_param('avoidance/linear_speed', 0.2) == 0.1
        assert strategy.get_param('avoidance/angular_speed', 0.5) == 0.5
        assert strategy.has_param('avoidance/linear_speed') is True

    def test_ros2_strategy_declares_dotted_names(self, mock_rcl_interfaces):
        """测试 ROS2 策略以 '.' 分隔的参数名声明动态类型参数"""
        from avoidance_ros.utils.param_utils import ROS2Strategy

        node = MagicMock()
        node.has_parameter.return_value = False
        node.get_parameter.return_value.value = 0.7

        value = ROS2Strategy(node).get_param('avoidance/obstacle_distance', 0.5)

        node.declare_parameter.assert_called_once()
        name, default, descriptor = node.declare_parameter.call_args[0]
        assert (name, default) == ('avoidance.obstacle_distance', 0.5)
        assert descriptor.dynamic_typing is True
        node.get_parameter.assert_called_once_with('avoidance.obstacle_distance')
        assert value == 0.7

    def test_ros2_strategy_does_not_redeclare(self, mock_rcl_interfaces):
        from avoidance_ros.utils.param_utils import ROS2Strategy

        node = MagicMock()
        node.has_parameter.return_value = True
        node.get_parameter.return_value.value = 30

        assert ROS2Strategy(node).get_param('system/ctrl_freq', 20) == 30
        node.declare_parameter.assert_not_called()

    def test_ros2_override_with_other_numeric_type(self, mock_rcl_interfaces):
        """测试命令行覆盖值类型与默认值不同 (1 对 0.5, 20.0 对 20) 时正常加载"""
        from avoidance_ros.utils.param_utils import ROS2Strategy, load_params_recursive

        node = MockParamNode({
            'avoidance.obstacle_distance': 1,
            'system.ctrl_freq': 20.0,
        })
        config = copy.deepcopy(DEFAULT_CONFIG)

        load_params_recursive(config, '', ROS2Strategy(node))

        assert config['avoidance']['obstacle_distance'] == 1.0
        assert isinstance(config['avoidance']['obstacle_distance'], float)
        assert config['system']['ctrl_freq'] == 20
        assert isinstance(config['system']['ctrl_freq'], int)

    def test_param_node_mock_rejects_static_type_change(self):
        """测试 Mock 节点与 rclpy 一致: 静态类型参数拒绝不同类型的覆盖值"""
        node = MockParamNode({'avoidance.obstacle_distance': 1})

        with pytest.raises(MockParameterTypeError):
            node.declare_parameter('avoidance.obstacle_distance', 0.5)

    def test_get_strategy_selection(self, mock_rcl_interfaces):
        from avoidance_ros.utils.param_utils import (
            get_strategy, ROS2Strategy, DefaultStrategy
        )

        assert isinstance(get_strategy(MagicMock(), ros_version=2), ROS2Strategy)
        # ROS2 但没有节点时无法读取参数
        assert isinstance(get_strategy(None, ros_version=2), DefaultStrategy)
        assert isinstance(get_strategy(None, ros_version=0), DefaultStrategy)


class TestLoadParamsRecursive:

    def test_overrides_nested_values(self):
        from avoidance_ros.utils.param_utils import load_params_recursive, DictStrategy

        config = copy.deepcopy(DEFAULT_CONFIG)
        strategy = DictStrategy({
            'avoidance/obstacle_distance': 0.8,
            'system/ctrl_freq': 10.0,
        })

        overridden = load_params_recursive(config, '', strategy)

        assert config['avoidance']['obstacle_distance'] == 0.8
        assert config['system']['ctrl_freq'] == 10
        assert isinstance(config['system']['ctrl_freq'], int)
        assert config['avoidance']['linear_speed'] == 0.2
        assert sorted(overridden) == ['avoidance/obstacle_distance', 'system/ctrl_freq']

    def test_template_not_shared(self):
        """测试加载不修改 DEFAULT_CONFIG"""
        from avoidance_ros.utils.param_utils import load_params_recursive, DictStrategy

        config = copy.deepcopy(DEFAULT_CONFIG)
        load_params_recursive(config, '', DictStrategy({'avoidance/linear_speed': 0.1}))

        assert DEFAULT_CONFIG['avoidance']['linear_speed'] == 0.2


class TestParamLoader:

    def _patch_strategy(self, params):
        from avoidance_ros.utils.param_utils import DictStrategy
        return patch('avoidance_ros.utils.param_loader.get_strategy',
                     return_value=DictStrategy(params))

    def test_load_defaults(self):
        from avoidance_ros.utils.param_loader import ParamLoader

        with self._patch_strategy({}):
            config = ParamLoader.load()

        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_load_overrides(self):
        from avoidance_ros.utils.param_loader import ParamLoader

        with self._patch_strategy({
            'avoidance/angular_speed': 0.3,
            'diagnostics/log_readings': False,
        }):
            config = ParamLoader.load()

        assert config['avoidance']['angular_speed'] == 0.3
        assert config['diagnostics']['log_readings'] is False

    def test_load_validates(self):
        from avoidance_ros.utils.param_loader import ParamLoader

        with self._patch_strategy({'avoidance/obstacle_distance': -1.0}):
            with pytest.raises(ConfigValidationError):
                ParamLoader.load()

            config = ParamLoader.load(validate=False)
            assert config['avoidance']['obstacle_distance'] == -1.0

    def test_load_non_strict_allows_errors(self):
        """测试非严格模式下 ERROR 级别不阻止启动"""
        from avoidance_ros.utils.param_loader import ParamLoader

        with self._patch_strategy({'avoidance/linear_speed': 50.0}):
            with pytest.raises(ConfigValidationError):
                ParamLoader.load()
            assert ParamLoader.load(strict=False)['avoidance']['linear_speed'] == 50.0

    def test_get_topics_defaults(self):
        from avoidance_ros.utils.param_loader import ParamLoader, TOPICS_DEFAULTS

        with self._patch_strategy({}):
            topics = ParamLoader.get_topics()

        assert topics == {'scan': 'input_scan', 'cmd_vel': 'output_vel'}
        assert topics == TOPICS_DEFAULTS

    def test_get_topics_override(self):
        from avoidance_ros.utils.param_loader import ParamLoader

        with self._patch_strategy({'topics/scan': '/scan', 'topics/cmd_vel': '/cmd_vel'}):
            topics = ParamLoader.get_topics()

        assert topics == {'scan': '/scan', 'cmd_vel': '/cmd_vel'}

    def test_get_queue_config(self):
        from avoidance_ros.utils.param_loader import ParamLoader

        with self._patch_strategy({}):
            assert ParamLoader.get_queue_config() == {
                'scan_queue_size': 100, 'cmd_queue_size': 100}

        with self._patch_strategy({'queue/scan_queue_size': 5, 'queue/cmd_queue_size': 0}):
            queues = ParamLoader.get_queue_config()

        assert queues['scan_queue_size'] == 5
        # 非正值回退到默认
        assert queues['cmd_queue_size'] == 100


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
