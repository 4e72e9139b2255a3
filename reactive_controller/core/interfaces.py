"""接口定义"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from .data_types import DirectionalReadings, ObstacleFlags, VelocityCommand


class ILifecycleComponent(ABC):
    """
    生命周期组件

    reset() 必须实现且可重复调用；其余方法有默认实现。
    """

    @abstractmethod
    def reset(self) -> None:
        """回到刚构造完成的状态，对象可以继续使用"""
        pass

    def shutdown(self) -> None:
        """释放资源，之后不应再使用该对象"""
        pass

    def initialize(self) -> bool:
        """构造即完成初始化的组件直接返回 True"""
        return True

    def get_health_status(self) -> Optional[Dict[str, Any]]:
        """
        Returns:
            至少包含 'healthy' (bool)、'state' (str)、'message' (str) 的字典；
            不提供健康状态时返回 None
        """
        return None


class IAvoidancePolicy(ILifecycleComponent):
    """避障策略接口

    输入一个周期的三方向读数，输出速度命令。
    策略本身无跨周期状态，同样的读数必须得到同样的命令。
    """

    @abstractmethod
    def detect(self, readings: DirectionalReadings) -> ObstacleFlags:
        """判定各方向是否存在障碍物"""
        pass

    @abstractmethod
    def decide(self, obstacles: ObstacleFlags) -> VelocityCommand:
        """根据障碍物判定结果生成速度命令"""
        pass

    def reset(self) -> None:
        pass
