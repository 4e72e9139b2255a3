"""核心模块"""
from .enums import ControllerState
from .data_types import (
    Header, SensorSnapshot, DirectionalReadings, ObstacleFlags, VelocityCommand,
)
from .interfaces import ILifecycleComponent, IAvoidancePolicy
from .exceptions import (
    ControllerError, ConfigurationError, ConfigValidationError,
    ControllerRuntimeError, MalformedSnapshotError,
)
from .logging_config import get_logger, configure_logging, ThrottledLogger
