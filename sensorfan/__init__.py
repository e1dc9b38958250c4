"""SensorFan application package."""

from .version import __version__, __version_info__, APP_NAME
from .core import (
    AppSettings,
    ConnectionState,
    FallbackSource,
    FanAnimator,
    Reading,
    SensorLimits,
)
from .serial import PortManager, SensorLineParser, SerialConfig
from .monitor import SensorMonitor

__all__ = [
    "__version__",
    "__version_info__",
    "APP_NAME",
    "AppSettings",
    "ConnectionState",
    "FallbackSource",
    "FanAnimator",
    "Reading",
    "SensorLimits",
    "PortManager",
    "SensorLineParser",
    "SerialConfig",
    "SensorMonitor",
]
