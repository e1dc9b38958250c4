"""Serial communication package for SensorFan."""

from .config import SerialConfig
from .parser import ParseResult, SensorLineParser
from .handler import SerialPortHandler
from .ports import PortDiscovery, PortManager
from .acquisition import AcquisitionLoop

__all__ = [
    "SerialConfig",
    "ParseResult",
    "SensorLineParser",
    "SerialPortHandler",
    "PortDiscovery",
    "PortManager",
    "AcquisitionLoop",
]
