"""Core data structures and models for SensorFan."""

from .reading import (
    ConnectionState,
    PartialReading,
    Reading,
    SensorLimits,
)
from .fan import FanAnimator, FanState, smooth_damp
from .presentation import DisplaySnapshot, FallbackSource, PresentationSink
from .settings import AppSettings

__all__ = [
    'ConnectionState',
    'PartialReading',
    'Reading',
    'SensorLimits',
    'FanAnimator',
    'FanState',
    'smooth_damp',
    'DisplaySnapshot',
    'FallbackSource',
    'PresentationSink',
    'AppSettings',
]
