"""Sensor reading data structures."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

# Relative humidity is a percentage, so its range is not configurable
HUMIDITY_LIMIT = 100.0


@dataclass
class SensorLimits:
    """Upper bounds used for clamping and normalization."""
    max_temperature: float = 50.0
    max_gas: float = 1023.0  # Arduino analog input range (0-1023)

    def __post_init__(self) -> None:
        if self.max_temperature <= 0:
            raise ValueError(f"max_temperature must be positive, got {self.max_temperature}")
        if self.max_gas <= 0:
            raise ValueError(f"max_gas must be positive, got {self.max_gas}")

    @property
    def max_humidity(self) -> float:
        return HUMIDITY_LIMIT

    def as_array(self) -> np.ndarray:
        """Limits in (temperature, humidity, gas) order."""
        return np.array([self.max_temperature, HUMIDITY_LIMIT, self.max_gas], dtype=np.float64)


@dataclass
class PartialReading:
    """Fields found in one device line. Missing fields are None."""
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    gas: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.temperature is None and self.humidity is None and self.gas is None


@dataclass
class Reading:
    """Latest value of each sensor."""
    temperature: float = 0.0
    humidity: float = 0.0
    gas: float = 0.0

    def merge(self, partial: PartialReading) -> None:
        """Copy the fields present in ``partial``, keep the others."""
        if partial.temperature is not None:
            self.temperature = partial.temperature
        if partial.humidity is not None:
            self.humidity = partial.humidity
        if partial.gas is not None:
            self.gas = partial.gas

    def set_from_fractions(
        self,
        temperature: float,
        humidity: float,
        gas: float,
        limits: SensorLimits,
    ) -> None:
        """Scale [0, 1] fractions to physical units."""
        self.temperature = temperature * limits.max_temperature
        self.humidity = humidity * HUMIDITY_LIMIT
        self.gas = gas * limits.max_gas

    def factors(self, limits: SensorLimits) -> np.ndarray:
        """Each value divided by its limit, clamped to [0, 1]."""
        values = np.array([self.temperature, self.humidity, self.gas], dtype=np.float64)
        return np.clip(values / limits.as_array(), 0.0, 1.0)

    def fractions(self, limits: SensorLimits) -> Tuple[float, float, float]:
        """Slider positions for the current values (temperature, humidity, gas)."""
        t, h, g = self.factors(limits)
        return float(t), float(h), float(g)

    def __str__(self) -> str:
        return (
            f"Temp: {self.temperature:.1f}°C, "
            f"Hum: {self.humidity:.1f}%, "
            f"Gas: {self.gas:.0f}"
        )


@dataclass(frozen=True)
class ConnectionState:
    """Either connected to a named port or disconnected with a reason."""
    port: Optional[str] = None
    message: str = "DISCONNECTED"
    reason: Optional[Exception] = None

    @classmethod
    def connected_to(cls, port: str) -> 'ConnectionState':
        return cls(port=port, message=f"Connected: {port}")

    @classmethod
    def disconnected(cls, message: str = "Disconnected",
                     reason: Optional[Exception] = None) -> 'ConnectionState':
        return cls(port=None, message=message, reason=reason)

    @property
    def is_connected(self) -> bool:
        return self.port is not None
