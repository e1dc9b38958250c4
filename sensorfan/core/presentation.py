"""Contracts between the monitor and whatever displays it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Protocol, Tuple

from .fan import FanState
from .reading import ConnectionState, Reading, SensorLimits


@dataclass(frozen=True)
class DisplaySnapshot:
    """Everything a view needs to draw one frame."""
    temperature: float
    humidity: float
    gas: float
    fan_speed: float
    fan_angle: float
    connection_status: str
    connected: bool
    fractions: Tuple[float, float, float]  # temperature, humidity, gas in [0, 1]
    last_line: str = ""

    @classmethod
    def capture(
        cls,
        reading: Reading,
        fan: FanState,
        connection: ConnectionState,
        limits: SensorLimits,
        last_line: str = "",
    ) -> 'DisplaySnapshot':
        return cls(
            temperature=reading.temperature,
            humidity=reading.humidity,
            gas=reading.gas,
            fan_speed=fan.current_speed,
            fan_angle=fan.angle,
            connection_status=connection.message,
            connected=connection.is_connected,
            fractions=reading.fractions(limits),
            last_line=last_line,
        )

    @property
    def temperature_text(self) -> str:
        return f"{self.temperature:.1f}°C"

    @property
    def humidity_text(self) -> str:
        return f"{self.humidity:.1f}%"

    @property
    def gas_text(self) -> str:
        return f"{self.gas:.0f}"

    @property
    def fan_speed_text(self) -> str:
        return f"{self.fan_speed:.0f} RPM"


class PresentationSink(Protocol):
    """Receives snapshots. Must not feed anything back into acquisition."""

    def render(self, snapshot: DisplaySnapshot) -> None: ...

    def show_status(self, connection: ConnectionState) -> None: ...


FractionListener = Callable[[float, float, float], None]


class FallbackSource:
    """Manually supplied sensor fractions, used while no device is connected.

    Holds one [0, 1] fraction per channel and notifies subscribers whenever
    one of them changes.
    """

    CHANNELS = ('temperature', 'humidity', 'gas')

    def __init__(self, temperature: float = 0.0, humidity: float = 0.0, gas: float = 0.0):
        self._values = {
            'temperature': self._clamp(temperature),
            'humidity': self._clamp(humidity),
            'gas': self._clamp(gas),
        }
        self._listeners: List[FractionListener] = []

    @staticmethod
    def _clamp(value: float) -> float:
        return max(0.0, min(float(value), 1.0))

    @property
    def fractions(self) -> Tuple[float, float, float]:
        v = self._values
        return v['temperature'], v['humidity'], v['gas']

    def subscribe(self, listener: FractionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: FractionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_fraction(self, channel: str, value: float) -> None:
        """Update one channel and notify subscribers if it changed."""
        if channel not in self._values:
            raise KeyError(f"Unknown channel: {channel}")
        value = self._clamp(value)
        if self._values[channel] == value:
            return
        self._values[channel] = value
        self._notify()

    def sync(self, temperature: float, humidity: float, gas: float) -> None:
        """Follow the live values without notifying anyone."""
        self._values['temperature'] = self._clamp(temperature)
        self._values['humidity'] = self._clamp(humidity)
        self._values['gas'] = self._clamp(gas)

    def _notify(self) -> None:
        fractions = self.fractions
        for listener in list(self._listeners):
            listener(*fractions)
