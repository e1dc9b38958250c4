"""Sensor monitor: owns the reading state and drives every component.

The monitor is UI independent. A host calls :meth:`SensorMonitor.start`
once, :meth:`SensorMonitor.tick` once per frame with the elapsed time and
:meth:`SensorMonitor.shutdown` on exit. Views receive snapshots through an
optional :class:`PresentationSink`.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .core import (
    AppSettings,
    ConnectionState,
    DisplaySnapshot,
    FallbackSource,
    FanAnimator,
    PresentationSink,
    Reading,
)
from .serial import AcquisitionLoop, ParseResult, PortManager, SensorLineParser

logger = logging.getLogger(__name__)


class SensorMonitor:
    """Connects the port, parser, fallback input and fan model."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        ports: Optional[PortManager] = None,
        sink: Optional[PresentationSink] = None,
        fallback: Optional[FallbackSource] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or AppSettings()
        self.reading = Reading()
        self.sink = sink
        self.fallback = fallback or FallbackSource()
        self.ports = ports or PortManager(baud=self.settings.baud_rate)
        self._rng = rng or random.Random()
        self._running = False

        limits = self.settings.limits
        self.parser = SensorLineParser(limits, self.settings.min_line_length)
        self.fan = FanAnimator(
            limits,
            max_speed=self.settings.max_fan_speed,
            smooth_time=self.settings.fan_smooth_time,
            degrees_per_unit_speed=self.settings.degrees_per_rpm,
        )
        self.acquisition = AcquisitionLoop(
            self.reading,
            self.parser,
            self.ports,
            self.fallback,
            interval=self.settings.poll_interval,
        )
        self.fallback.subscribe(self._on_fallback_changed)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Show the initial state and connect if auto-connect is enabled."""
        self._running = True
        self._sync_fallback()
        self._publish_status()
        self.render()
        if self.settings.auto_connect:
            self.connect()

    def tick(self, dt: float) -> None:
        """Advance acquisition and the fan by ``dt`` seconds, then render."""
        if self.acquisition.tick(dt):
            self._sync_fallback()
        self.fan.update(self.reading, dt)
        self.render()

    def shutdown(self) -> None:
        """Close the serial port. Safe to call more than once."""
        if self._running:
            logger.info("Shutting down sensor monitor")
        self._running = False
        self.ports.close()

    # -------------------------------------------------------------------------
    # Connection commands
    # -------------------------------------------------------------------------

    def connect(self) -> ConnectionState:
        if not self.is_connected:
            self.ports.connect(self.settings.baud_rate)
            self.acquisition.reset()
            self._publish_status()
        return self.ports.state

    def disconnect(self) -> ConnectionState:
        if self.is_connected:
            self.ports.disconnect()
            self._publish_status()
        return self.ports.state

    def reconnect(self) -> ConnectionState:
        self.disconnect()
        return self.connect()

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def apply_settings(self, settings: AppSettings) -> None:
        """Use new settings. Serial changes apply on the next connect."""
        limits = settings.limits
        self.settings = settings
        self.ports.baud = settings.baud_rate
        self.parser.limits = limits
        self.parser.min_line_length = settings.min_line_length
        self.fan.limits = limits
        self.fan.max_speed = settings.max_fan_speed
        self.fan.smooth_time = settings.fan_smooth_time
        self.fan.degrees_per_unit_speed = settings.degrees_per_rpm
        self.acquisition.interval = settings.poll_interval
        if not self.is_connected:
            self.acquisition.apply_fallback()
        self.render()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def snapshot(self) -> DisplaySnapshot:
        return DisplaySnapshot.capture(
            self.reading, self.fan.state, self.ports.state, self.parser.limits,
            last_line=self.last_line,
        )

    def render(self) -> None:
        if self.sink is not None:
            self.sink.render(self.snapshot())

    def _publish_status(self) -> None:
        if self.sink is not None:
            self.sink.show_status(self.ports.state)

    def _sync_fallback(self) -> None:
        # Manual input follows the displayed values, so switching to it
        # after a disconnect starts from the last known reading
        self.fallback.sync(*self.reading.fractions(self.parser.limits))

    def _on_fallback_changed(self, temperature: float, humidity: float, gas: float) -> None:
        # Manual input only counts while no device is connected
        if self.is_connected:
            return
        self.reading.set_from_fractions(temperature, humidity, gas, self.parser.limits)
        self.render()

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def log_current_values(self) -> None:
        logger.info(f"Current Values - {self.reading}")
        logger.info(f"Last Arduino Data: {self.last_line}")

    def simulate_data(self) -> ParseResult:
        """Feed a random, well-formed line through the parser."""
        line = (
            f"H:{self._rng.uniform(40.0, 95.0):.1f},"
            f"T:{self._rng.uniform(20.0, 40.0):.1f},"
            f"G:{self._rng.randrange(100, 900)}"
        )
        result = self.acquisition.process_line(line)
        logger.info(f"Simulated Arduino data: {line}")
        self._sync_fallback()
        self.render()
        return result

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    @property
    def temperature(self) -> float:
        return self.reading.temperature

    @property
    def humidity(self) -> float:
        return self.reading.humidity

    @property
    def gas(self) -> float:
        return self.reading.gas

    @property
    def fan_speed(self) -> float:
        return self.fan.state.current_speed

    @property
    def connection(self) -> ConnectionState:
        return self.ports.state

    @property
    def is_connected(self) -> bool:
        return self.ports.is_connected

    @property
    def last_line(self) -> str:
        return self.acquisition.last_line
