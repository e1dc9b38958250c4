"""Fixed-interval data acquisition.

Each step either pulls one line from the serial port or, while
disconnected, copies the fallback fractions into the reading.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core import FallbackSource, Reading
from ..core.errors import ReadError, ReadTimeout
from .parser import ParseResult, SensorLineParser
from .ports import PortManager

logger = logging.getLogger(__name__)


class AcquisitionLoop:
    """Polls the port on a wall-clock interval, independent of frame rate."""

    DEFAULT_INTERVAL = 0.1  # Seconds

    def __init__(
        self,
        reading: Reading,
        parser: SensorLineParser,
        ports: PortManager,
        fallback: FallbackSource,
        interval: float = DEFAULT_INTERVAL,
    ):
        self.reading = reading
        self.parser = parser
        self.ports = ports
        self.fallback = fallback
        self.interval = interval
        self.last_line = ""
        self.last_result: Optional[ParseResult] = None
        self._elapsed = 0.0

    def tick(self, dt: float) -> bool:
        """Accumulate ``dt`` and run a step when the interval has passed.

        Returns:
            True if a step ran.
        """
        self._elapsed += dt
        if self._elapsed < self.interval:
            return False
        self._elapsed = 0.0
        self.step()
        return True

    def step(self) -> None:
        """Run one acquisition step in the mode given by the connection."""
        if self.ports.is_connected:
            self.read_device()
        else:
            self.apply_fallback()

    def read_device(self) -> Optional[ParseResult]:
        """Read and apply at most one line. Read errors are not fatal."""
        handler = self.ports.handler
        try:
            if handler.in_waiting <= 0:
                return None
            raw = handler.readline()
        except ReadTimeout:
            # No complete line yet
            return None
        except ReadError as e:
            # Keep the connection, try again next interval
            logger.error(f"Error reading from device: {e}")
            return None

        return self.process_line(raw)

    def process_line(self, raw: str) -> ParseResult:
        """Parse a raw line and merge what parsed into the reading."""
        self.last_line = raw
        result = self.parser.parse(raw)
        self.last_result = result
        if result.ok:
            self.reading.merge(result.reading)
        return result

    def apply_fallback(self) -> None:
        t, h, g = self.fallback.fractions
        self.reading.set_from_fractions(t, h, g, self.parser.limits)

    def reset(self) -> None:
        self._elapsed = 0.0
