"""Low-level serial port handler."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import serial

from ..core.errors import OpenFailed, ReadError, ReadTimeout
from .config import SerialConfig

logger = logging.getLogger(__name__)


class SerialPortHandler:
    """Handles low-level operations on one serial port.

    Reads are line based with a short timeout. Bytes received without a
    trailing newline are kept until the rest of the line arrives.
    """

    def __init__(
        self,
        port: str,
        baud: int = SerialConfig.DEFAULT_BAUD,
        timeout: float = SerialConfig.READ_TIMEOUT,
        serial_factory: Callable[[], serial.Serial] = serial.Serial,
    ):
        self.port = port
        self.baud = baud
        self.timeout = timeout
        self._serial_factory = serial_factory
        self._ser: Optional[serial.Serial] = None
        self._pending = b''

    @property
    def is_open(self) -> bool:
        """Check if port is open."""
        return self._ser is not None and self._ser.is_open

    @property
    def in_waiting(self) -> int:
        """Number of bytes buffered by the OS."""
        if not self.is_open:
            return 0
        try:
            return self._ser.in_waiting
        except (serial.SerialException, OSError) as e:
            raise ReadError(f"Error polling {self.port}: {e}") from e

    def open(self) -> None:
        """Open the port with DTR/RTS asserted and an empty input buffer.

        Asserting DTR resets most Arduino boards, so the first lines after
        opening come from a fresh sketch.

        Raises:
            OpenFailed: The port could not be opened.
        """
        ser = self._serial_factory()
        try:
            ser.port = self.port
            ser.baudrate = self.baud
            ser.timeout = self.timeout
            ser.dtr = True
            ser.rts = True
            ser.open()
            ser.reset_input_buffer()  # Flush any old data
        except (serial.SerialException, OSError, ValueError) as e:
            self._close_serial(ser)
            raise OpenFailed(self.port, str(e)) from e

        self._ser = ser
        self._pending = b''
        logger.info(f"Opened {self.port} at {self.baud} baud")

    def readline(self) -> str:
        """Read one complete line, without its line terminator.

        Raises:
            ReadTimeout: No complete line within the timeout.
            ReadError: The port is closed or the read failed.
        """
        if not self.is_open:
            raise ReadError(f"{self.port} is not open")

        try:
            raw = self._ser.readline()
        except (serial.SerialException, OSError) as e:
            raise ReadError(f"Error reading from {self.port}: {e}") from e

        if raw:
            self._pending += raw
        if not self._pending.endswith(b'\n'):
            if len(self._pending) > SerialConfig.MAX_LINE_BYTES:
                logger.warning(
                    f"Discarding {len(self._pending)} bytes from {self.port} without a line end"
                )
                self._pending = b''
            raise ReadTimeout(f"No complete line from {self.port}")

        # Undecodable bytes become U+FFFD so the field fails to parse
        line = self._pending.decode(SerialConfig.ENCODING, errors='replace')
        self._pending = b''
        return line.rstrip('\r\n')

    def close(self) -> None:
        """Close the port. Safe to call more than once."""
        if self._ser is not None:
            self._close_serial(self._ser)
            logger.info(f"Serial port {self.port} closed.")
            self._ser = None
        self._pending = b''

    @staticmethod
    def _close_serial(ser: serial.Serial) -> None:
        try:
            if ser.is_open:
                ser.close()
        except (serial.SerialException, OSError) as e:
            logger.debug(f"Ignoring error while closing port: {e}")
