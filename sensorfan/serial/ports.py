"""Serial port discovery and connection management."""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Tuple

from serial.tools import list_ports
from serial.tools.list_ports_common import ListPortInfo

from ..core import ConnectionState
from ..core.errors import AllPortsFailed, NoPortsAvailable, OpenFailed
from .config import SerialConfig
from .handler import SerialPortHandler

logger = logging.getLogger(__name__)

HandlerFactory = Callable[[str, int], SerialPortHandler]


class PortDiscovery:
    """Serial port discovery utility."""

    USB_MARKERS = ['USB', 'ACM', 'FTDI', 'CP210', 'CH340', 'PL2303', 'ARDUINO']
    DEVICE_PATTERN = re.compile(r'ttyUSB|ttyACM|ttyAMA|cu\.usb|COM\d+', re.I)

    @staticmethod
    def comports() -> List[ListPortInfo]:
        """Ports reported by the OS, or an empty list if enumeration fails."""
        try:
            return list(list_ports.comports())
        except (TypeError, ValueError, OSError) as e:
            # pyserial can fail in sandboxed environments (snap/flatpak)
            logger.warning(f"Error listing serial ports: {e}")
            return []

    @classmethod
    def list_ports(cls) -> List[str]:
        """Port device names in the order the OS returns them."""
        return [p.device for p in cls.comports()]

    @classmethod
    def describe_ports(cls) -> List[Tuple[str, str]]:
        """(device, label) pairs for display, USB devices marked."""
        result = []
        for port in cls.comports():
            try:
                desc = port.description or port.hwid or 'Unknown'
                marker = ' [USB]' if cls.is_usb_device(port) else ''
                result.append((port.device, f"{port.device} — {desc}{marker}"))
            except (TypeError, ValueError, AttributeError) as e:
                # One broken entry must not hide the other ports
                logger.warning(f"Error processing port {getattr(port, 'device', 'unknown')}: {e}")
        return result

    @classmethod
    def is_usb_device(cls, port: ListPortInfo) -> bool:
        """Check if a port looks like a USB-to-serial device."""
        if getattr(port, 'vid', None) is not None:
            return True
        text = f"{port.description or ''} {port.hwid or ''}".upper()
        return any(m in text for m in cls.USB_MARKERS) or bool(cls.DEVICE_PATTERN.search(port.device))


class PortManager:
    """Owns the single serial connection.

    ``connect`` walks every port the OS reports and keeps the first one
    that opens. Failures end in a disconnected state, never in an
    exception.
    """

    def __init__(
        self,
        baud: int = SerialConfig.DEFAULT_BAUD,
        port_lister: Callable[[], List[str]] = PortDiscovery.list_ports,
        handler_factory: HandlerFactory = SerialPortHandler,
    ):
        self.baud = baud
        self._port_lister = port_lister
        self._handler_factory = handler_factory
        self._handler: Optional[SerialPortHandler] = None
        self.state = ConnectionState()

    @property
    def handler(self) -> Optional[SerialPortHandler]:
        return self._handler

    @property
    def is_connected(self) -> bool:
        return self.state.is_connected and self._handler is not None and self._handler.is_open

    def list_ports(self) -> List[str]:
        try:
            return list(self._port_lister())
        except (TypeError, ValueError, OSError) as e:
            logger.warning(f"Error listing serial ports: {e}")
            return []

    def try_open(self, name: str, baud: Optional[int] = None) -> SerialPortHandler:
        """Open one port.

        Raises:
            OpenFailed: The port could not be opened.
        """
        handler = self._handler_factory(name, baud or self.baud)
        handler.open()
        return handler

    def connect(self, baud: Optional[int] = None) -> ConnectionState:
        """Connect to the first port that opens."""
        if self.is_connected:
            return self.state

        ports = self.list_ports()
        if not ports:
            logger.warning("No COM ports available. Arduino may not be connected.")
            self.state = ConnectionState.disconnected("No COM Ports Found", NoPortsAvailable())
            return self.state

        logger.info(f"Available COM ports: {', '.join(ports)}")

        for port in ports:
            logger.info(f"Trying to connect to: {port}")
            try:
                self._handler = self.try_open(port, baud)
            except OpenFailed as e:
                logger.warning(f"Failed to connect on {port}: {e.reason or e}")
                continue

            self.state = ConnectionState.connected_to(port)
            logger.info(f"Successfully connected on {port} at {baud or self.baud} baud")
            return self.state

        logger.warning("Could not connect on any port.")
        self.state = ConnectionState.disconnected("Arduino Not Found", AllPortsFailed(ports))
        return self.state

    def disconnect(self) -> ConnectionState:
        """Close the connection if there is one."""
        if self.is_connected:
            self.close()
            logger.info("Manually disconnected.")
        return self.state

    def close(self) -> None:
        """Release the serial handle. Safe to call more than once."""
        if self._handler is not None:
            self._handler.close()
            self._handler = None
        if self.state.is_connected:
            self.state = ConnectionState.disconnected("Disconnected")
