"""Shared fakes for SensorFan tests. No hardware or display needed."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Optional

import pytest

from sensorfan.core import AppSettings, ConnectionState, DisplaySnapshot
from sensorfan.core.errors import OpenFailed, ReadTimeout
from sensorfan.serial import PortManager


class FakeSerial:
    """Stands in for serial.Serial inside SerialPortHandler."""

    def __init__(self, chunks: Iterable[bytes] = (), fail_open: Optional[Exception] = None,
                 fail_read: Optional[Exception] = None):
        self.port = None
        self.baudrate = None
        self.timeout = None
        self.dtr = False
        self.rts = False
        self.is_open = False
        self.reset_calls = 0
        self.close_calls = 0
        self.chunks = deque(chunks)
        self.fail_open = fail_open
        self.fail_read = fail_read

    def open(self):
        if self.fail_open is not None:
            raise self.fail_open
        self.is_open = True

    def reset_input_buffer(self):
        self.reset_calls += 1

    @property
    def in_waiting(self):
        return sum(len(c) for c in self.chunks)

    def readline(self):
        if self.fail_read is not None:
            raise self.fail_read
        return self.chunks.popleft() if self.chunks else b''

    def close(self):
        self.close_calls += 1
        self.is_open = False


class FakeHandler:
    """Stands in for SerialPortHandler inside PortManager."""

    def __init__(self, port: str, baud: int, fail: bool = False):
        self.port = port
        self.baud = baud
        self.fail = fail
        self.is_open = False
        self.lines: deque = deque()
        self.read_error: Optional[Exception] = None
        self.close_calls = 0

    def open(self):
        if self.fail:
            raise OpenFailed(self.port, "access denied")
        self.is_open = True

    @property
    def in_waiting(self):
        return len(self.lines)

    def readline(self):
        if self.read_error is not None:
            raise self.read_error
        if not self.lines:
            raise ReadTimeout(f"No complete line from {self.port}")
        return self.lines.popleft()

    def close(self):
        self.close_calls += 1
        self.is_open = False


class HandlerFactory:
    """Creates FakeHandlers and remembers them. Ports in ``failing`` refuse to open."""

    def __init__(self, failing: Iterable[str] = ()):
        self.failing = set(failing)
        self.created: List[FakeHandler] = []

    def __call__(self, port: str, baud: int) -> FakeHandler:
        handler = FakeHandler(port, baud, fail=port in self.failing)
        self.created.append(handler)
        return handler

    @property
    def attempted(self) -> List[str]:
        return [h.port for h in self.created]


class RecordingSink:
    """Presentation sink that keeps everything it receives."""

    def __init__(self):
        self.snapshots: List[DisplaySnapshot] = []
        self.statuses: List[ConnectionState] = []

    def render(self, snapshot: DisplaySnapshot) -> None:
        self.snapshots.append(snapshot)

    def show_status(self, connection: ConnectionState) -> None:
        self.statuses.append(connection)

    @property
    def last(self) -> DisplaySnapshot:
        return self.snapshots[-1]


@pytest.fixture
def handler_factory():
    return HandlerFactory()


@pytest.fixture
def make_ports():
    """Build a PortManager over fake ports."""
    def _make(ports=("COM3",), failing=()):
        factory = HandlerFactory(failing)
        manager = PortManager(
            baud=9600,
            port_lister=lambda: list(ports),
            handler_factory=factory,
        )
        return manager, factory
    return _make


@pytest.fixture
def settings():
    return AppSettings(auto_connect=False)


@pytest.fixture
def sink():
    return RecordingSink()

