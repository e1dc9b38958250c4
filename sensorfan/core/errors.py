"""Error taxonomy for SensorFan.

Connection-level errors are turned into a disconnected state by the port
manager, line-level and field-level errors are returned by the parser as
values. None of them is meant to reach the Qt event loop.
"""

from __future__ import annotations


class SensorFanError(Exception):
    """Base class for all SensorFan errors."""


# -----------------------------------------------------------------------------
# Connection
# -----------------------------------------------------------------------------

class NoPortsAvailable(SensorFanError):
    """The OS reported no serial ports at all."""

    def __init__(self, message: str = "No COM Ports Found"):
        super().__init__(message)


class OpenFailed(SensorFanError, ConnectionError):
    """A single port could not be opened."""

    def __init__(self, port: str, reason: str = ""):
        self.port = port
        self.reason = reason
        message = f"Cannot open {port}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class AllPortsFailed(SensorFanError):
    """Every enumerated port failed to open."""

    def __init__(self, ports=(), message: str = "Arduino Not Found"):
        self.ports = list(ports)
        super().__init__(message)


# -----------------------------------------------------------------------------
# Reading
# -----------------------------------------------------------------------------

class ReadTimeout(SensorFanError):
    """No complete line arrived within the read timeout. Expected."""


class ReadError(SensorFanError):
    """I/O failure while reading from an open port."""


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------

class LineError(SensorFanError):
    """A whole line was rejected."""

    def __init__(self, line: str, message: str):
        self.line = line
        super().__init__(message)


class MalformedLine(LineError):
    """Line is empty, or has three fields but is shorter than the minimum length."""

    def __init__(self, line: str, min_length: int):
        self.min_length = min_length
        super().__init__(line, f"Invalid data format: '{line}'")


class WrongFieldCount(LineError):
    """Line does not split into exactly three fields."""

    def __init__(self, line: str, count: int, expected: int = 3):
        self.count = count
        self.expected = expected
        super().__init__(line, f"Expected {expected} parts, got {count}: {line}")


class FieldError(SensorFanError):
    """A single field was skipped. The rest of the line still applies."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class UnknownFieldPrefix(FieldError):
    def __init__(self, field: str):
        super().__init__(field, f"Unknown data part: {field}")


class FieldParseFailure(FieldError):
    def __init__(self, field: str, value: str):
        self.value = value
        super().__init__(field, f"Cannot parse value '{value}' in {field}")
