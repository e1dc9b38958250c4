"""Serial port configuration for SensorFan."""

from __future__ import annotations


class SerialConfig:
    """Configuration for serial port connection."""
    DEFAULT_BAUD = 9600  # Arduino Serial.begin default
    READ_TIMEOUT = 0.1  # Seconds; a timeout is a normal "no data yet"
    ENCODING = 'utf-8'
    MAX_LINE_BYTES = 256  # Partial data beyond this is dropped

    # Line protocol: "H:90.0,T:27.9,G:169"
    FIELD_SEPARATOR = ','
    FIELD_COUNT = 3
    MIN_LINE_LENGTH = 10
    PREFIX_HUMIDITY = 'H:'
    PREFIX_TEMPERATURE = 'T:'
    PREFIX_GAS = 'G:'
