"""SensorFan version information."""

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

APP_NAME = "SensorFan"
AUTHOR = "SensorFan contributors"
DESCRIPTION = "Serial sensor monitor with a reading-driven fan display"
LICENSE = "Apache-2.0"
