"""Application settings with persistence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from PySide6.QtCore import QSettings

from .reading import SensorLimits

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    """Application settings."""
    # Theme
    dark_mode: bool = True

    # Serial
    baud_rate: int = 9600
    auto_connect: bool = True
    poll_interval_ms: int = 100  # How often to check for new data
    min_line_length: int = 10

    # Sensor ranges
    max_temperature: float = 50.0  # Celsius
    max_gas: float = 1023.0  # Arduino analog input (0-1023)

    # Fan
    max_fan_speed: float = 800.0  # RPM
    fan_smooth_time: float = 0.2  # Seconds
    degrees_per_rpm: float = 6.0

    # Display
    frame_interval_ms: int = 16  # ~60 FPS
    show_trend: bool = True
    trend_points: int = 600

    ORGANIZATION = "SensorFan"
    APPLICATION = "SensorFan"

    @property
    def limits(self) -> SensorLimits:
        """Sensor limits built from the configured ranges."""
        return SensorLimits(self.max_temperature, self.max_gas)

    @property
    def poll_interval(self) -> float:
        """Poll interval in seconds."""
        return self.poll_interval_ms / 1000.0

    @classmethod
    def _store(cls) -> QSettings:
        return QSettings(cls.ORGANIZATION, cls.APPLICATION)

    def save(self) -> None:
        """Save settings to persistent storage.

        Uses QSettings which automatically handles:
        - Linux: ~/.config/SensorFan/SensorFan.conf
        - Windows: Registry HKEY_CURRENT_USER\\Software\\SensorFan
        - macOS: ~/Library/Preferences/com.SensorFan.plist
        """
        try:
            settings = self._store()
            for f in fields(self):
                settings.setValue(f.name, getattr(self, f.name))
            settings.sync()
        except Exception as e:
            # Defaults will be used next time
            logger.warning(f"Could not save settings: {e}")

    @classmethod
    def load(cls) -> 'AppSettings':
        """Load settings from persistent storage.

        Returns default settings if nothing is stored or it can't be read.
        Stored values that would break the sensor limits are discarded.
        """
        instance = cls()

        try:
            settings = cls._store()

            for f in fields(instance):
                if settings.contains(f.name):
                    stored = settings.value(f.name)
                    default_val = getattr(instance, f.name)
                    setattr(instance, f.name, cls._coerce(stored, default_val))
        except Exception as e:
            logger.warning(f"Could not load settings, using defaults: {e}")
            return cls()

        try:
            instance.limits
        except ValueError as e:
            logger.warning(f"Stored sensor ranges are invalid ({e}), using defaults")
            instance.max_temperature = cls.max_temperature
            instance.max_gas = cls.max_gas

        return instance

    @staticmethod
    def _coerce(stored, default_val):
        """Convert a stored value to the type of its default."""
        if isinstance(default_val, bool):
            # QSettings stores bools as strings on some platforms
            if isinstance(stored, bool):
                return stored
            if isinstance(stored, str):
                return stored.lower() in ('true', '1', 'yes')
            return bool(stored)
        if isinstance(default_val, int):
            return int(stored)
        if isinstance(default_val, float):
            return float(stored)
        return str(stored)
