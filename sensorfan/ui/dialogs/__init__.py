"""Dialogs for SensorFan UI."""

from .settings_dialog import SettingsDialog

__all__ = ["SettingsDialog"]
