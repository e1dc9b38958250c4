"""UI package for SensorFan app."""

from .main_window import MainWindow
from .theme import ThemeColors, DARK_THEME, LIGHT_THEME, generate_stylesheet
from .dialogs import SettingsDialog

__all__ = [
    "MainWindow",
    "ThemeColors",
    "DARK_THEME",
    "LIGHT_THEME",
    "generate_stylesheet",
    "SettingsDialog",
]
