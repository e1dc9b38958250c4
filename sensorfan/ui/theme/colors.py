"""Palettes and Qt stylesheet for the SensorFan window."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeColors:
    """Named colors used by the stylesheet and the painted widgets."""
    name: str

    # Surfaces, darkest (window) to lightest (raised controls)
    bg_primary: str
    bg_secondary: str
    bg_card: str
    bg_elevated: str

    accent_primary: str
    accent_success: str
    accent_danger: str

    text_primary: str
    text_secondary: str
    text_muted: str

    # One color per series, shared by stat cards, trend curves and the fan
    sensor_temperature: str
    sensor_humidity: str
    sensor_gas: str
    sensor_fan: str

    fan_housing: str
    fan_hub: str

    border_default: str
    border_hover: str


DARK_THEME = ThemeColors(
    name="dark",
    bg_primary="#10151c",
    bg_secondary="#171e27",
    bg_card="#1f2832",
    bg_elevated="#2b3643",
    accent_primary="#4fb3d9",
    accent_success="#43b581",
    accent_danger="#ef5b5b",
    text_primary="#e8eef4",
    text_secondary="#93a1b0",
    text_muted="#55626f",
    sensor_temperature="#ff7a59",
    sensor_humidity="#4fb3d9",
    sensor_gas="#b48ead",
    sensor_fan="#43b581",
    fan_housing="#34414f",
    fan_hub="#55626f",
    border_default="#2b3643",
    border_hover="#4fb3d9",
)

LIGHT_THEME = ThemeColors(
    name="light",
    bg_primary="#eef2f5",
    bg_secondary="#fbfcfd",
    bg_card="#ffffff",
    bg_elevated="#dde4ea",
    accent_primary="#1f87b3",
    accent_success="#2e8b57",
    accent_danger="#c83e3e",
    text_primary="#17202a",
    text_secondary="#4e5d6c",
    text_muted="#9aa7b3",
    sensor_temperature="#d9572f",
    sensor_humidity="#1f87b3",
    sensor_gas="#8a5a83",
    sensor_fan="#2e8b57",
    fan_housing="#c3ccd5",
    fan_hub="#6b7885",
    border_default="#c3ccd5",
    border_hover="#1f87b3",
)


def _base_rules(t: ThemeColors) -> str:
    return f"""
QMainWindow, QDialog, QMessageBox {{ background-color: {t.bg_primary}; }}
QWidget {{
    background-color: transparent;
    color: {t.text_primary};
    font-family: 'Segoe UI', 'Noto Sans', sans-serif;
    font-size: 13px;
}}
QLabel[class="title"] {{ font-size: 22px; font-weight: 700; }}
QLabel[class="subtitle"] {{ font-size: 12px; color: {t.text_secondary}; }}
QLabel[class="stat-label"] {{ font-size: 10px; letter-spacing: 1px; color: {t.text_secondary}; }}
QLabel[class="stat-value"] {{
    font-size: 26px;
    font-weight: 600;
    font-family: 'Consolas', 'DejaVu Sans Mono', monospace;
}}
QFrame[class="card"] {{
    background-color: {t.bg_secondary};
    border: 1px solid {t.border_default};
    border-radius: 10px;
}}
QFrame[class="stat-card"] {{
    background-color: {t.bg_card};
    border: 1px solid {t.border_default};
    border-radius: 8px;
}}
"""


def _button_rules(t: ThemeColors) -> str:
    return f"""
QPushButton {{
    background-color: {t.bg_card};
    border: 1px solid {t.border_default};
    border-radius: 5px;
    padding: 6px 14px;
}}
QPushButton:hover {{ background-color: {t.bg_elevated}; border-color: {t.border_hover}; }}
QPushButton:disabled {{ color: {t.text_muted}; background-color: {t.bg_secondary}; }}
QPushButton[class="primary"] {{
    background-color: {t.accent_primary};
    border-color: {t.accent_primary};
    color: white;
}}
QPushButton[class="success"] {{
    background-color: {t.accent_success};
    border-color: {t.accent_success};
    color: white;
}}
QPushButton[class="success"]:disabled {{ background-color: {t.bg_secondary}; color: {t.text_muted}; }}
QPushButton[class="danger"] {{ border-color: {t.accent_danger}; color: {t.accent_danger}; }}
QPushButton[class="icon"] {{ border: none; padding: 2px 6px; font-size: 17px; }}
"""


def _input_rules(t: ThemeColors) -> str:
    return f"""
QComboBox, QSpinBox, QDoubleSpinBox {{
    background-color: {t.bg_card};
    border: 1px solid {t.border_default};
    border-radius: 4px;
    padding: 3px 6px;
}}
QComboBox QAbstractItemView {{
    background-color: {t.bg_card};
    selection-background-color: {t.accent_primary};
}}
QCheckBox::indicator {{
    width: 15px;
    height: 15px;
    border: 1px solid {t.border_default};
    border-radius: 3px;
    background-color: {t.bg_card};
}}
QCheckBox::indicator:checked {{ background-color: {t.accent_primary}; border-color: {t.accent_primary}; }}
QSlider::groove:horizontal {{ height: 4px; border-radius: 2px; background-color: {t.bg_elevated}; }}
QSlider::sub-page:horizontal {{ border-radius: 2px; background-color: {t.accent_primary}; }}
QSlider::handle:horizontal {{
    width: 14px;
    margin: -5px 0;
    border-radius: 7px;
    background-color: {t.accent_primary};
}}
QSlider::sub-page:horizontal:disabled, QSlider::handle:horizontal:disabled {{
    background-color: {t.text_muted};
}}
"""


def _dialog_rules(t: ThemeColors) -> str:
    return f"""
QGroupBox {{
    border: 1px solid {t.border_default};
    border-radius: 6px;
    margin-top: 12px;
    padding-top: 8px;
}}
QGroupBox::title {{ subcontrol-origin: margin; left: 10px; padding: 0 4px; }}
QTabWidget::pane {{ border: 1px solid {t.border_default}; background-color: {t.bg_card}; }}
QTabBar::tab {{
    padding: 7px 14px;
    color: {t.text_secondary};
    background-color: {t.bg_secondary};
    border: 1px solid {t.border_default};
}}
QTabBar::tab:selected {{ color: {t.text_primary}; background-color: {t.bg_card}; }}
"""


def generate_stylesheet(theme: ThemeColors) -> str:
    """Full application stylesheet for a palette."""
    return "".join(rules(theme) for rules in (_base_rules, _button_rules, _input_rules, _dialog_rules))
