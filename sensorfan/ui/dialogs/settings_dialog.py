"""Settings dialog for SensorFan."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QComboBox, QCheckBox,
    QSpinBox, QDoubleSpinBox, QGroupBox, QWidget,
    QTabWidget,
)
from PySide6.QtCore import Signal

from ...core import AppSettings
from ..theme import ThemeColors, generate_stylesheet


class SettingsDialog(QDialog):
    """Tabbed editor for :class:`AppSettings`.

    Works on a copy; ``settings_changed`` carries the edited settings when
    the user applies them.
    """

    settings_changed = Signal(AppSettings)
    theme_changed = Signal(bool)  # True = dark mode

    BAUD_RATES = ["9600", "19200", "38400", "57600", "115200", "230400"]

    def __init__(
        self,
        settings: AppSettings,
        theme: ThemeColors,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self.settings = replace(settings)
        self.theme = theme
        self._setup_ui()
        self.setStyleSheet(generate_stylesheet(theme))
        self._load_settings()

    def _setup_ui(self) -> None:
        self.setWindowTitle("Settings")
        self.setMinimumSize(480, 520)
        self.setModal(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        title = QLabel("⚙️ Settings")
        title.setStyleSheet("font-size: 20px; font-weight: 700;")
        layout.addWidget(title)

        tabs = QTabWidget()
        tabs.addTab(self._create_appearance_tab(), "🎨 Appearance")
        tabs.addTab(self._create_serial_tab(), "🔌 Serial")
        tabs.addTab(self._create_sensors_tab(), "🌡 Sensors")
        tabs.addTab(self._create_fan_tab(), "🌀 Fan")
        tabs.addTab(self._create_about_tab(), "ℹ️ About")
        layout.addWidget(tabs)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setMinimumWidth(100)
        cancel_btn.clicked.connect(self.reject)

        apply_btn = QPushButton("Apply")
        apply_btn.setProperty("class", "primary")
        apply_btn.setMinimumWidth(100)
        apply_btn.clicked.connect(self._apply_settings)

        button_layout.addWidget(cancel_btn)
        button_layout.addWidget(apply_btn)
        layout.addLayout(button_layout)

    def _info_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(f"color: {self.theme.text_secondary}; font-size: 11px;")
        label.setWordWrap(True)
        return label

    def _create_appearance_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)

        theme_group = QGroupBox("Theme")
        theme_layout = QVBoxLayout(theme_group)
        self.dark_mode_check = QCheckBox("Dark Mode")
        theme_layout.addWidget(self.dark_mode_check)
        layout.addWidget(theme_group)

        display_group = QGroupBox("Trend Plot")
        grid = QGridLayout(display_group)
        self.show_trend_check = QCheckBox("Show trend plot")
        grid.addWidget(self.show_trend_check, 0, 0, 1, 2)
        grid.addWidget(QLabel("History points:"), 1, 0)
        self.trend_points_spin = QSpinBox()
        self.trend_points_spin.setRange(100, 10000)
        self.trend_points_spin.setSingleStep(100)
        grid.addWidget(self.trend_points_spin, 1, 1)
        layout.addWidget(display_group)

        layout.addStretch()
        return widget

    def _create_serial_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)

        serial_group = QGroupBox("Serial Connection")
        grid = QGridLayout(serial_group)
        grid.setSpacing(12)

        grid.addWidget(QLabel("Baud rate:"), 0, 0)
        self.baud_rate_combo = QComboBox()
        self.baud_rate_combo.addItems(self.BAUD_RATES)
        grid.addWidget(self.baud_rate_combo, 0, 1)

        grid.addWidget(QLabel("Poll interval:"), 1, 0)
        self.poll_interval_spin = QSpinBox()
        self.poll_interval_spin.setRange(10, 5000)
        self.poll_interval_spin.setSingleStep(10)
        self.poll_interval_spin.setSuffix(" ms")
        grid.addWidget(self.poll_interval_spin, 1, 1)

        grid.addWidget(QLabel("Minimum line length:"), 2, 0)
        self.min_line_length_spin = QSpinBox()
        self.min_line_length_spin.setRange(1, 64)
        self.min_line_length_spin.setToolTip("Shorter lines are discarded as noise")
        grid.addWidget(self.min_line_length_spin, 2, 1)

        self.auto_connect_check = QCheckBox("Connect automatically on startup")
        grid.addWidget(self.auto_connect_check, 3, 0, 1, 2)

        grid.addWidget(self._info_label(
            "ℹ️ Baud rate changes apply on the next connect. "
            "Expected line format: H:90.0,T:27.9,G:169"
        ), 4, 0, 1, 2)

        layout.addWidget(serial_group)
        layout.addStretch()
        return widget

    def _create_sensors_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)

        ranges_group = QGroupBox("Sensor Ranges")
        grid = QGridLayout(ranges_group)
        grid.setSpacing(12)

        grid.addWidget(QLabel("Max temperature:"), 0, 0)
        self.max_temperature_spin = QDoubleSpinBox()
        self.max_temperature_spin.setRange(1.0, 1000.0)
        self.max_temperature_spin.setDecimals(1)
        self.max_temperature_spin.setSuffix(" °C")
        grid.addWidget(self.max_temperature_spin, 0, 1)

        grid.addWidget(QLabel("Max gas value:"), 1, 0)
        self.max_gas_spin = QDoubleSpinBox()
        self.max_gas_spin.setRange(1.0, 100000.0)
        self.max_gas_spin.setDecimals(0)
        grid.addWidget(self.max_gas_spin, 1, 1)

        grid.addWidget(self._info_label(
            "ℹ️ Humidity is always 0-100 %. Values outside a range are clamped."
        ), 2, 0, 1, 2)

        layout.addWidget(ranges_group)
        layout.addStretch()
        return widget

    def _create_fan_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)

        fan_group = QGroupBox("Fan")
        grid = QGridLayout(fan_group)
        grid.setSpacing(12)

        grid.addWidget(QLabel("Max fan speed:"), 0, 0)
        self.max_fan_speed_spin = QDoubleSpinBox()
        self.max_fan_speed_spin.setRange(1.0, 10000.0)
        self.max_fan_speed_spin.setDecimals(0)
        self.max_fan_speed_spin.setSuffix(" RPM")
        grid.addWidget(self.max_fan_speed_spin, 0, 1)

        grid.addWidget(QLabel("Smoothing time:"), 1, 0)
        self.fan_smooth_time_spin = QDoubleSpinBox()
        self.fan_smooth_time_spin.setRange(0.01, 10.0)
        self.fan_smooth_time_spin.setSingleStep(0.05)
        self.fan_smooth_time_spin.setDecimals(2)
        self.fan_smooth_time_spin.setSuffix(" s")
        grid.addWidget(self.fan_smooth_time_spin, 1, 1)

        grid.addWidget(QLabel("Rotation per RPM:"), 2, 0)
        self.degrees_per_rpm_spin = QDoubleSpinBox()
        self.degrees_per_rpm_spin.setRange(0.1, 60.0)
        self.degrees_per_rpm_spin.setDecimals(1)
        self.degrees_per_rpm_spin.setSuffix(" °/s")
        grid.addWidget(self.degrees_per_rpm_spin, 2, 1)

        grid.addWidget(self._info_label(
            "ℹ️ Target speed is the average of the three normalized readings "
            "times the max speed."
        ), 3, 0, 1, 2)

        layout.addWidget(fan_group)
        layout.addStretch()
        return widget

    def _create_about_tab(self) -> QWidget:
        from ...version import __version__, APP_NAME, AUTHOR, DESCRIPTION, LICENSE

        widget = QWidget()
        layout = QVBoxLayout(widget)

        app_group = QGroupBox("Application")
        app_layout = QVBoxLayout(app_group)

        name_label = QLabel(f"🌀 {APP_NAME}")
        name_label.setStyleSheet("font-size: 18px; font-weight: 700;")
        app_layout.addWidget(name_label)
        app_layout.addWidget(self._info_label(f"Version {__version__}"))
        app_layout.addWidget(self._info_label(DESCRIPTION))
        app_layout.addWidget(self._info_label(f"{AUTHOR} · {LICENSE}"))

        layout.addWidget(app_group)
        layout.addStretch()
        return widget

    def _load_settings(self) -> None:
        """Load current settings into UI."""
        s = self.settings
        self.dark_mode_check.setChecked(s.dark_mode)
        self.show_trend_check.setChecked(s.show_trend)
        self.trend_points_spin.setValue(s.trend_points)

        idx = self.baud_rate_combo.findText(str(s.baud_rate))
        if idx < 0:
            self.baud_rate_combo.addItem(str(s.baud_rate))
            idx = self.baud_rate_combo.count() - 1
        self.baud_rate_combo.setCurrentIndex(idx)
        self.poll_interval_spin.setValue(s.poll_interval_ms)
        self.min_line_length_spin.setValue(s.min_line_length)
        self.auto_connect_check.setChecked(s.auto_connect)

        self.max_temperature_spin.setValue(s.max_temperature)
        self.max_gas_spin.setValue(s.max_gas)

        self.max_fan_speed_spin.setValue(s.max_fan_speed)
        self.fan_smooth_time_spin.setValue(s.fan_smooth_time)
        self.degrees_per_rpm_spin.setValue(s.degrees_per_rpm)

    def _apply_settings(self) -> None:
        """Apply settings and close dialog."""
        s = self.settings
        old_dark_mode = s.dark_mode

        s.dark_mode = self.dark_mode_check.isChecked()
        s.show_trend = self.show_trend_check.isChecked()
        s.trend_points = self.trend_points_spin.value()

        s.baud_rate = int(self.baud_rate_combo.currentText())
        s.poll_interval_ms = self.poll_interval_spin.value()
        s.min_line_length = self.min_line_length_spin.value()
        s.auto_connect = self.auto_connect_check.isChecked()

        s.max_temperature = self.max_temperature_spin.value()
        s.max_gas = self.max_gas_spin.value()

        s.max_fan_speed = self.max_fan_speed_spin.value()
        s.fan_smooth_time = self.fan_smooth_time_spin.value()
        s.degrees_per_rpm = self.degrees_per_rpm_spin.value()

        self.settings_changed.emit(s)

        if s.dark_mode != old_dark_mode:
            self.theme_changed.emit(s.dark_mode)

        self.accept()
