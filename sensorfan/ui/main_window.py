"""Main window for SensorFan application.

Shows the live readings, the manual input sliders and the rotating fan,
and drives :class:`SensorMonitor` from a frame timer.
"""

from __future__ import annotations

import time
from typing import Optional

from PySide6 import QtCore, QtWidgets, QtGui

from ..core import AppSettings, ConnectionState, DisplaySnapshot
from ..monitor import SensorMonitor
from ..serial import PortDiscovery
from ..version import __version__, APP_NAME
from .theme import DARK_THEME, LIGHT_THEME, generate_stylesheet
from .dialogs import SettingsDialog
from .widgets import FanWidget, SensorSlider, StatCard, TrendBuffers, TrendPlot


class MainWindow(QtWidgets.QMainWindow):
    """Main application window and presentation sink of the monitor."""

    TREND_SAMPLE_INTERVAL = 0.1  # Seconds between trend points

    def __init__(self, settings: Optional[AppSettings] = None):
        super().__init__()
        self.settings = settings or AppSettings.load()
        self.theme = DARK_THEME if self.settings.dark_mode else LIGHT_THEME
        self.trend = TrendBuffers(self.settings.trend_points)
        self._last_frame = time.perf_counter()
        self._last_trend_sample = 0.0

        self._setup_ui()
        self._connect_signals()
        self._refresh_ports()

        self.monitor = SensorMonitor(self.settings, sink=self)
        self._connect_fallback_sliders()
        self.monitor.start()
        self._start_frame_timer()

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _setup_ui(self) -> None:
        self.setWindowTitle(f"{APP_NAME} v{__version__}")
        self.setMinimumSize(1000, 700)

        self._apply_theme()

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        main_layout = QtWidgets.QVBoxLayout(central)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        self._create_header(main_layout)
        self._create_connection_bar(main_layout)

        content = QtWidgets.QHBoxLayout()
        content.setSpacing(12)
        self._create_fan_panel(content)
        self._create_stats_panel(content)
        main_layout.addLayout(content, stretch=1)

        self._create_status_bar(main_layout)

    def _apply_theme(self) -> None:
        self.setStyleSheet(generate_stylesheet(self.theme))

    def _create_header(self, parent: QtWidgets.QVBoxLayout) -> None:
        header = QtWidgets.QHBoxLayout()

        title = QtWidgets.QLabel("🌀 SensorFan")
        title.setProperty("class", "title")
        header.addWidget(title)

        subtitle = QtWidgets.QLabel("Temperature · Humidity · Gas")
        subtitle.setProperty("class", "subtitle")
        header.addWidget(subtitle)

        header.addStretch()

        self.settings_btn = QtWidgets.QPushButton("⚙️")
        self.settings_btn.setProperty("class", "icon")
        self.settings_btn.setFixedSize(36, 36)
        self.settings_btn.setToolTip("Settings")
        header.addWidget(self.settings_btn)

        parent.addLayout(header)

    def _create_connection_bar(self, parent: QtWidgets.QVBoxLayout) -> None:
        frame = QtWidgets.QFrame()
        frame.setProperty("class", "card")

        layout = QtWidgets.QHBoxLayout(frame)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(10)

        layout.addWidget(QtWidgets.QLabel("Detected ports:"))

        self.port_combo = QtWidgets.QComboBox()
        self.port_combo.setMinimumWidth(280)
        self.port_combo.setToolTip("Connect tries every port in this order")
        layout.addWidget(self.port_combo)

        self.refresh_btn = QtWidgets.QPushButton("↻ Refresh")
        layout.addWidget(self.refresh_btn)

        layout.addStretch()

        self.connect_btn = QtWidgets.QPushButton("▶ Connect")
        self.connect_btn.setProperty("class", "success")
        self.connect_btn.setMinimumWidth(100)
        layout.addWidget(self.connect_btn)

        self.disconnect_btn = QtWidgets.QPushButton("⏹ Disconnect")
        self.disconnect_btn.setProperty("class", "danger")
        self.disconnect_btn.setMinimumWidth(100)
        self.disconnect_btn.setEnabled(False)
        layout.addWidget(self.disconnect_btn)

        self.reconnect_btn = QtWidgets.QPushButton("⟳ Reconnect")
        self.reconnect_btn.setMinimumWidth(100)
        layout.addWidget(self.reconnect_btn)

        parent.addWidget(frame)

    def _create_fan_panel(self, parent: QtWidgets.QHBoxLayout) -> None:
        frame = QtWidgets.QFrame()
        frame.setProperty("class", "card")

        layout = QtWidgets.QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)

        self.fan_widget = FanWidget(self.theme)
        layout.addWidget(self.fan_widget, stretch=3)

        self.trend_plot = TrendPlot(self.theme)
        self.trend_plot.setVisible(self.settings.show_trend)
        layout.addWidget(self.trend_plot, stretch=2)

        parent.addWidget(frame, stretch=3)

    def _create_stats_panel(self, parent: QtWidgets.QHBoxLayout) -> None:
        frame = QtWidgets.QFrame()
        frame.setProperty("class", "card")
        frame.setFixedWidth(320)

        layout = QtWidgets.QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        title = QtWidgets.QLabel("📊 Live")
        title.setProperty("class", "subtitle")
        layout.addWidget(title)

        self.temperature_card = StatCard("TEMPERATURE", self.theme.sensor_temperature)
        layout.addWidget(self.temperature_card)

        self.humidity_card = StatCard("HUMIDITY", self.theme.sensor_humidity)
        layout.addWidget(self.humidity_card)

        self.gas_card = StatCard("GAS", self.theme.sensor_gas)
        layout.addWidget(self.gas_card)

        self.fan_card = StatCard("FAN SPEED", self.theme.sensor_fan)
        layout.addWidget(self.fan_card)

        layout.addSpacing(10)

        manual_title = QtWidgets.QLabel("🎚 Manual input (when disconnected)")
        manual_title.setProperty("class", "subtitle")
        layout.addWidget(manual_title)

        self.temperature_slider = SensorSlider("Temperature")
        self.humidity_slider = SensorSlider("Humidity")
        self.gas_slider = SensorSlider("Gas")
        for slider in (self.temperature_slider, self.humidity_slider, self.gas_slider):
            layout.addWidget(slider)

        layout.addSpacing(10)

        debug_layout = QtWidgets.QHBoxLayout()
        self.print_btn = QtWidgets.QPushButton("Print values")
        self.print_btn.setToolTip("Write current values and last line to the log")
        debug_layout.addWidget(self.print_btn)

        self.simulate_btn = QtWidgets.QPushButton("Simulate")
        self.simulate_btn.setToolTip("Parse a random device line")
        debug_layout.addWidget(self.simulate_btn)
        layout.addLayout(debug_layout)

        layout.addStretch()
        parent.addWidget(frame)

    def _create_status_bar(self, parent: QtWidgets.QVBoxLayout) -> None:
        layout = QtWidgets.QHBoxLayout()
        layout.setContentsMargins(4, 0, 4, 0)

        self.status_label = QtWidgets.QLabel("● DISCONNECTED")
        self.status_label.setStyleSheet(f"color: {self.theme.accent_danger};")
        layout.addWidget(self.status_label)

        layout.addStretch()

        self.last_line_label = QtWidgets.QLabel("")
        self.last_line_label.setStyleSheet(
            f"color: {self.theme.text_secondary}; font-family: monospace;"
        )
        layout.addWidget(self.last_line_label)

        parent.addLayout(layout)

    # -------------------------------------------------------------------------
    # Signals and timers
    # -------------------------------------------------------------------------

    def _connect_signals(self) -> None:
        self.refresh_btn.clicked.connect(self._refresh_ports)
        self.connect_btn.clicked.connect(self._on_connect)
        self.disconnect_btn.clicked.connect(self._on_disconnect)
        self.reconnect_btn.clicked.connect(self._on_reconnect)
        self.settings_btn.clicked.connect(self._open_settings)
        self.print_btn.clicked.connect(self._on_print_values)
        self.simulate_btn.clicked.connect(self._on_simulate)

    def _connect_fallback_sliders(self) -> None:
        fallback = self.monitor.fallback
        self.temperature_slider.fraction_changed.connect(
            lambda f: fallback.set_fraction('temperature', f))
        self.humidity_slider.fraction_changed.connect(
            lambda f: fallback.set_fraction('humidity', f))
        self.gas_slider.fraction_changed.connect(
            lambda f: fallback.set_fraction('gas', f))

    def _start_frame_timer(self) -> None:
        self._frame_timer = QtCore.QTimer(self)
        self._frame_timer.timeout.connect(self._on_frame)
        self._last_frame = time.perf_counter()
        self._frame_timer.start(self.settings.frame_interval_ms)

    def _on_frame(self) -> None:
        now = time.perf_counter()
        dt = now - self._last_frame
        self._last_frame = now
        self.monitor.tick(dt)

    def _refresh_ports(self) -> None:
        self.port_combo.clear()
        ports = PortDiscovery.describe_ports()
        for device, label in ports:
            self.port_combo.addItem(label, device)
        if not ports:
            self.port_combo.addItem("No COM ports found")

    # -------------------------------------------------------------------------
    # Presentation sink
    # -------------------------------------------------------------------------

    def render(self, snapshot: DisplaySnapshot) -> None:
        self.temperature_card.set_text(snapshot.temperature_text)
        self.humidity_card.set_text(snapshot.humidity_text)
        self.gas_card.set_text(snapshot.gas_text)
        self.fan_card.set_text(snapshot.fan_speed_text)

        t, h, g = snapshot.fractions
        self.temperature_slider.set_fraction(t)
        self.humidity_slider.set_fraction(h)
        self.gas_slider.set_fraction(g)

        self.fan_widget.set_angle(snapshot.fan_angle)
        self._update_trend(snapshot)

        if snapshot.last_line and self.last_line_label.text() != snapshot.last_line:
            self.last_line_label.setText(snapshot.last_line)

    def show_status(self, connection: ConnectionState) -> None:
        connected = connection.is_connected
        color = self.theme.accent_success if connected else self.theme.accent_danger
        self.status_label.setText(f"● {connection.message}")
        self.status_label.setStyleSheet(f"color: {color};")

        self.connect_btn.setEnabled(not connected)
        self.disconnect_btn.setEnabled(connected)
        for slider in (self.temperature_slider, self.humidity_slider, self.gas_slider):
            slider.setEnabled(not connected)

    def _update_trend(self, snapshot: DisplaySnapshot) -> None:
        if not self.settings.show_trend:
            return
        now = time.perf_counter()
        if now - self._last_trend_sample < self.TREND_SAMPLE_INTERVAL:
            return
        self._last_trend_sample = now

        fan_fraction = snapshot.fan_speed / self.settings.max_fan_speed
        self.trend.append(now, *snapshot.fractions, max(0.0, min(fan_fraction, 1.0)))
        self.trend_plot.update_data(self.trend)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def _on_connect(self) -> None:
        self._refresh_ports()
        self.monitor.connect()

    def _on_disconnect(self) -> None:
        self.monitor.disconnect()

    def _on_reconnect(self) -> None:
        self._refresh_ports()
        self.monitor.reconnect()

    def _on_print_values(self) -> None:
        self.monitor.log_current_values()

    def _on_simulate(self) -> None:
        self.monitor.simulate_data()

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def _open_settings(self) -> None:
        dialog = SettingsDialog(self.settings, self.theme, self)
        dialog.theme_changed.connect(self._on_theme_changed)
        dialog.settings_changed.connect(self._on_settings_changed)
        dialog.exec()

    def _on_theme_changed(self, dark_mode: bool) -> None:
        self.theme = DARK_THEME if dark_mode else LIGHT_THEME
        self._apply_theme()
        self.fan_widget.update_theme(self.theme)
        self.trend_plot.update_theme(self.theme)
        self.temperature_card.set_color(self.theme.sensor_temperature)
        self.humidity_card.set_color(self.theme.sensor_humidity)
        self.gas_card.set_color(self.theme.sensor_gas)
        self.fan_card.set_color(self.theme.sensor_fan)
        self.last_line_label.setStyleSheet(
            f"color: {self.theme.text_secondary}; font-family: monospace;"
        )
        self.show_status(self.monitor.connection)

    def _on_settings_changed(self, settings: AppSettings) -> None:
        try:
            self.monitor.apply_settings(settings)
        except ValueError as e:
            QtWidgets.QMessageBox.warning(self, "Invalid settings", str(e))
            return

        self.settings = settings
        self.trend.max_points = settings.trend_points
        self.trend_plot.setVisible(settings.show_trend)
        if not settings.show_trend:
            self.trend.clear()
            self.trend_plot.clear_data()
        self._frame_timer.setInterval(settings.frame_interval_ms)
        settings.save()

    # -------------------------------------------------------------------------
    # Cleanup
    # -------------------------------------------------------------------------

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._frame_timer.stop()
        self.monitor.shutdown()
        event.accept()
