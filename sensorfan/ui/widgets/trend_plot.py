"""Live trend plot of the sensor values and fan speed."""

from __future__ import annotations

import pyqtgraph as pg

from ..theme import ThemeColors
from .trend_buffers import TrendBuffers


class TrendPlot(pg.PlotWidget):
    """Single panel with one curve per series, in percent of range."""

    LABELS = {
        'temperature': "Temperature",
        'humidity': "Humidity",
        'gas': "Gas",
        'fan': "Fan",
    }

    def __init__(self, theme: ThemeColors, parent=None):
        super().__init__(parent)
        pg.setConfigOptions(antialias=True)
        self.theme = theme
        self.plot_item = self.getPlotItem()
        self.plot_item.setLabel('left', 'Range [%]')
        self.plot_item.setLabel('bottom', 'Time [s]')
        self.plot_item.setYRange(0, 100, padding=0.05)
        self.plot_item.setMouseEnabled(x=False, y=False)
        self.plot_item.addLegend(offset=(10, 10))

        self.curves = {
            name: self.plot_item.plot(name=label)
            for name, label in self.LABELS.items()
        }
        for curve in self.curves.values():
            curve.setClipToView(True)
        self.update_theme(theme)

    def _series_colors(self) -> dict:
        return {
            'temperature': self.theme.sensor_temperature,
            'humidity': self.theme.sensor_humidity,
            'gas': self.theme.sensor_gas,
            'fan': self.theme.sensor_fan,
        }

    def update_theme(self, theme: ThemeColors) -> None:
        self.theme = theme
        self.setBackground(theme.bg_secondary)
        self.plot_item.showGrid(x=True, y=True, alpha=0.2)
        for axis in ('left', 'bottom'):
            self.plot_item.getAxis(axis).setTextPen(theme.text_primary)
            self.plot_item.getAxis(axis).setPen(theme.border_default)
        for name, color in self._series_colors().items():
            self.curves[name].setPen(pg.mkPen(color, width=2))

    def update_data(self, buffers: TrendBuffers) -> None:
        times, temperature, humidity, gas, fan = buffers.get_arrays()
        for name, values in zip(self.LABELS, (temperature, humidity, gas, fan)):
            self.curves[name].setData(times, values)

    def clear_data(self) -> None:
        for curve in self.curves.values():
            curve.setData([], [])
