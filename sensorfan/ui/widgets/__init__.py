"""Reusable UI widgets for SensorFan.

- StatCard: Value display card with color theming
- SensorSlider: Manual sensor input used while disconnected
- FanWidget: Rotating fan graphic
- TrendPlot: Live trend of the readings and fan speed
- TrendBuffers: Rolling history backing the trend plot
"""

from .stat_card import StatCard
from .sensor_slider import SensorSlider
from .fan_widget import FanWidget
from .trend_buffers import TrendBuffers
from .trend_plot import TrendPlot

__all__ = ['StatCard', 'SensorSlider', 'FanWidget', 'TrendBuffers', 'TrendPlot']
