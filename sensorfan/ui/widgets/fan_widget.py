"""Rotating fan graphic."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from ..theme import ThemeColors


class FanWidget(QtWidgets.QWidget):
    """Vector fan whose blades are drawn at a given angle.

    The blade outline is built once; each paint only rotates the painter.
    """

    BLADE_COUNT = 5

    def __init__(self, theme: ThemeColors, parent=None):
        super().__init__(parent)
        self.setMinimumSize(220, 220)
        self.theme = theme
        self._angle = 0.0
        self._blade_color = QtGui.QColor(theme.sensor_fan)

        # Blade outline in a 100x100 unit space around the hub
        self._blade_path = QtGui.QPainterPath()
        self._blade_path.moveTo(0, 15)
        self._blade_path.cubicTo(10, 40, 20, 70, 45, 95)
        self._blade_path.lineTo(60, 90)
        self._blade_path.cubicTo(35, 60, 25, 30, 10, 15)
        self._blade_path.closeSubpath()

    def set_angle(self, angle: float) -> None:
        """Set blade rotation in degrees, repainting only on change."""
        if angle != self._angle:
            self._angle = angle
            self.update()

    def update_theme(self, theme: ThemeColors) -> None:
        self.theme = theme
        self._blade_color = QtGui.QColor(theme.sensor_fan)
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)

        center = QtCore.QPointF(self.width() / 2, self.height() / 2)
        radius = min(self.width(), self.height()) / 2 - 10
        scale = radius / 100.0

        # Housing
        painter.setPen(QtGui.QPen(QtGui.QColor(self.theme.fan_housing), 6))
        painter.setBrush(QtCore.Qt.NoBrush)
        painter.drawEllipse(center, radius, radius)

        # Blades
        painter.setPen(QtGui.QPen(QtGui.QColor(self.theme.bg_primary), 1))
        painter.setBrush(self._blade_color)
        for i in range(self.BLADE_COUNT):
            painter.save()
            painter.translate(center)
            painter.rotate(self._angle + i * (360.0 / self.BLADE_COUNT))
            painter.scale(scale, scale)
            painter.drawPath(self._blade_path)
            painter.restore()

        # Hub
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(QtGui.QColor(self.theme.fan_hub))
        painter.drawEllipse(center, 25 * scale, 25 * scale)

        painter.end()
