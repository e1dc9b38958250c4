"""Labelled slider used as manual sensor input."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets


class SensorSlider(QtWidgets.QWidget):
    """Horizontal slider reporting a fraction in [0, 1].

    ``fraction_changed`` fires only for user input; :meth:`set_fraction`
    moves the handle silently.
    """

    fraction_changed = QtCore.Signal(float)

    STEPS = 1000

    def __init__(self, label: str, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.label = QtWidgets.QLabel(label)
        self.label.setFixedWidth(90)
        layout.addWidget(self.label)

        self.slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.slider.setRange(0, self.STEPS)
        self.slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self.slider, stretch=1)

    def set_fraction(self, fraction: float) -> None:
        value = int(round(max(0.0, min(fraction, 1.0)) * self.STEPS))
        if value == self.slider.value():
            return
        blocker = QtCore.QSignalBlocker(self.slider)
        self.slider.setValue(value)
        del blocker

    def _on_value_changed(self, value: int) -> None:
        self.fraction_changed.emit(value / self.STEPS)
