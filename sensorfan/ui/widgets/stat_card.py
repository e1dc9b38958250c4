"""Card showing one live value."""

from __future__ import annotations
from PySide6 import QtCore, QtWidgets


class StatCard(QtWidgets.QFrame):
    """Caption above a large colored value, e.g. TEMPERATURE / 27.9°C."""

    PLACEHOLDER = "--"

    def __init__(self, caption: str, color: str, parent=None):
        super().__init__(parent)
        self.setProperty("class", "stat-card")

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(14, 8, 14, 8)
        layout.setSpacing(0)

        self.caption_label = QtWidgets.QLabel(caption)
        self.caption_label.setProperty("class", "stat-label")
        layout.addWidget(self.caption_label)

        self.value_label = QtWidgets.QLabel(self.PLACEHOLDER)
        self.value_label.setProperty("class", "stat-value")
        self.value_label.setAlignment(QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter)
        layout.addWidget(self.value_label)

        self.set_color(color)

    def set_text(self, text: str) -> None:
        # Called every frame; skip relayout when nothing changed
        if self.value_label.text() != text:
            self.value_label.setText(text)

    def set_color(self, color: str) -> None:
        self.color = color
        self.value_label.setStyleSheet(f"color: {color};")
