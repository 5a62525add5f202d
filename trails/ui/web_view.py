"""Placeholder for the embedded store page."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from trails.utils.i18n import t

__all__ = ["WebView"]


class WebView(QWidget):
    # TODO: embed the Epic store with QtWebEngine once it is an optional dependency

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        label = QLabel(t("ui.web.placeholder"))
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)
