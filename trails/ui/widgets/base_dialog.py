"""Base class for application dialogs with consistent layout.

Provides standard window setup, title label, content area,
and button rows. Subclasses implement only _build_content().
"""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trails.utils.i18n import t

__all__ = ["BaseDialog"]


class BaseDialog(QDialog):
    """Standard dialog with consistent layout and button handling.

    Subclasses override _build_content() to add their specific UI.

    Args:
        parent: Parent widget.
        title_key: i18n key for window title and optional header label.
        min_width: Minimum dialog width in pixels.
        show_title_label: Whether to show a bold header label.
        buttons: Button mode, one of "close", "custom" or "none".
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        title_key: str = "",
        min_width: int = 420,
        show_title_label: bool = True,
        buttons: str = "close",
    ) -> None:
        super().__init__(parent)
        display_title = t(title_key) if title_key else ""
        if display_title:
            self.setWindowTitle(display_title)
        self.setMinimumWidth(min_width)
        self.setModal(True)

        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(12)

        if show_title_label and display_title:
            title_label = QLabel(display_title)
            title_font = QFont()
            title_font.setPointSize(14)
            title_font.setBold(True)
            title_label.setFont(title_font)
            self._layout.addWidget(title_label)

        self._build_content(self._layout)
        self._add_buttons(buttons)

    def _build_content(self, layout: QVBoxLayout) -> None:
        """Override this to add dialog-specific content.

        Args:
            layout: The main vertical layout to add widgets to.
        """

    def _add_buttons(self, mode: str) -> None:
        """Adds a standard button row based on mode.

        Args:
            mode: One of "close", "custom", "none".
        """
        if mode in ("none", "custom"):
            return

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()

        if mode == "close":
            btn_close = QPushButton(t("common.close"))
            btn_close.clicked.connect(self.reject)
            btn_layout.addWidget(btn_close)

        self._layout.addLayout(btn_layout)
