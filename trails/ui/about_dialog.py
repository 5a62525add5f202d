"""About dialog showing version information."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from trails.ui.widgets.base_dialog import BaseDialog
from trails.utils.i18n import t
from trails.version import __app_name__, __license__, __version__

__all__ = ["AboutDialog"]


class AboutDialog(BaseDialog):
    """Small dialog with name, version and license."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent, title_key="ui.about.title", min_width=320)

    def _build_content(self, layout: QVBoxLayout) -> None:
        layout.addWidget(QLabel(t("ui.about.version", app=__app_name__, version=__version__)))
        description = QLabel(t("ui.about.description"))
        description.setWordWrap(True)
        layout.addWidget(description)
        layout.addWidget(QLabel(t("ui.about.license", license=__license__)))
