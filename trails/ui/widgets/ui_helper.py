# trails/ui/widgets/ui_helper.py

"""
Provides static helper methods for creating standardized UI dialogs.

This class centralizes QMessageBox logic to ensure consistent titles and
use of internationalization across the application.
"""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget

from trails.utils.i18n import t
from trails.version import __app_name__

__all__ = ["UIHelper"]


class UIHelper:
    """A static helper class for common UI dialog interactions."""

    @staticmethod
    def _show_message(
        parent: QWidget | None,
        message: str,
        title: str,
        icon: QMessageBox.Icon,
    ) -> None:
        """Display a message box with a localized OK button.

        Args:
            parent: The parent widget for the dialog.
            message: The message text to display.
            title: The dialog window title.
            icon: The QMessageBox icon to show.
        """
        msg = QMessageBox(parent)
        msg.setWindowTitle(title)
        msg.setText(message)
        msg.setIcon(icon)
        msg.addButton(t("common.ok"), QMessageBox.ButtonRole.AcceptRole)
        msg.exec()

    @staticmethod
    def show_error(parent: QWidget | None, message: str, title: str | None = None) -> None:
        """Displays a critical error message box.

        Args:
            parent: The parent widget for the dialog.
            message: The main error message to display.
            title: The title for the dialog window. Defaults to common 'Error'.
        """
        UIHelper._show_message(parent, message, title or t("common.error"), QMessageBox.Icon.Critical)

    @staticmethod
    def show_info(parent: QWidget | None, message: str, title: str | None = None) -> None:
        """Displays an informational message box.

        Args:
            parent: The parent widget for the dialog.
            message: The message to display.
            title: The title for the dialog window. Defaults to the app name.
        """
        UIHelper._show_message(parent, message, title or __app_name__, QMessageBox.Icon.Information)

    @staticmethod
    def confirm(parent: QWidget | None, question: str, title: str | None = None) -> bool:
        """Displays a Yes/No confirmation dialog with localised button texts.

        Uses addButton() instead of StandardButtons because Qt6 on Linux does
        not translate StandardButton labels without .qm translation files.

        Args:
            parent: The parent widget for the dialog.
            question: The question to ask the user.
            title: The title bar text. Defaults to the app title.

        Returns:
            True if the user clicked Yes, False otherwise.
        """
        msg = QMessageBox(parent)
        msg.setWindowTitle(title or __app_name__)
        msg.setText(question)
        msg.setIcon(QMessageBox.Icon.Question)

        yes_btn = msg.addButton(t("common.yes"), QMessageBox.ButtonRole.YesRole)
        msg.addButton(t("common.no"), QMessageBox.ButtonRole.NoRole)
        msg.setDefaultButton(yes_btn)

        msg.exec()
        return msg.clickedButton() == yes_btn
