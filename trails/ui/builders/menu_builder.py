# trails/ui/builders/menu_builder.py

"""
Builder for the main application menu.

Window management actions (new/close window, about, quit) with their
keyboard shortcuts, attached to a single primary menu.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMenu

from trails.utils.i18n import t

if TYPE_CHECKING:
    from trails.ui.main_window import MainWindow

__all__ = ["MenuBuilder"]


class MenuBuilder:
    """Constructs the primary QMenu for a window.

    Attributes:
        main_window: Back-reference to the owning MainWindow instance.
    """

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window: "MainWindow" = main_window

    def build(self) -> QMenu:
        """Creates the main menu with all window-level actions.

        Returns:
            The populated menu, parented to the main window.
        """
        mw = self.main_window
        menu = QMenu(t("ui.menu.root"), mw)
        menu.setToolTip(t("ui.menu.tooltip"))

        new_window = QAction(t("ui.menu.new_window"), mw)
        new_window.setShortcut(QKeySequence("Ctrl+N"))
        new_window.triggered.connect(mw.open_new_window)
        menu.addAction(new_window)

        close_window = QAction(t("ui.menu.close_window"), mw)
        close_window.setShortcut(QKeySequence("Ctrl+W"))
        close_window.triggered.connect(mw.close)
        menu.addAction(close_window)

        menu.addSeparator()

        about = QAction(t("ui.menu.about"), mw)
        about.triggered.connect(mw.show_about)
        menu.addAction(about)

        quit_action = QAction(t("ui.menu.quit"), mw)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(mw.quit_application)
        menu.addAction(quit_action)

        return menu
