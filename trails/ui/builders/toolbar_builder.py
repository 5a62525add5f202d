# trails/ui/builders/toolbar_builder.py

"""
Builder for the main application toolbar.

The toolbar shows either a login button or the account name with a logout
button, so it is rebuilt whenever the session changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QSizePolicy, QToolBar, QToolButton, QWidget

from trails.utils.i18n import t

if TYPE_CHECKING:
    from trails.ui.main_window import MainWindow

__all__ = ["ToolbarBuilder"]


class ToolbarBuilder:
    """
    Constructs and rebuilds the main QToolBar.

    Attributes:
        main_window: Back-reference to the owning MainWindow instance.
        user_label: Label showing the logged-in account, rebuilt with the bar.
    """

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window: "MainWindow" = main_window
        self.user_label: QLabel | None = None

    def build(self, toolbar: QToolBar) -> None:
        """
        Populates (or re-populates) a QToolBar with current actions.

        Args:
            toolbar: The QToolBar instance to populate.
        """
        toolbar.clear()
        toolbar.setMovable(False)
        toolbar.setFloatable(False)
        toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)

        mw = self.main_window

        sidebar_action = QAction(t("ui.toolbar.toggle_sidebar"), mw)
        sidebar_action.setCheckable(True)
        sidebar_action.setChecked(mw.sidebar_visible)
        sidebar_action.setShortcut(QKeySequence("Ctrl+B"))
        sidebar_action.setToolTip(t("ui.toolbar.toggle_sidebar"))
        sidebar_action.toggled.connect(mw.set_sidebar_visible)
        toolbar.addAction(sidebar_action)

        refresh_action = QAction(t("ui.toolbar.refresh"), mw)
        refresh_action.setToolTip(t("ui.toolbar.refresh_tooltip"))
        refresh_action.setShortcut(QKeySequence("F5"))
        refresh_action.triggered.connect(mw.refresh_library)
        refresh_action.setEnabled(mw.legendary.is_logged_in())
        toolbar.addAction(refresh_action)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        toolbar.addWidget(spacer)

        if mw.legendary.is_logged_in():
            self.user_label = QLabel(t("ui.toolbar.user", name=mw.user_name or t("common.unknown")))
            toolbar.addWidget(self.user_label)

            logout_action = QAction(t("ui.toolbar.logout"), mw)
            logout_action.triggered.connect(mw.logout)
            toolbar.addAction(logout_action)
        else:
            self.user_label = QLabel(t("ui.toolbar.not_logged_in"))
            toolbar.addWidget(self.user_label)

            login_action = QAction(t("ui.toolbar.login"), mw)
            login_action.triggered.connect(mw.show_login)
            toolbar.addAction(login_action)

        menu_button = QToolButton()
        menu_button.setText(t("ui.menu.root"))
        menu_button.setToolTip(t("ui.menu.tooltip"))
        menu_button.setMenu(mw.main_menu)
        menu_button.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        toolbar.addWidget(menu_button)
