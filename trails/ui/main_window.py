"""
Main application window for Trails.

A sidebar of pages (Games, Web) next to a stacked content area, with the
session controls in the toolbar. All Legendary work is delegated to worker
threads; this window only reacts to their results.
"""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QStackedWidget,
    QToolBar,
    QWidget,
)
from PyQt6.QtCore import Qt

from trails.config import config
from trails.core.legendary import Legendable, LegendaryCli
from trails.ui.about_dialog import AboutDialog
from trails.ui.builders import MenuBuilder, ToolbarBuilder
from trails.ui.games_view import GamesView
from trails.ui.login_dialog import LoginDialog
from trails.ui.web_view import WebView
from trails.ui.widgets.ui_helper import UIHelper
from trails.utils.i18n import t

logger = logging.getLogger("trails.main_window")

__all__ = ["MainWindow", "PAGES"]

# (page id, i18n key) in sidebar order
PAGES: tuple[tuple[str, str], ...] = (
    ("games", "ui.pages.games"),
    ("web", "ui.pages.web"),
)


class MainWindow(QMainWindow):
    """Primary application window.

    Attributes:
        legendary: Session and library access shared by all pages.
        user_name: Display name of the logged-in account, if known.
        sidebar_visible: Whether the page list is shown.
        games_view: The library page.
    """

    # Windows opened via "New Window" must outlive the slot that created them
    _open_windows: list["MainWindow"] = []

    def __init__(self, legendary: Legendable | None = None):
        """Initializes the main window and starts loading the library.

        Args:
            legendary: Legendable to use. Defaults to the Legendary CLI
                with the configured paths.
        """
        super().__init__()
        self.legendary: Legendable = legendary or LegendaryCli()
        self.user_name: str | None = self.legendary.get_user_name()
        self.sidebar_visible: bool = config.SIDEBAR_VISIBLE

        self.setWindowTitle(t("ui.main_window.title"))
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        self.sidebar = QListWidget()
        self.sidebar.setMaximumWidth(180)
        for page_id, key in PAGES:
            item = QListWidgetItem(t(key))
            item.setData(Qt.ItemDataRole.UserRole, page_id)
            self.sidebar.addItem(item)
        layout.addWidget(self.sidebar, 1)

        self.pages = QStackedWidget()
        self.games_view = GamesView(self.legendary)
        self.web_view = WebView()
        self.pages.addWidget(self.games_view)
        self.pages.addWidget(self.web_view)
        layout.addWidget(self.pages, 4)

        self.setCentralWidget(central)

        # noinspection PyUnresolvedReferences
        self.sidebar.currentRowChanged.connect(self.show_page)
        self.sidebar.setCurrentRow(self.page_index(config.LAST_PAGE))
        self.sidebar.setVisible(self.sidebar_visible)

        self.main_menu = MenuBuilder(self).build()
        # Menu shortcuts only fire when the actions live on a visible widget
        self.addActions(self.main_menu.actions())

        self.toolbar = QToolBar(t("ui.toolbar.title"))
        self.addToolBar(self.toolbar)
        self.toolbar_builder = ToolbarBuilder(self)
        self.refresh_toolbar()

        self.games_view.reload()

    @staticmethod
    def page_index(page_id: str) -> int:
        """Sidebar row for a page id; unknown ids fall back to the first page."""
        for index, (candidate, _key) in enumerate(PAGES):
            if candidate == page_id:
                return index
        return 0

    def show_page(self, row: int) -> None:
        if row < 0:
            return
        self.pages.setCurrentIndex(row)
        config.LAST_PAGE = PAGES[row][0]
        self.setWindowTitle(t("ui.main_window.title_page", page=t(PAGES[row][1])))

    def set_sidebar_visible(self, visible: bool) -> None:
        self.sidebar_visible = visible
        self.sidebar.setVisible(visible)
        config.SIDEBAR_VISIBLE = visible

    def refresh_toolbar(self) -> None:
        """Rebuilds the toolbar after a session change."""
        self.toolbar_builder.build(self.toolbar)

    def refresh_library(self) -> None:
        """Runs ``legendary list`` and reloads the library."""
        self.games_view.refresh()

    def show_login(self) -> None:
        """Shows the login dialog and reloads on success."""
        dialog = LoginDialog(self.legendary, self)
        if dialog.exec() != LoginDialog.DialogCode.Accepted:
            return

        self.user_name = dialog.user_name
        logger.info(t("logs.legendary.logged_in_as", name=self.user_name or t("common.unknown")))
        self.refresh_toolbar()
        self.games_view.refresh()

    def logout(self) -> None:
        """Ends the session after confirmation and clears the library."""
        if not UIHelper.confirm(self, t("ui.login.logout_confirm")):
            return

        self.legendary.logout()
        self.user_name = None
        self.refresh_toolbar()
        self.games_view.set_games([])

    def open_new_window(self) -> None:
        window = MainWindow(self.legendary)
        MainWindow._open_windows.append(window)
        window.show()

    def show_about(self) -> None:
        AboutDialog(self).exec()

    @staticmethod
    def quit_application() -> None:
        QApplication.quit()

    def closeEvent(self, event) -> None:
        """Persists window state before closing."""
        config.WINDOW_WIDTH = self.width()
        config.WINDOW_HEIGHT = self.height()
        config.save()
        if self in MainWindow._open_windows:
            MainWindow._open_windows.remove(self)
        super().closeEvent(event)
