# trails/ui/login_dialog.py

"""
Epic Games login dialog.

Legendary logs in with an authorization code: the user signs in on Epic's
website, copies the code shown there and pastes it here. The actual
``legendary auth`` call runs in a LoginWorker.
"""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from trails.ui.theme import Theme
from trails.ui.widgets.base_dialog import BaseDialog
from trails.ui.widgets.ui_helper import UIHelper
from trails.ui.workers import LoginWorker
from trails.utils.i18n import t

if TYPE_CHECKING:
    from trails.core.legendary import Legendable

logger = logging.getLogger("trails.login_dialog")

__all__ = ["EPIC_LOGIN_URL", "LoginDialog"]

EPIC_LOGIN_URL = "https://legendary.gl/epiclogin"


class LoginDialog(BaseDialog):
    """
    Dialog collecting an Epic authorization code.

    Attributes:
        user_name (str | None): Display name after a successful login.
        worker (LoginWorker | None): The running login attempt, if any.
    """

    def __init__(self, legendary: "Legendable", parent: QWidget | None = None):
        super().__init__(parent, title_key="ui.login.title", buttons="custom")
        self.legendary = legendary
        self.user_name: str | None = None
        self.worker: LoginWorker | None = None

    def _build_content(self, layout: QVBoxLayout) -> None:
        info = QLabel(t("ui.login.instructions"))
        info.setWordWrap(True)
        layout.addWidget(info)

        self.open_button = QPushButton(t("ui.login.open_page"))
        self.open_button.clicked.connect(self.open_login_page)
        layout.addWidget(self.open_button)

        self.code_input = QLineEdit()
        self.code_input.setPlaceholderText(t("ui.login.code_placeholder"))
        self.code_input.returnPressed.connect(self.start_login)
        layout.addWidget(self.code_input)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self.cancel_button = QPushButton(t("common.cancel"))
        self.cancel_button.clicked.connect(self.reject)
        btn_layout.addWidget(self.cancel_button)

        self.login_button = QPushButton(t("ui.login.login"))
        self.login_button.setStyleSheet(Theme.button_primary())
        self.login_button.setDefault(True)
        self.login_button.clicked.connect(self.start_login)
        btn_layout.addWidget(self.login_button)
        layout.addLayout(btn_layout)

    @staticmethod
    def open_login_page() -> None:
        """Opens Epic's login page in the default browser."""
        logger.info(t("logs.legendary.opening_login_page", url=EPIC_LOGIN_URL))
        webbrowser.open(EPIC_LOGIN_URL)

    def start_login(self) -> None:
        """Runs the login attempt in the background."""
        if self.worker is not None and self.worker.isRunning():
            return

        self._set_busy(True)
        self.worker = LoginWorker(self.legendary, self.code_input.text().strip() or None)
        # noinspection PyUnresolvedReferences
        self.worker.login_success.connect(self.on_login_success)
        # noinspection PyUnresolvedReferences
        self.worker.login_error.connect(self.on_login_error)
        self.worker.start()

    def on_login_success(self, user_name: str | None) -> None:
        self.user_name = user_name
        self._set_busy(False)
        self.accept()

    def on_login_error(self, message: str) -> None:
        self._set_busy(False)
        self.status_label.setText("")
        UIHelper.show_error(self, message)

    def _set_busy(self, busy: bool) -> None:
        self.login_button.setEnabled(not busy)
        self.code_input.setEnabled(not busy)
        self.status_label.setText(t("ui.login.working") if busy else "")
