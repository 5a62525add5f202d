"""Worker thread for logging in without blocking the UI.

``legendary auth`` talks to Epic's servers and can take a while; the
dialog stays responsive and receives the outcome via signals.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QThread, pyqtSignal

from trails.core.legendary import LegendaryError

if TYPE_CHECKING:
    from trails.core.legendary import Legendable

logger = logging.getLogger("trails.login_worker")

__all__ = ["LoginWorker"]


class LoginWorker(QThread):
    """Background thread running a single login attempt.

    Signals:
        login_success: Emitted with the account display name (or None).
        login_error: Emitted with a user-facing error message.
    """

    login_success = pyqtSignal(object)
    login_error = pyqtSignal(str)

    def __init__(self, legendary: "Legendable", auth_code: str | None):
        super().__init__()
        self.legendary = legendary
        self.auth_code = auth_code

    def run(self) -> None:
        """Attempt the login and report the outcome."""
        try:
            self.legendary.try_login(self.auth_code)
        except LegendaryError as e:
            logger.warning("Login attempt failed: %s", e)
            self.login_error.emit(str(e))
            return

        self.login_success.emit(self.legendary.get_user_name())
