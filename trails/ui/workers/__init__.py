"""UI worker threads package.

Contains background worker threads for long-running operations.
"""

from __future__ import annotations

from trails.ui.workers.game_load_worker import GameLoadWorker, ListRefreshWorker
from trails.ui.workers.login_worker import LoginWorker

__all__ = [
    "GameLoadWorker",
    "ListRefreshWorker",
    "LoginWorker",
]
