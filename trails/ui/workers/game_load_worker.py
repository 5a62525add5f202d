"""
Worker threads for loading the game library in the background.

Reading metadata and running ``legendary list`` can take seconds, so both
happen off the GUI thread. The result is handed back through a signal;
only the slot on the GUI thread touches the visible game list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QThread, pyqtSignal

from trails.utils.i18n import t

if TYPE_CHECKING:
    from trails.core.legendary import Legendable

logger = logging.getLogger("trails.game_load_worker")

__all__ = ["GameLoadWorker", "ListRefreshWorker"]


class GameLoadWorker(QThread):
    """Background thread that reads and reconciles the library.

    Attributes:
        legendary: The Legendable to load from.

    Signals:
        games_loaded: Emitted once with ``list[GameData]``, or None when the
            user is not logged in.
    """

    games_loaded = pyqtSignal(object)

    def __init__(self, legendary: "Legendable"):
        """Initializes the game load worker.

        Args:
            legendary: The Legendable to load from.
        """
        super().__init__()
        self.legendary = legendary

    def run(self) -> None:
        """Loads the library and emits the result."""
        games = self.legendary.load_all_game_data()
        logger.info(t("logs.workers.games_loaded", count=len(games) if games is not None else 0))
        self.games_loaded.emit(games)


class ListRefreshWorker(GameLoadWorker):
    """Runs ``legendary list`` first, then loads the refreshed library."""

    def run(self) -> None:
        """Refreshes Legendary's list, then loads and emits the library."""
        self.legendary.load_list()
        super().run()
