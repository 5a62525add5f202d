# trails/ui/games_view.py

"""
The library page: a grid of game cards fed by background workers.

Loading happens in GameLoadWorker / ListRefreshWorker; this widget only
applies their results on the GUI thread.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QGridLayout,
    QLabel,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trails.ui.widgets.game_card import CARD_IMAGE_SIZE, GameCard
from trails.ui.workers import GameLoadWorker, ListRefreshWorker
from trails.utils.i18n import t

if TYPE_CHECKING:
    from trails.core.game import GameData
    from trails.core.legendary import Legendable

logger = logging.getLogger("trails.games_view")

__all__ = ["GamesView"]

# Card width plus frame margins and padding
_CELL_WIDTH = CARD_IMAGE_SIZE + 40


class GamesView(QWidget):
    """Shows a spinner while loading, an empty notice, or the game grid.

    Signals:
        games_changed: Emitted with the new game list after each load.
    """

    games_changed = pyqtSignal(list)

    PAGE_LOADING = 0
    PAGE_EMPTY = 1
    PAGE_GRID = 2

    def __init__(self, legendary: "Legendable", parent: QWidget | None = None):
        super().__init__(parent)
        self.legendary = legendary
        self.games: list[GameData] = []
        self.cards: list[GameCard] = []
        self.load_worker: GameLoadWorker | None = None
        self._loading = False
        self._queued: type[GameLoadWorker] | None = None

        # Bumped on every start and every displayed result; a worker whose
        # start generation is no longer current has been overtaken
        self._generation = 0
        self._worker_generation = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget(self)
        layout.addWidget(self.stack)

        self.loading_label = QLabel(t("common.loading"))
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.loading_label)

        self.empty_label = QLabel(t("ui.games.empty"))
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.empty_label)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.grid_host = QWidget()
        self.grid = QGridLayout(self.grid_host)
        self.grid.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.scroll.setWidget(self.grid_host)
        self.stack.addWidget(self.scroll)

        self.stack.setCurrentIndex(self.PAGE_LOADING)

    @property
    def is_loading(self) -> bool:
        return self._loading

    def reload(self) -> None:
        """Reads the library from disk in the background."""
        self._request(GameLoadWorker)

    def refresh(self) -> None:
        """Asks Legendary to refresh its list, then reloads."""
        self._request(ListRefreshWorker)

    def _request(self, worker_cls: type[GameLoadWorker]) -> None:
        """Starts a load, or queues it behind the one already running."""
        if self._loading:
            # A queued refresh also covers a plain reload
            if self._queued is not ListRefreshWorker:
                self._queued = worker_cls
            logger.debug(t("logs.workers.load_queued"))
            return

        self._start_worker(worker_cls(self.legendary))

    def _start_worker(self, worker: GameLoadWorker) -> None:
        self._generation += 1
        self._worker_generation = self._generation
        self._loading = True

        self.stack.setCurrentIndex(self.PAGE_LOADING)
        self.load_worker = worker
        # noinspection PyUnresolvedReferences
        worker.games_loaded.connect(self._on_games_loaded)
        # noinspection PyUnresolvedReferences
        worker.finished.connect(self._on_worker_finished)
        worker.start()

    def _on_games_loaded(self, games: list[GameData] | None) -> None:
        if self._worker_generation != self._generation:
            logger.debug(t("logs.workers.stale_result"))
            return
        self.set_games(games)

    def _on_worker_finished(self) -> None:
        self.load_worker.wait()
        self._loading = False

        queued, self._queued = self._queued, None
        if queued is not None:
            self._start_worker(queued(self.legendary))

    def set_games(self, games: list[GameData] | None) -> None:
        """Replaces the displayed library.

        Any load still running when this is called is overtaken: its result
        is dropped when it arrives.

        Args:
            games: The loaded games; None (logged out) shows as empty.
        """
        self._generation += 1
        self.games = list(games or [])
        self._rebuild_grid()
        self.stack.setCurrentIndex(self.PAGE_GRID if self.games else self.PAGE_EMPTY)
        self.games_changed.emit(self.games)

    def columns(self) -> int:
        """Number of card columns that fit the current width."""
        return max(1, self.scroll.viewport().width() // _CELL_WIDTH)

    def _rebuild_grid(self) -> None:
        for card in self.cards:
            self.grid.removeWidget(card)
            card.deleteLater()
        self.cards = [GameCard(game) for game in self.games]
        self._layout_cards()

    def _layout_cards(self) -> None:
        columns = self.columns()
        for index, card in enumerate(self.cards):
            self.grid.addWidget(card, index // columns, index % columns)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        for card in self.cards:
            self.grid.removeWidget(card)
        self._layout_cards()
