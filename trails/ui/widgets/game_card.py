"""A library tile showing a game's artwork, title and install status."""

from __future__ import annotations

__all__ = ["GameCard"]

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from trails.core.game import GameData
from trails.ui.theme import Theme
from trails.ui.widgets.async_image import AsyncImage
from trails.utils.i18n import t

CARD_IMAGE_SIZE = 150


class GameCard(QFrame):
    """Card for one game in the library grid."""

    def __init__(self, game: GameData, parent: QWidget | None = None):
        super().__init__(parent)
        self.game = game
        self.setObjectName("game-card")
        self.setStyleSheet(Theme.game_card())

        layout = QVBoxLayout(self)

        self.image = AsyncImage(size=CARD_IMAGE_SIZE, parent=self)
        layout.addWidget(self.image)

        self.title_label = QLabel(game.app_title or t("common.unknown"))
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setMaximumWidth(CARD_IMAGE_SIZE)
        layout.addWidget(self.title_label)

        self.status_label = QLabel(self.status_text(game))
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        if game.requires_update:
            self.status_label.setStyleSheet(Theme.status_label(Theme.STATUS_UPDATE))
        else:
            self.status_label.setStyleSheet(Theme.status_label(Theme.STATUS_INSTALLED))
        self.status_label.setVisible(game.is_downloaded)
        layout.addWidget(self.status_label)

        self.image.load(game.key_image.url if game.key_image else None)

    @staticmethod
    def status_text(game: GameData) -> str:
        """Caption for the install state; empty for games not downloaded."""
        if not game.is_downloaded:
            return ""
        if game.requires_update:
            return t("ui.games.update_available")
        return t("ui.games.installed")
