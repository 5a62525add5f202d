"""Reusable widgets for the Trails UI."""

from __future__ import annotations

from trails.ui.widgets.async_image import AsyncImage, ImageLoader, ImageState
from trails.ui.widgets.base_dialog import BaseDialog
from trails.ui.widgets.game_card import GameCard
from trails.ui.widgets.ui_helper import UIHelper

__all__ = [
    "AsyncImage",
    "BaseDialog",
    "GameCard",
    "ImageLoader",
    "ImageState",
    "UIHelper",
]
