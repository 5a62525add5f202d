# trails/ui/widgets/async_image.py

"""
An image widget that downloads its picture in a separate thread.

The widget moves through three states: LOADING while a fetch is running,
LOADED once bytes arrived, and FAILED when the URL was unusable or the
request did not succeed. Invalid URLs fail immediately without a network
attempt.
"""

from __future__ import annotations

__all__ = ["AsyncImage", "ImageLoader", "ImageState"]

import logging
from enum import Enum

from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from trails.core.image_fetcher import fetch_image, is_fetchable_url
from trails.ui.theme import Theme
from trails.utils.i18n import t

logger = logging.getLogger("trails.async_image")


class ImageState(Enum):
    """Observable states of an image load."""

    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class ImageLoader(QThread):
    """A QThread to fetch image bytes without blocking the GUI.

    Both signals carry the generation the loader was started with, so the
    receiving widget can tell a current result from a superseded one.

    Signals:
        loaded: Emitted with the generation and the downloaded bytes.
        failed: Emitted with the generation when nothing could be downloaded.
    """

    loaded = pyqtSignal(int, bytes)
    failed = pyqtSignal(int)

    # Started loaders stay referenced until their thread has exited, even
    # after the widget that started them is deleted
    _active: set["ImageLoader"] = set()

    def __init__(self, url: str, generation: int = 0):
        """
        Initializes the ImageLoader.

        Args:
            url (str): The URL to fetch.
            generation (int): Load generation of the requesting widget.
        """
        super().__init__()
        self.url = url
        self.generation = generation
        # noinspection PyUnresolvedReferences
        self.finished.connect(self._release)

    def start(self, priority: QThread.Priority = QThread.Priority.InheritPriority) -> None:
        ImageLoader._active.add(self)
        super().start(priority)

    def _release(self) -> None:
        self.wait()
        ImageLoader._active.discard(self)

    def run(self):
        """Fetches the image and emits the outcome."""
        data = fetch_image(self.url)
        if data:
            self.loaded.emit(self.generation, data)
        else:
            self.failed.emit(self.generation)


class AsyncImage(QWidget):
    """Square image area that loads from a URL.

    Signals:
        state_changed: Emitted with the new ImageState on every transition.
    """

    state_changed = pyqtSignal(object)

    def __init__(self, size: int = 400, parent: QWidget | None = None):
        """
        Initializes the AsyncImage widget.

        Args:
            size (int): Minimum width and height in pixels.
            parent (QWidget | None): The parent widget.
        """
        super().__init__(parent)
        self.size_px = size
        self.setMinimumSize(size, size)

        self.state: ImageState = ImageState.LOADING
        self.image_data: bytes | None = None
        self.url: str | None = None
        self.loader: ImageLoader | None = None

        # Results from loads superseded by a newer load() are dropped
        self._load_generation: int = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.image_label)

    def load(self, url: str | None) -> None:
        """Starts loading an image.

        Args:
            url (str | None): The image URL. Empty or invalid URLs go
                straight to FAILED.
        """
        self._load_generation += 1
        self.url = url
        self.image_data = None

        if not is_fetchable_url(url):
            self._set_failed()
            return

        self._set_state(ImageState.LOADING)
        self.image_label.setText(t("ui.image.loading"))

        loader = ImageLoader(url, self._load_generation)
        # Bound methods, so Qt drops the connections when this widget is deleted
        # noinspection PyUnresolvedReferences
        loader.loaded.connect(self._on_loaded)
        # noinspection PyUnresolvedReferences
        loader.failed.connect(self._on_failed)
        self.loader = loader
        loader.start()

    def _on_loaded(self, generation: int, data: bytes) -> None:
        if generation != self._load_generation:
            return

        pixmap = QPixmap()
        if not pixmap.loadFromData(data):
            logger.warning(t("logs.image.decode_failed", url=self.url))
            self._set_failed()
            return

        self.image_data = data
        self.image_label.setPixmap(
            pixmap.scaled(
                self.size_px,
                self.size_px,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
        self._set_state(ImageState.LOADED)

    def _on_failed(self, generation: int) -> None:
        if generation != self._load_generation:
            return
        self._set_failed()

    def _set_failed(self) -> None:
        self.image_label.clear()
        self.image_label.setText(t("emoji.no_image"))
        self.image_label.setStyleSheet(f"color: {Theme.IMAGE_FAILED};")
        self._set_state(ImageState.FAILED)

    def _set_state(self, state: ImageState) -> None:
        self.state = state
        self.state_changed.emit(state)
