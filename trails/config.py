"""
Configuration - Legendary paths, binary location and UI state.

Values come from three layers, later ones winning:
defaults, environment (.env supported), then settings.json.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from trails.utils.json_utils import load_json_object, save_json

logger = logging.getLogger("trails.config")


__all__ = ["Config", "config", "default_legendary_dir"]


def default_legendary_dir() -> Path:
    """Return the per-user directory Legendary writes its state to."""
    return Path.home() / ".config" / "legendary"


def _coerce_timeout(value: Any) -> float | None:
    """Turn a settings value into a usable requests timeout.

    Args:
        value: Raw ``image_timeout`` from settings.json.

    Returns:
        A positive float, or None (transport default) for anything else.
    """
    if value is None:
        return None
    # JSON true/false must not become 1.0/0.0
    if isinstance(value, bool):
        timeout = None
    else:
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            timeout = None

    if timeout is None or not math.isfinite(timeout) or timeout <= 0:
        from trails.utils.i18n import t

        logger.warning(t("logs.config.invalid_timeout", value=value))
        return None
    return timeout


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages the Legendary config root, binary path and window state.
    """

    DATA_DIR: Path = Path.home() / ".config" / "trails"
    SETTINGS_FILE: Path = DATA_DIR / "settings.json"

    UI_LANGUAGE: str = "en"

    # Legendary
    LEGENDARY_CONFIG_DIR: Path = None
    LEGENDARY_BINARY: str = "legendary"

    # None keeps the requests transport default
    IMAGE_TIMEOUT: float | None = None

    # UI State
    WINDOW_WIDTH: int = 800
    WINDOW_HEIGHT: int = 600
    SIDEBAR_VISIBLE: bool = True
    LAST_PAGE: str = "games"

    def __post_init__(self):
        """Apply environment overrides and load settings after instantiation."""
        if self.LEGENDARY_CONFIG_DIR is None:
            self.LEGENDARY_CONFIG_DIR = default_legendary_dir()

        load_dotenv()
        env_dir = os.getenv("LEGENDARY_CONFIG_PATH")
        if env_dir:
            self.LEGENDARY_CONFIG_DIR = Path(env_dir).expanduser()
        env_binary = os.getenv("TRAILS_LEGENDARY_BINARY")
        if env_binary:
            self.LEGENDARY_BINARY = env_binary

        self._load_settings()

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        # Local import to avoid circular dependency
        from trails.utils.i18n import t

        if not self.SETTINGS_FILE.exists():
            return

        data = load_json_object(self.SETTINGS_FILE)
        if data is None:
            logger.error(t("logs.config.load_error", path=self.SETTINGS_FILE))
            return

        self.UI_LANGUAGE = data.get("ui_language", self.UI_LANGUAGE)

        legendary_dir = data.get("legendary_config_dir")
        if legendary_dir:
            self.LEGENDARY_CONFIG_DIR = Path(legendary_dir).expanduser()
        self.LEGENDARY_BINARY = data.get("legendary_binary") or self.LEGENDARY_BINARY
        self.IMAGE_TIMEOUT = _coerce_timeout(data.get("image_timeout", self.IMAGE_TIMEOUT))

        self.WINDOW_WIDTH = data.get("window_width", self.WINDOW_WIDTH)
        self.WINDOW_HEIGHT = data.get("window_height", self.WINDOW_HEIGHT)
        self.SIDEBAR_VISIBLE = data.get("sidebar_visible", self.SIDEBAR_VISIBLE)
        self.LAST_PAGE = data.get("last_page", self.LAST_PAGE)

    def save(self) -> None:
        """Save current configuration to JSON file."""
        from trails.utils.i18n import t

        data = {
            "ui_language": self.UI_LANGUAGE,
            "legendary_config_dir": str(self.LEGENDARY_CONFIG_DIR) if self.LEGENDARY_CONFIG_DIR else "",
            "legendary_binary": self.LEGENDARY_BINARY,
            "image_timeout": self.IMAGE_TIMEOUT,
            "window_width": self.WINDOW_WIDTH,
            "window_height": self.WINDOW_HEIGHT,
            "sidebar_visible": self.SIDEBAR_VISIBLE,
            "last_page": self.LAST_PAGE,
        }

        if not save_json(self.SETTINGS_FILE, data):
            logger.error(t("logs.config.save_error", path=self.SETTINGS_FILE))


# Global instance
config = Config()
