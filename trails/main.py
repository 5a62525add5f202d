#!/usr/bin/env python3
"""Trails - Main Entry Point (PyQt6 Version)."""

from __future__ import annotations

import sys
import traceback

from PyQt6.QtWidgets import QApplication

from trails.config import config
from trails.core.logging import logger, setup_logging
from trails.utils.i18n import init_i18n, t
from trails.version import __app_name__, __version__

__all__ = ["main"]


def main() -> None:
    """Main application execution flow."""
    # 1. Initialize language (BEFORE creating UI elements)
    init_i18n(config.UI_LANGUAGE)

    # 2. Setup logging
    setup_logging(log_file=config.DATA_DIR / "trails.log")

    # 3. Create QApplication
    app = QApplication(sys.argv)
    app.setApplicationName(__app_name__)
    app.setApplicationVersion(__version__)
    app.setDesktopFileName("io.github.trails.Trails")

    logger.info("=" * 60)
    logger.info("%s %s", __app_name__, __version__)
    logger.info("=" * 60)
    logger.info(t("logs.main.legendary_config", path=config.LEGENDARY_CONFIG_DIR))

    # Imported late so widgets are never created before QApplication
    from trails.ui.main_window import MainWindow

    try:
        window = MainWindow()
        window.show()

        sys.exit(app.exec())

    except Exception as e:
        logger.critical("%s: %s", t("common.error"), e)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
