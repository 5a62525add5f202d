"""Logging setup for Trails.

Every module logs through a child of the ``"trails"`` logger, named after
its area (``trails.legendary``, ``trails.reconciler``, ``trails.async_image``
...), so one call to setup_logging() at startup routes them all. Messages are
localized with ``t("logs.<area>.<event>")`` before they are logged.

The console shows INFO and above by default. The optional log file (the app
writes ``~/.config/trails/trails.log``) always gets DEBUG, which includes the
raw output of every Legendary subprocess.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["LOG_FORMAT", "logger", "setup_logging"]

logger = logging.getLogger("trails")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | None = None,
) -> None:
    """Attach console and file handlers to the ``trails`` logger.

    Calling it again only adjusts the console level; handlers are never
    added twice.

    Args:
        level: Minimum level shown on the console (default: INFO).
        log_file: Optional log file that receives everything from DEBUG up.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S")

    console_handler = next((h for h in logger.handlers if getattr(h, "_trails_console", False)), None)
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler._trails_console = True
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    console_handler.setLevel(level)

    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    if log_file is not None and not has_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        has_file = True

    # The logger itself must pass DEBUG through when a file wants it
    logger.setLevel(logging.DEBUG if has_file else level)
