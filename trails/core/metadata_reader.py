# trails/core/metadata_reader.py

"""
Scans Legendary's metadata directory for per-game JSON documents.

Legendary keeps one ``<app_name>.json`` per owned game under
``<config>/metadata``. This module only reads and decodes those files;
install state and ordering are the reconciler's business.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from trails.core.game import GameData, game_from_metadata
from trails.utils.i18n import t

logger = logging.getLogger("trails.metadata_reader")

__all__ = ["MetadataReader"]


class MetadataReader:
    """Reads game metadata files written by Legendary.

    A missing directory or an unreadable file never raises; the file is
    logged and skipped so the rest of the library still loads.
    """

    def __init__(self, config_dir: Path):
        """
        Initializes the MetadataReader.

        Args:
            config_dir (Path): Legendary's configuration root.
        """
        self.config_dir = config_dir
        self.metadata_dir = config_dir / "metadata"

    def metadata_path(self, app_name: str) -> Path:
        """Return where Legendary stores the metadata for one game."""
        return self.metadata_dir / f"{app_name}.json"

    def iter_metadata_files(self) -> Iterator[Path]:
        """Yield every visible ``.json`` file below the metadata directory.

        Walks recursively in sorted order. Hidden files and hidden
        directories (dot-prefixed) are skipped.
        """
        if not self.metadata_dir.is_dir():
            logger.info(t("logs.metadata.dir_missing", path=self.metadata_dir))
            return

        for root, dirs, files in os.walk(self.metadata_dir):
            dirs[:] = sorted(d for d in dirs if not d.startswith("."))
            for name in sorted(files):
                if name.startswith("."):
                    continue
                path = Path(root) / name
                if path.suffix == ".json" and path.is_file():
                    yield path

    def read_file(self, path: Path) -> GameData | None:
        """Decode a single metadata file.

        Args:
            path (Path): The metadata file.

        Returns:
            GameData | None: The decoded game, or None if the file could not
                be read or is not a JSON object.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(t("logs.metadata.parse_error", file=path.name, error=e))
            return None

        if not isinstance(data, dict):
            logger.warning(t("logs.metadata.not_an_object", file=path.name))
            return None

        game = game_from_metadata(data)
        logger.debug(
            t(
                "logs.metadata.extracted",
                title=game.app_title or t("common.unknown"),
                image=game.key_image.url if game.key_image else t("common.none"),
            )
        )
        return game

    def read_all(self) -> list[GameData]:
        """
        Decodes every metadata file in discovery order.

        Returns:
            list[GameData]: All games that could be decoded, unfiltered.
        """
        games = []
        for path in self.iter_metadata_files():
            logger.debug(t("logs.metadata.processing", file=path.name))
            game = self.read_file(path)
            if game is not None:
                games.append(game)
        logger.info(t("logs.metadata.read_total", count=len(games)))
        return games
