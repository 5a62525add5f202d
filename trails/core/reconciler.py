# trails/core/reconciler.py

"""
Cross-references game metadata with Legendary's installed state.

Marks which games are downloaded, which of those are behind the latest
build, and produces the library in display order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from trails.core.game import GameData
from trails.core.metadata_reader import MetadataReader
from trails.utils.i18n import t
from trails.utils.json_utils import load_json_object

logger = logging.getLogger("trails.reconciler")

__all__ = ["Reconciler"]


class Reconciler:
    """Applies install and update flags to decoded games.

    The update check is fail-open: anything that goes wrong while reading a
    game's build version leaves ``requires_update`` False.
    """

    def __init__(self, config_dir: Path, reader: MetadataReader | None = None):
        """
        Initializes the Reconciler.

        Args:
            config_dir (Path): Legendary's configuration root.
            reader (MetadataReader | None): Reader used to locate metadata
                files for the update check.
        """
        self.config_dir = config_dir
        self.installed_path = config_dir / "installed.json"
        self.reader = reader or MetadataReader(config_dir)

    def load_installed_games(self) -> dict[str, str]:
        """
        Reads installed.json into a mapping of app name to version.

        Returns:
            dict[str, str]: Installed versions. Empty when the file is
                missing or malformed. Entries without a string version are
                dropped.
        """
        data = load_json_object(self.installed_path)
        if data is None:
            return {}

        installed = {}
        for app_name, details in data.items():
            if not isinstance(details, dict):
                continue
            version = details.get("version")
            if isinstance(version, str):
                installed[app_name] = version

        logger.info(t("logs.reconciler.installed_total", count=len(installed)))
        return installed

    def check_requires_update(self, app_name: str, installed_version: str) -> bool:
        """
        Compares an installed version with the game's metadata build version.

        Args:
            app_name (str): Legendary code name of the game.
            installed_version (str): Version recorded in installed.json.

        Returns:
            bool: True only if a build version could be read and differs.
        """
        data = load_json_object(self.reader.metadata_path(app_name))
        if data is None:
            return False

        asset_infos = data.get("asset_infos")
        if not isinstance(asset_infos, dict):
            return False

        build_version = asset_infos.get("build_version")
        if not isinstance(build_version, str):
            return False

        requires_update = build_version != installed_version
        if requires_update:
            logger.info(
                t("logs.reconciler.update_available", app=app_name, installed=installed_version, latest=build_version)
            )
        return requires_update

    def reconcile(self, games: list[GameData], installed: dict[str, str]) -> list[GameData]:
        """
        Filters, flags and orders the library.

        Args:
            games (list[GameData]): Decoded games in discovery order.
            installed (dict[str, str]): Output of load_installed_games().

        Returns:
            list[GameData]: Listable games sorted by title, case-insensitive.
                The sort is stable, so equal titles keep discovery order.
        """
        result = []
        for game in games:
            if not game.is_listable:
                logger.debug(t("logs.reconciler.skipped", title=game.app_title or t("common.unknown")))
                continue

            game.is_downloaded = game.app_name in installed
            if game.is_downloaded:
                game.requires_update = self.check_requires_update(game.app_name, installed[game.app_name])
            result.append(game)

        result.sort(key=lambda g: g.sort_key)
        logger.info(t("logs.reconciler.loaded_total", count=len(result)))
        return result
