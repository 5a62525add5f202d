# tests/conftest.py
import json
import os
from pathlib import Path
from typing import Any, Callable

# Ensure Qt can run headless (CI runners have no display server)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication
from pytestqt.qtbot import QtBot

from trails.core.game import GameData, Platform
from trails.core.legendary import Legendable, LoginFailedError, NoAuthCodeProvidedError


@pytest.fixture(scope="session")
def qapp():
    """QApplication instance for all Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def qtbot(qapp, request):
    """Provide qtbot fixture with automatic cleanup."""
    bot = QtBot(request)
    yield bot
    if hasattr(bot, "cleanup"):
        bot.cleanup()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep config.save() away from the real ~/.config/trails."""
    from trails.config import Config, config

    monkeypatch.setattr(config, "SETTINGS_FILE", tmp_path / "trails-settings" / "settings.json")
    monkeypatch.setattr(config, "DATA_DIR", tmp_path / "trails-settings")
    for name in ("LAST_PAGE", "SIDEBAR_VISIBLE", "WINDOW_WIDTH", "WINDOW_HEIGHT"):
        monkeypatch.setattr(config, name, getattr(Config, name))


def make_metadata(
    app_name: str | None,
    title: str | None,
    platforms: tuple[str, ...] = ("Windows",),
    build_version: str | None = "1.0.0",
    key_images: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a metadata document shaped like the ones Legendary writes."""
    asset_infos: dict[str, Any] = {p: {"app_name": app_name, "asset_id": "x"} for p in platforms}
    if build_version is not None:
        asset_infos["build_version"] = build_version

    data: dict[str, Any] = {
        "asset_infos": asset_infos,
        "metadata": {"keyImages": key_images or []},
    }
    if app_name is not None:
        data["app_name"] = app_name
    if title is not None:
        data["app_title"] = title
    return data


def make_key_image(image_type: str, url: str | None = None, **extra: Any) -> dict[str, Any]:
    """Build one keyImages entry."""
    image = {
        "type": image_type,
        "url": url or f"https://cdn.example.com/{image_type}.jpg",
        "width": 1200,
        "height": 1600,
        "size": 123456,
        "md5": "d41d8cd98f00b204e9800998ecf8427e",
        "uploadedDate": "2021-05-11T17:13:08.375Z",
    }
    image.update(extra)
    return image


@pytest.fixture
def legendary_dir(tmp_path) -> Path:
    """An empty Legendary config root."""
    root = tmp_path / "legendary"
    root.mkdir()
    return root


@pytest.fixture
def write_metadata(legendary_dir) -> Callable[..., Path]:
    """Factory writing ``metadata/<name>.json`` under the config root.

    Accepts either a dict (serialized as JSON) or a raw string.
    """

    def _write(name: str, content: dict | str, subdir: str | None = None) -> Path:
        folder = legendary_dir / "metadata"
        if subdir:
            folder = folder / subdir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_installed(legendary_dir) -> Callable[[dict | str], Path]:
    """Factory writing installed.json under the config root."""

    def _write(content: dict | str) -> Path:
        path = legendary_dir / "installed.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def login(legendary_dir) -> Callable[[str], Path]:
    """Create user.json as Legendary does after a successful auth."""

    def _login(display_name: str = "Tester") -> Path:
        path = legendary_dir / "user.json"
        path.write_text(json.dumps({"displayName": display_name, "account_id": "abc"}), encoding="utf-8")
        return path

    return _login


class StaticLegendary(Legendable):
    """Legendable returning canned data without running any binary."""

    VALID_CODE = "valid-code"

    def __init__(self, games: list[GameData] | None = None, logged_in: bool = True, user_name: str = "Tester"):
        self.games = games if games is not None else []
        self.logged_in = logged_in
        self.user_name = user_name
        self.calls: list[str] = []

    def is_logged_in(self) -> bool:
        return self.logged_in

    def try_login(self, auth_code: str | None) -> bool:
        self.calls.append("try_login")
        if not auth_code:
            raise NoAuthCodeProvidedError()
        if auth_code != self.VALID_CODE:
            raise LoginFailedError("invalid code")
        self.logged_in = True
        return True

    def load_all_game_data(self) -> list[GameData] | None:
        self.calls.append("load_all_game_data")
        return list(self.games) if self.logged_in else None

    def load_list(self) -> None:
        self.calls.append("load_list")

    def get_user_name(self) -> str | None:
        return self.user_name if self.logged_in else None

    def logout(self) -> None:
        self.calls.append("logout")
        self.logged_in = False


@pytest.fixture
def sample_games() -> list[GameData]:
    """Three listable games in display order, no artwork."""
    return [
        GameData(app_title="Alpha", app_name="alpha", platforms=[Platform.WINDOWS]),
        GameData(app_title="beta", app_name="beta", platforms=[Platform.MAC], is_downloaded=True),
        GameData(
            app_title="zeta",
            app_name="zeta",
            platforms=[Platform.WINDOWS, Platform.MAC],
            is_downloaded=True,
            requires_update=True,
        ),
    ]


@pytest.fixture
def static_legendary(sample_games) -> StaticLegendary:
    """Logged-in stand-in with the sample library."""
    return StaticLegendary(games=sample_games)


@pytest.fixture
def metadata_doc() -> Callable[..., dict[str, Any]]:
    """The make_metadata helper as a fixture."""
    return make_metadata


@pytest.fixture
def key_image_doc() -> Callable[..., dict[str, Any]]:
    """The make_key_image helper as a fixture."""
    return make_key_image


@pytest.fixture
def static_legendary_cls() -> type[StaticLegendary]:
    """The StaticLegendary class, for tests needing custom canned state."""
    return StaticLegendary
