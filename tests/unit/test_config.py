# tests/unit/test_config.py

"""Tests for the configuration layers."""

import json
from pathlib import Path

import pytest

from trails.config import Config, default_legendary_dir
from trails.utils.json_utils import load_json_object


def _config(tmp_path, **kwargs):
    return Config(DATA_DIR=tmp_path, SETTINGS_FILE=tmp_path / "settings.json", **kwargs)


class TestDefaults:
    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LEGENDARY_CONFIG_PATH", raising=False)
        monkeypatch.delenv("TRAILS_LEGENDARY_BINARY", raising=False)
        cfg = _config(tmp_path)
        assert cfg.LEGENDARY_CONFIG_DIR == default_legendary_dir()
        assert cfg.LEGENDARY_BINARY == "legendary"
        assert cfg.IMAGE_TIMEOUT is None
        assert cfg.LAST_PAGE == "games"

    def test_default_legendary_dir(self):
        assert default_legendary_dir() == Path.home() / ".config" / "legendary"


class TestEnvironment:
    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LEGENDARY_CONFIG_PATH", str(tmp_path / "custom"))
        monkeypatch.setenv("TRAILS_LEGENDARY_BINARY", "/usr/local/bin/legendary")
        cfg = _config(tmp_path)
        assert cfg.LEGENDARY_CONFIG_DIR == tmp_path / "custom"
        assert cfg.LEGENDARY_BINARY == "/usr/local/bin/legendary"


class TestSettingsFile:
    def test_load(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LEGENDARY_CONFIG_PATH", raising=False)
        (tmp_path / "settings.json").write_text(
            json.dumps(
                {
                    "legendary_config_dir": str(tmp_path / "from-settings"),
                    "image_timeout": 3,
                    "window_width": 1024,
                    "sidebar_visible": False,
                    "last_page": "web",
                }
            ),
            encoding="utf-8",
        )
        cfg = _config(tmp_path)
        assert cfg.LEGENDARY_CONFIG_DIR == tmp_path / "from-settings"
        assert cfg.IMAGE_TIMEOUT == 3
        assert cfg.WINDOW_WIDTH == 1024
        assert cfg.WINDOW_HEIGHT == 600
        assert cfg.SIDEBAR_VISIBLE is False
        assert cfg.LAST_PAGE == "web"

    def test_malformed_keeps_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text("{ nope", encoding="utf-8")
        cfg = _config(tmp_path)
        assert cfg.WINDOW_WIDTH == 800

    def test_wrong_root_keeps_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text("[1]", encoding="utf-8")
        cfg = _config(tmp_path)
        assert cfg.LAST_PAGE == "games"

    def test_save_and_reload(self, tmp_path):
        cfg = _config(tmp_path / "nested")
        cfg.WINDOW_WIDTH = 1280
        cfg.LAST_PAGE = "web"
        cfg.LEGENDARY_BINARY = "legendary-git"
        cfg.save()

        reloaded = _config(tmp_path / "nested")
        assert reloaded.WINDOW_WIDTH == 1280
        assert reloaded.LAST_PAGE == "web"
        assert reloaded.LEGENDARY_BINARY == "legendary-git"

    def test_save_failure_does_not_raise(self, tmp_path):
        """A settings path that cannot be written is logged, not raised."""
        cfg = _config(tmp_path)
        cfg.SETTINGS_FILE = tmp_path
        cfg.save()
        assert tmp_path.is_dir()

    def test_saved_file_is_an_object(self, tmp_path):
        cfg = _config(tmp_path)
        cfg.IMAGE_TIMEOUT = 2.5
        cfg.save()

        data = load_json_object(tmp_path / "settings.json")
        assert data is not None
        assert data["image_timeout"] == 2.5
        assert data["last_page"] == "games"


class TestImageTimeout:
    """image_timeout from settings.json is always usable by requests."""

    @pytest.mark.parametrize("raw, expected", [(5, 5.0), (1.5, 1.5), ("7", 7.0), (None, None)])
    def test_valid_values(self, tmp_path, raw, expected):
        (tmp_path / "settings.json").write_text(json.dumps({"image_timeout": raw}), encoding="utf-8")
        assert _config(tmp_path).IMAGE_TIMEOUT == expected

    @pytest.mark.parametrize("raw", ["soon", True, 0, -3, [10], {"connect": 5}])
    def test_invalid_values_fall_back(self, tmp_path, raw):
        (tmp_path / "settings.json").write_text(json.dumps({"image_timeout": raw}), encoding="utf-8")
        assert _config(tmp_path).IMAGE_TIMEOUT is None
