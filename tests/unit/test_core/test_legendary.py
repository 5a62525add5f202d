# tests/unit/test_core/test_legendary.py

"""Tests for LegendaryCli.

The binary is never run: subprocess.run is patched and, where a login should
succeed, the mock writes user.json the way Legendary would.
"""

import json
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from trails.core.legendary import (
    CONFIG_ENV_VAR,
    LegendaryCli,
    LegendaryError,
    LoginFailedError,
    NoAuthCodeProvidedError,
)


def _completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def cli(legendary_dir):
    return LegendaryCli(config_dir=legendary_dir, binary_path="/opt/legendary/bin/legendary")


class TestSession:
    """Tests for is_logged_in, get_user_name and logout."""

    def test_logged_out_by_default(self, cli):
        assert cli.is_logged_in() is False
        assert cli.get_user_name() is None

    def test_not_cached(self, cli, login):
        """Each call re-checks the file system."""
        assert cli.is_logged_in() is False
        login("Madeline")
        assert cli.is_logged_in() is True
        assert cli.get_user_name() == "Madeline"

    def test_user_name_missing_or_wrong_type(self, cli, legendary_dir):
        (legendary_dir / "user.json").write_text(json.dumps({"account_id": "abc"}), encoding="utf-8")
        assert cli.get_user_name() is None

        (legendary_dir / "user.json").write_text(json.dumps({"displayName": 7}), encoding="utf-8")
        assert cli.get_user_name() is None

    def test_user_name_malformed_file(self, cli, legendary_dir):
        (legendary_dir / "user.json").write_text("{", encoding="utf-8")
        assert cli.is_logged_in() is True
        assert cli.get_user_name() is None

    def test_logout_removes_both_files(self, cli, login, legendary_dir):
        login()
        (legendary_dir / "user.json.lock").write_text("", encoding="utf-8")

        cli.logout()

        assert not (legendary_dir / "user.json").exists()
        assert not (legendary_dir / "user.json.lock").exists()
        assert cli.is_logged_in() is False

    def test_logout_idempotent(self, cli):
        """Logging out twice, or while logged out, is not an error."""
        cli.logout()
        cli.logout()
        assert cli.is_logged_in() is False

    def test_defaults_from_config(self, monkeypatch, tmp_path):
        from trails.config import config

        monkeypatch.setattr(config, "LEGENDARY_CONFIG_DIR", tmp_path / "from-config")
        monkeypatch.setattr(config, "LEGENDARY_BINARY", "legendary-custom")

        cli = LegendaryCli()
        assert cli.config_dir == tmp_path / "from-config"
        assert cli.binary_path == "legendary-custom"


class TestTryLogin:
    """Tests for the authorization code login."""

    @pytest.mark.parametrize("code", [None, ""])
    def test_no_code(self, cli, code):
        """An empty code fails before any process is started."""
        with patch("trails.core.legendary.subprocess.run") as mock_run:
            with pytest.raises(NoAuthCodeProvidedError):
                cli.try_login(code)
        mock_run.assert_not_called()

    def test_success(self, cli, login):
        def fake_run(*args, **kwargs):
            login("Madeline")
            return _completed(stdout="Successfully logged in as Madeline")

        with patch("trails.core.legendary.subprocess.run", side_effect=fake_run):
            assert cli.try_login("abc123") is True
        assert cli.get_user_name() == "Madeline"

    def test_invocation(self, cli, legendary_dir, login):
        """Legendary runs in the config root with LEGENDARY_CONFIG_PATH set."""

        def fake_run(*args, **kwargs):
            login()
            return _completed()

        with patch("trails.core.legendary.subprocess.run", side_effect=fake_run) as mock_run:
            cli.try_login("abc123")

        args, kwargs = mock_run.call_args
        assert args[0] == ["/opt/legendary/bin/legendary", "auth", "--code", "abc123"]
        assert kwargs["cwd"] == legendary_dir
        assert kwargs["env"][CONFIG_ENV_VAR] == str(legendary_dir)
        assert kwargs["capture_output"] is True

    def test_failure_carries_output(self, cli):
        """Without user.json the login fails, whatever the exit code."""
        result = _completed(stdout="", stderr="[cli] ERROR: Login attempt failed", returncode=0)
        with patch("trails.core.legendary.subprocess.run", return_value=result):
            with pytest.raises(LoginFailedError) as exc_info:
                cli.try_login("bad-code")

        assert exc_info.value.output == "[cli] ERROR: Login attempt failed"
        assert "Login attempt failed" in str(exc_info.value)
        assert cli.is_logged_in() is False

    def test_failure_without_output(self, cli):
        with patch("trails.core.legendary.subprocess.run", return_value=_completed(returncode=1)):
            with pytest.raises(LoginFailedError) as exc_info:
                cli.try_login("bad-code")
        assert exc_info.value.output

    def test_binary_missing(self, cli):
        """A process that cannot be started is a failed login."""
        with patch("trails.core.legendary.subprocess.run", side_effect=FileNotFoundError("no such file")):
            with pytest.raises(LoginFailedError) as exc_info:
                cli.try_login("abc123")
        assert "no such file" in exc_info.value.output

    def test_errors_share_base_class(self):
        assert issubclass(NoAuthCodeProvidedError, LegendaryError)
        assert issubclass(LoginFailedError, LegendaryError)

    def test_creates_config_dir(self, tmp_path):
        """A fresh machine has no config root yet; Legendary runs inside it."""
        target = tmp_path / "fresh" / "legendary"
        cli = LegendaryCli(config_dir=target, binary_path="legendary")
        with patch("trails.core.legendary.subprocess.run", return_value=_completed()):
            with pytest.raises(LoginFailedError):
                cli.try_login("abc123")
        assert target.is_dir()


class TestLoadList:
    """Tests for ``legendary list``."""

    def test_invocation(self, cli, legendary_dir):
        with patch("trails.core.legendary.subprocess.run", return_value=_completed()) as mock_run:
            cli.load_list()

        args, kwargs = mock_run.call_args
        assert args[0] == ["/opt/legendary/bin/legendary", "list", "--third-party"]
        assert kwargs["cwd"] == legendary_dir

    def test_failure_not_raised(self, cli):
        with patch("trails.core.legendary.subprocess.run", side_effect=OSError("boom")):
            cli.load_list()

    def test_nonzero_exit_not_raised(self, cli):
        with patch("trails.core.legendary.subprocess.run", return_value=_completed(stderr="oops", returncode=1)):
            cli.load_list()


class TestLoadAllGameData:
    """Tests for the full library load."""

    def test_logged_out(self, cli, write_metadata, metadata_doc):
        write_metadata("a.json", metadata_doc("a", "A"))
        assert cli.load_all_game_data() is None

    def test_no_metadata(self, cli, login):
        login()
        assert cli.load_all_game_data() == []

    def test_full_flow(self, cli, login, write_metadata, write_installed, metadata_doc, key_image_doc):
        login()
        write_metadata(
            "Sugar.json",
            metadata_doc("Sugar", "Celeste", build_version="1.4.1", key_images=[key_image_doc("DieselGameBoxTall")]),
        )
        write_metadata("Fig.json", metadata_doc("Fig", "alto's Odyssey", ("Mac",)))
        write_metadata("Hidden.json", metadata_doc("Hidden", "No Platforms", platforms=()))
        write_metadata("broken.json", "{")
        write_installed({"Sugar": {"version": "1.4.0"}})

        games = cli.load_all_game_data()

        assert [g.app_title for g in games] == ["alto's Odyssey", "Celeste"]
        celeste = games[1]
        assert celeste.is_downloaded is True
        assert celeste.requires_update is True
        assert celeste.key_image.type == "DieselGameBoxTall"
        assert games[0].is_downloaded is False

    def test_no_subprocess(self, cli, login):
        """Loading only reads files."""
        login()
        with patch("trails.core.legendary.subprocess.run", new=MagicMock()) as mock_run:
            cli.load_all_game_data()
        mock_run.assert_not_called()
