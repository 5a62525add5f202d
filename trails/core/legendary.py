# trails/core/legendary.py

"""
Session and library access through the Legendary command-line client.

Legendary owns authentication and installation; Trails only runs it as a
subprocess and reads what it leaves on disk. ``Legendable`` describes that
boundary so views and workers can be driven by a stand-in in tests, and
``LegendaryCli`` is the implementation that actually shells out.
"""

from __future__ import annotations

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from trails.core.game import GameData
from trails.core.metadata_reader import MetadataReader
from trails.core.reconciler import Reconciler
from trails.utils.i18n import t
from trails.utils.json_utils import load_json_object

logger = logging.getLogger("trails.legendary")

__all__ = [
    "Legendable",
    "LegendaryCli",
    "LegendaryError",
    "LoginFailedError",
    "NoAuthCodeProvidedError",
]

USER_FILE = "user.json"
USER_LOCK_FILE = "user.json.lock"
CONFIG_ENV_VAR = "LEGENDARY_CONFIG_PATH"


class LegendaryError(Exception):
    """Base class for failures surfaced from a Legendary session."""


class NoAuthCodeProvidedError(LegendaryError):
    """Raised when a login is attempted without an authorization code."""

    def __init__(self) -> None:
        super().__init__(t("ui.login.no_code"))


class LoginFailedError(LegendaryError):
    """Raised when Legendary ran but left no session behind.

    Attributes:
        output: Whatever the process printed, for diagnostics.
    """

    def __init__(self, output: str) -> None:
        super().__init__(t("ui.login.failed", output=output))
        self.output = output


class Legendable(ABC):
    """Everything the UI needs from a Legendary installation."""

    @abstractmethod
    def is_logged_in(self) -> bool:
        """Check whether a session exists."""

    @abstractmethod
    def try_login(self, auth_code: str | None) -> bool:
        """Log in with an authorization code from the Epic login page.

        Returns:
            True when a session exists afterwards.

        Raises:
            NoAuthCodeProvidedError: If auth_code is None or empty.
            LoginFailedError: If no session exists afterwards.
        """

    @abstractmethod
    def load_all_game_data(self) -> list[GameData] | None:
        """Load the reconciled library, or None when logged out."""

    @abstractmethod
    def load_list(self) -> None:
        """Ask Legendary to refresh its game list on disk."""

    @abstractmethod
    def get_user_name(self) -> str | None:
        """Return the display name of the logged-in account."""

    @abstractmethod
    def logout(self) -> None:
        """End the session. Safe to call when already logged out."""


class LegendaryCli(Legendable):
    """Legendable backed by the ``legendary`` binary on Unix-like systems.

    Args:
        config_dir: Legendary's configuration root. Defaults to the
            configured directory (usually ``~/.config/legendary``).
        binary_path: Command used to run Legendary. Defaults to the
            configured binary, ``legendary`` from PATH unless overridden.
    """

    def __init__(self, config_dir: Path | None = None, binary_path: str | None = None):
        from trails.config import config

        self.config_dir = Path(config_dir) if config_dir is not None else config.LEGENDARY_CONFIG_DIR
        self.binary_path = binary_path or config.LEGENDARY_BINARY
        self.reader = MetadataReader(self.config_dir)
        self.reconciler = Reconciler(self.config_dir, self.reader)

    @property
    def user_file(self) -> Path:
        return self.config_dir / USER_FILE

    @property
    def user_lock_file(self) -> Path:
        return self.config_dir / USER_LOCK_FILE

    def is_logged_in(self) -> bool:
        """Check for user.json; no caching, no side effects."""
        logger.debug(t("logs.legendary.checking_session", path=self.user_file))
        return self.user_file.exists()

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        """Run Legendary against our config root and wait for it to exit.

        Args:
            *args: Subcommand and arguments passed after the binary.

        Returns:
            The completed process with stdout and stderr captured as text.

        Raises:
            OSError: If the process could not be started.
        """
        env = os.environ.copy()
        env[CONFIG_ENV_VAR] = str(self.config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        command = [self.binary_path, *args]
        logger.debug(t("logs.legendary.running", command=" ".join(command[:2])))
        return subprocess.run(
            command,
            cwd=self.config_dir,
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )

    @staticmethod
    def _combined_output(result: subprocess.CompletedProcess) -> str:
        parts = [part.strip() for part in (result.stdout, result.stderr) if part and part.strip()]
        return "\n".join(parts)

    def try_login(self, auth_code: str | None) -> bool:
        """Run ``legendary auth --code <code>`` and check for a new session.

        The exit code is deliberately ignored: Legendary's own success signal
        is the user.json it writes.

        Args:
            auth_code: The authorization code copied from the login page.

        Returns:
            True on success.

        Raises:
            NoAuthCodeProvidedError: If auth_code is None or empty.
            LoginFailedError: If user.json does not exist afterwards.
        """
        if not auth_code:
            raise NoAuthCodeProvidedError()

        try:
            result = self._run("auth", "--code", auth_code)
        except OSError as e:
            logger.error(t("logs.legendary.spawn_failed", binary=self.binary_path, error=e))
            raise LoginFailedError(str(e)) from e

        output = self._combined_output(result)
        logger.debug(t("logs.legendary.output", output=output or t("common.none")))

        if self.user_file.exists():
            logger.info(t("logs.legendary.login_success"))
            return True

        logger.error(t("logs.legendary.login_failed"))
        raise LoginFailedError(output or t("common.unknown_error"))

    def load_all_game_data(self) -> list[GameData] | None:
        """Read and reconcile the whole library.

        Returns:
            None when logged out, an empty list when Legendary has not written
            any metadata yet, otherwise the sorted library.
        """
        if not self.is_logged_in():
            return None

        installed = self.reconciler.load_installed_games()
        games = self.reader.read_all()
        return self.reconciler.reconcile(games, installed)

    def load_list(self) -> None:
        """Run ``legendary list --third-party`` so metadata on disk is fresh.

        Failures are logged, never raised; the next load simply sees
        whatever files already exist.
        """
        try:
            result = self._run("list", "--third-party")
        except OSError as e:
            logger.error(t("logs.legendary.spawn_failed", binary=self.binary_path, error=e))
            return

        logger.debug(t("logs.legendary.output", output=self._combined_output(result) or t("common.none")))
        logger.info(t("logs.legendary.list_refreshed", code=result.returncode))

    def get_user_name(self) -> str | None:
        """Return ``displayName`` from user.json, or None."""
        data = load_json_object(self.user_file)
        if data is None:
            return None
        display_name = data.get("displayName")
        return display_name if isinstance(display_name, str) else None

    def logout(self) -> None:
        """Delete user.json and its lock file."""
        for path in (self.user_file, self.user_lock_file):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(t("logs.legendary.logout_error", path=path, error=e))
        logger.info(t("logs.legendary.logged_out"))
