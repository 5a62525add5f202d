# tests/unit/test_ui/test_login_dialog.py

"""Tests for the Epic login dialog."""

from unittest.mock import patch

from trails.ui.login_dialog import EPIC_LOGIN_URL, LoginDialog


class TestLoginDialog:
    def test_widgets(self, qtbot, static_legendary_cls):
        dialog = LoginDialog(static_legendary_cls(logged_in=False))
        qtbot.addWidget(dialog)
        assert dialog.windowTitle() == "Log in to Epic Games"
        assert dialog.user_name is None
        assert dialog.login_button.isEnabled()

    def test_open_login_page(self, qtbot, static_legendary_cls):
        dialog = LoginDialog(static_legendary_cls(logged_in=False))
        qtbot.addWidget(dialog)
        with patch("trails.ui.login_dialog.webbrowser.open") as mock_open:
            dialog.open_button.click()
        mock_open.assert_called_once_with(EPIC_LOGIN_URL)

    def test_successful_login_accepts(self, qtbot, static_legendary_cls):
        legendary = static_legendary_cls(logged_in=False, user_name="Madeline")
        dialog = LoginDialog(legendary)
        qtbot.addWidget(dialog)
        dialog.code_input.setText("  " + static_legendary_cls.VALID_CODE + "  ")

        with qtbot.waitSignal(dialog.accepted, timeout=5000):
            dialog.start_login()
        dialog.worker.wait()

        assert dialog.user_name == "Madeline"
        assert legendary.logged_in is True
        assert dialog.login_button.isEnabled()

    def test_failed_login_shows_error(self, qtbot, static_legendary_cls):
        dialog = LoginDialog(static_legendary_cls(logged_in=False))
        qtbot.addWidget(dialog)
        dialog.code_input.setText("wrong")

        with patch("trails.ui.login_dialog.UIHelper.show_error") as mock_error:
            with qtbot.waitCallback(timeout=5000) as callback:
                mock_error.side_effect = lambda *args: callback(*args)
                dialog.start_login()
            dialog.worker.wait()

        mock_error.assert_called_once()
        assert "invalid code" in mock_error.call_args[0][1]
        assert dialog.user_name is None
        assert dialog.code_input.isEnabled()
