"""Tests for loading app settings and applying them to the window."""

from __future__ import annotations

import logging

import pytest

from chessrules.ui import bootstrap
from chessrules.ui.main_window import MainWindow
from chessrules.ui.settings import AppSettings
from chessrules.ui.styles.theme import THEMES, BoardTheme


class TestFromEnv:
    def test_defaults_without_variables(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_overrides(self) -> None:
        settings = AppSettings.from_env(
            {
                "CHESSRULES_BOARD_THEME": "Blue",
                "CHESSRULES_FLIPPED": "yes",
                "CHESSRULES_SHOW_COORDINATES": "0",
                "CHESSRULES_SETUP": " rook_endgame ",
                "CHESSRULES_LOG_LEVEL": "debug",
            }
        )
        assert settings.board_theme == "Blue"
        assert settings.flipped is True
        assert settings.show_coordinates is False
        assert settings.setup == "rook_endgame"
        assert settings.log_level == "debug"

    def test_bad_boolean_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chessrules.ui.settings"):
            settings = AppSettings.from_env({"CHESSRULES_SHOW_REACHABLE": "maybe"})
        assert settings.show_reachable is True
        assert "CHESSRULES_SHOW_REACHABLE" in caplog.text

    def test_unknown_theme_uses_default(self) -> None:
        assert AppSettings(board_theme="Purple").theme == BoardTheme.default()
        assert AppSettings(board_theme="Green").theme == THEMES["Green"]


class TestApplySettings:
    def test_flipped_setting_applies_to_scene(self) -> None:
        window = MainWindow(AppSettings(flipped=True))
        assert window.board_view.board_scene.is_flipped()

    def test_flip_action_toggles_setting(self) -> None:
        window = MainWindow()
        window._on_flip()
        assert window.settings.flipped
        assert window.board_view.board_scene.is_flipped()

    def test_hidden_coordinates(self) -> None:
        window = MainWindow(AppSettings(show_coordinates=False))
        scene = window.board_view.board_scene
        assert all(not item.isVisible() for item in scene._coord_items)


class TestConfigureLogging:
    def test_level_name_is_resolved(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(
            bootstrap.logging, "basicConfig", lambda **kw: calls.append(kw)
        )
        bootstrap.configure_logging("debug")
        bootstrap.configure_logging("nonsense")
        assert calls[0]["level"] == logging.DEBUG
        assert calls[1]["level"] == logging.WARNING
