"""Tests for the two-click move flow of MainWindow."""

from __future__ import annotations

from chessrules.core.enums import Color
from chessrules.core.types import parse_square
from chessrules.ui.main_window import MainWindow
from chessrules.ui.settings import AppSettings


def _click(window: MainWindow, *names: str) -> None:
    for name in names:
        window._on_square_clicked(parse_square(name))


def _endgame_window() -> MainWindow:
    return MainWindow(AppSettings(setup="rook_endgame"))


def test_initial_status() -> None:
    window = MainWindow()
    assert window.status_text == "Turn 1: White to move"
    assert window.board_view.board_scene.selected is None


def test_first_click_selects_own_piece() -> None:
    window = _endgame_window()
    _click(window, "c1")
    scene = window.board_view.board_scene
    assert scene.selected == parse_square("c1")
    assert scene._reachable_items


def test_two_clicks_make_a_move() -> None:
    window = _endgame_window()
    _click(window, "c1", "c5")

    match = window.match
    assert str(match.board.piece_at(parse_square("c5"))) == "R"
    assert match.board.piece_at(parse_square("c1")) is None
    assert match.current_player == Color.BLACK
    assert window.status_text == "Turn 2: Black to move"
    assert window.board_view.board_scene._last_move_items


def test_empty_origin_is_reported() -> None:
    window = _endgame_window()
    _click(window, "e4")
    assert window.status_text == "There is no piece on this position"
    assert window.board_view.board_scene.selected is None


def test_opponent_piece_is_reported() -> None:
    window = _endgame_window()
    _click(window, "b8")
    assert window.status_text == "The chosen piece is not yours"


def test_illegal_target_leaves_match_unchanged() -> None:
    window = _endgame_window()
    _click(window, "c1", "d2")
    assert window.status_text == "The chosen piece can't move to target position"
    assert str(window.match.board.piece_at(parse_square("c1"))) == "R"
    assert window.match.history == []
    assert window.board_view.board_scene.selected is None


def test_clicking_another_own_piece_reselects() -> None:
    window = _endgame_window()
    _click(window, "c1", "h7")
    assert window.board_view.board_scene.selected == parse_square("h7")


def test_capture_updates_captured_panel() -> None:
    window = _endgame_window()
    _click(window, "c1", "c8", "b8", "c8")
    assert window.captured_panel.text(Color.WHITE) == "White: ♖"
    assert window.captured_panel.text(Color.BLACK) == "Black: "


def test_checkmate_finishes_the_game() -> None:
    window = MainWindow()
    _click(window, "f2", "f3", "e7", "e5", "g2", "g4", "d8", "h4")

    assert window.match.finished
    assert window.status_text == "Checkmate! Black wins"
    scene = window.board_view.board_scene
    assert scene._check_items
    assert not scene._interactive

    _click(window, "a2")
    assert scene.selected is None


def test_new_game_resets_state() -> None:
    window = _endgame_window()
    _click(window, "c1", "c5")
    window.new_game()
    assert window.match.history == []
    assert window.status_text == "Turn 1: White to move"
    assert window.board_view.board_scene._last_move_items == []


def test_unknown_setup_falls_back_to_standard() -> None:
    window = MainWindow(AppSettings(setup="nonexistent"))
    assert len(window.board_view.board_scene._piece_items) == 32
