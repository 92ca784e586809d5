"""MainWindow - top-level window assembling board, status and captures."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QWidget,
)

from chessrules.core.enums import Color
from chessrules.core.errors import BoardError, MatchError
from chessrules.core.pieces import King
from chessrules.core.types import Position
from chessrules.game.events import MoveRecord
from chessrules.game.match import ChessMatch
from chessrules.game.setup import SETUPS, standard_setup
from chessrules.ui.board.board_view import BoardView
from chessrules.ui.panels.captured_panel import CapturedPanel
from chessrules.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    Moves are entered with two clicks: the first selects a piece
    (``validate_origin``), the second picks its destination
    (``validate_target`` then ``make_move``).  Rejections are shown in
    the status bar and never change the match.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chess Rules")
        self.setMinimumSize(640, 480)
        self.resize(900, 680)

        self.settings = settings if settings is not None else AppSettings()
        self._match = self._create_match()

        self._setup_ui()
        self._setup_menu()
        self.board_view.square_clicked.connect(self._on_square_clicked)
        self._connect_match_events()
        apply_settings(self)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def match(self) -> ChessMatch:
        return self._match

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self.board_view = BoardView()
        self.board_view.board_scene.set_board(self._match.board)
        root.addWidget(self.board_view, stretch=3)

        self.captured_panel = CapturedPanel()
        self.captured_panel.setFixedWidth(240)
        root.addWidget(self.captured_panel)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        menu_game.addAction(self._act_flip)

        menu_game.addSeparator()

        act_quit = QAction("Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

    def _create_match(self) -> ChessMatch:
        setup = SETUPS.get(self.settings.setup)
        if setup is None:
            _LOGGER.warning("Unknown setup %r, using standard", self.settings.setup)
            setup = standard_setup
        return ChessMatch(setup=setup)

    def _connect_match_events(self) -> None:
        events = self._match.events
        events.on_move.append(self._on_match_move)
        events.on_finished.append(self._on_match_finished)

    # ── Public actions ───────────────────────────────────────────────────

    def new_game(self) -> None:
        self._match = self._create_match()
        self._connect_match_events()
        scene = self.board_view.board_scene
        scene.set_board(self._match.board)
        scene.set_interactive(True)
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces, check marker, captures and status from the match."""
        scene = self.board_view.board_scene
        scene.clear_selection()
        scene.sync_pieces()
        if self._match.history:
            last = self._match.history[-1]
            scene.highlight_last_move(last.origin, last.destination)
        else:
            scene.highlight_last_move(None, None)
        scene.highlight_check(self._king_in_check())
        for color in (Color.WHITE, Color.BLACK):
            self.captured_panel.set_captured(color, self._match.captured_pieces(color))
        self._status_label.setText(self._describe_state())

    # ── Click handling ───────────────────────────────────────────────────

    def _on_square_clicked(self, position: Position) -> None:
        if self._match.finished:
            return
        scene = self.board_view.board_scene
        origin = scene.selected

        if origin is None or self._is_own_piece(position):
            self._select(position)
            return

        try:
            self._match.validate_target(origin, position)
            self._match.make_move(origin, position)
        except (MatchError, BoardError) as exc:
            _LOGGER.warning("Move rejected: %s", exc)
            scene.clear_selection()
            self._status_label.setText(str(exc))

    def _select(self, position: Position) -> None:
        scene = self.board_view.board_scene
        try:
            self._match.validate_origin(position)
        except MatchError as exc:
            scene.clear_selection()
            self._status_label.setText(str(exc))
            return
        scene.set_selection(position, self._match.reachable_positions(position))

    def _is_own_piece(self, position: Position) -> bool:
        piece = self._match.board.piece_at(position)
        return piece is not None and piece.color == self._match.current_player

    # ── Match callbacks ──────────────────────────────────────────────────

    def _on_match_move(self, record: MoveRecord) -> None:
        _LOGGER.debug("Move %d: %s", record.turn, record)
        self.refresh()

    def _on_match_finished(self, winner: Color) -> None:
        self.board_view.board_scene.set_interactive(False)
        self._status_label.setText(self._describe_state())

    def _on_flip(self) -> None:
        self.settings.flipped = not self.settings.flipped
        apply_settings(self)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _king_in_check(self) -> Position | None:
        if not self._match.check:
            return None
        side = (
            self._match.current_player.opposite
            if self._match.finished
            else self._match.current_player
        )
        for piece in self._match.pieces_in_play(side):
            if isinstance(piece, King):
                return piece.position
        return None

    def _describe_state(self) -> str:
        match = self._match
        if match.finished:
            return f"Checkmate! {str(match.winner).title()} wins"
        text = f"Turn {match.turn}: {str(match.current_player).title()} to move"
        if match.check:
            text += " | Check!"
        return text
