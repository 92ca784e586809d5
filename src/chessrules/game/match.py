"""ChessMatch - turn sequencing, move legality, check and checkmate.

Legality is decided by simulation: a move is executed on the real board,
the position is inspected, and the move is undone.  ``execute_move`` and
``undo_move`` are exact inverses over board occupancy, piece positions,
move counters and the captured set.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.errors import (
    BoardError,
    BoardErrorKind,
    MatchError,
    MatchErrorKind,
)
from chessrules.core.piece import Piece
from chessrules.core.pieces import King
from chessrules.core.types import ChessPosition, Position, square_name
from chessrules.game.events import MatchEvents, MoveOutcome, MoveRecord

_LOGGER = logging.getLogger(__name__)

SetupRoutine = Callable[["ChessMatch"], None]


def _default_setup(match: ChessMatch) -> None:
    from chessrules.game.setup import standard_setup

    standard_setup(match)


class ChessMatch:
    """A single match between White and Black on an 8x8 board.

    Args:
        setup: Routine seeding the starting pieces through
            :meth:`place_new_piece`.  Defaults to the standard layout;
            ``None`` leaves the board empty.  The two-rook endgame used by
            the console demo is :func:`~chessrules.game.setup.rook_endgame_setup`.
    """

    __slots__ = (
        "board",
        "turn",
        "current_player",
        "finished",
        "check",
        "history",
        "events",
        "_pieces",
        "_captured",
        "_pending",
    )

    def __init__(self, setup: SetupRoutine | None = _default_setup) -> None:
        self.board = Board(8, 8)
        self.turn = 1
        self.current_player = Color.WHITE
        self.finished = False
        self.check = False
        self.history: list[MoveRecord] = []
        self.events = MatchEvents()
        # Keyed by piece id; insertion order keeps iteration deterministic.
        self._pieces: dict[int, Piece] = {}
        self._captured: dict[int, Piece] = {}
        # Executed but not yet committed or undone: (origin, destination, captured)
        self._pending: list[tuple[Position, Position, Piece | None]] = []
        if setup is not None:
            setup(self)

    # ── Setup ────────────────────────────────────────────────────────────

    def place_new_piece(self, column: str, row: int, piece: Piece) -> None:
        """Place *piece* on a human coordinate, e.g. ``('c', 1)``."""
        if piece.id in self._pieces:
            raise BoardError(
                f"{piece!r} has already been placed in this match",
                BoardErrorKind.ALREADY_PLACED,
            )
        self.board.place_piece(piece, ChessPosition(column, row).to_position())
        self._pieces[piece.id] = piece

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def winner(self) -> Color | None:
        return self.current_player if self.finished else None

    def captured_pieces(self, color: Color) -> list[Piece]:
        return [p for p in self._captured.values() if p.color == color]

    def pieces_in_play(self, color: Color) -> list[Piece]:
        return [
            p
            for p in self._pieces.values()
            if p.color == color and p.id not in self._captured
        ]

    def reachable_positions(self, position: Position) -> list[Position]:
        """Destinations the piece at *position* reaches by its own rules."""
        piece = self.board.piece_at(position)
        if piece is None:
            return []
        matrix = piece.possible_moves()
        return [
            Position(row, column)
            for row in range(self.board.rows)
            for column in range(self.board.columns)
            if matrix[row][column]
        ]

    # ── Validation ───────────────────────────────────────────────────────

    def validate_origin(self, position: Position) -> None:
        piece = self.board.piece_at(position)
        if piece is None:
            raise MatchError(
                "There is no piece on this position", MatchErrorKind.EMPTY_ORIGIN
            )
        if piece.color != self.current_player:
            raise MatchError(
                "The chosen piece is not yours", MatchErrorKind.WRONG_COLOR
            )
        if not piece.has_any_possible_move():
            raise MatchError(
                "There are no possible moves for the chosen piece",
                MatchErrorKind.NO_POSSIBLE_MOVES,
            )

    def validate_target(self, origin: Position, destination: Position) -> None:
        piece = self.board.piece_at(origin)
        if piece is None:
            raise MatchError(
                "There is no piece on this position", MatchErrorKind.EMPTY_ORIGIN
            )
        self.board.validate_position(destination)
        if not piece.can_move_to(destination):
            raise MatchError(
                "The chosen piece can't move to target position",
                MatchErrorKind.ILLEGAL_TARGET,
            )

    # ── Execute / undo ───────────────────────────────────────────────────

    def execute_move(self, origin: Position, destination: Position) -> Piece | None:
        """Move the piece at *origin* to *destination*; return the captured piece."""
        self.board.validate_position(destination)
        piece = self.board.remove_piece(origin)
        if piece is None:
            raise MatchError(
                "There is no piece on this position", MatchErrorKind.EMPTY_ORIGIN
            )
        piece.increment_move_count()
        captured = self.board.remove_piece(destination)
        self.board.place_piece(piece, destination)
        if captured is not None:
            self._captured[captured.id] = captured
        self._pending.append((origin, destination, captured))
        _LOGGER.debug(
            "Executed %r %s -> %s (captured %r)",
            piece,
            square_name(origin),
            square_name(destination),
            captured,
        )
        return captured

    def undo_move(
        self, origin: Position, destination: Position, captured: Piece | None
    ) -> None:
        """Revert the most recent :meth:`execute_move`.

        The arguments must describe that move exactly; anything else would
        corrupt the board, so it is refused before any mutation.
        """
        if not self._pending:
            raise MatchError("There is no move to undo", MatchErrorKind.UNDO_MISMATCH)
        last_origin, last_destination, last_captured = self._pending[-1]
        if (
            last_origin != origin
            or last_destination != destination
            or last_captured is not captured
        ):
            raise MatchError(
                f"Undo of {square_name(origin)} -> {square_name(destination)} "
                "does not match the last executed move",
                MatchErrorKind.UNDO_MISMATCH,
            )
        self._pending.pop()

        piece = self.board.remove_piece(destination)
        assert piece is not None
        piece.decrement_move_count()
        if captured is not None:
            self.board.place_piece(captured, destination)
            del self._captured[captured.id]
        self.board.place_piece(piece, origin)
        _LOGGER.debug(
            "Undid %r %s -> %s", piece, square_name(origin), square_name(destination)
        )

    # ── Moves ────────────────────────────────────────────────────────────

    def make_move(self, origin: Position, destination: Position) -> MoveRecord:
        """Validate and commit a move for the current player.

        Raises:
            MatchError: on any rejected selection or a move that leaves the
                mover's own king in check.  The match state is unchanged.
        """
        if self.finished:
            raise MatchError(
                "The match is already finished", MatchErrorKind.MATCH_FINISHED
            )
        self.validate_origin(origin)
        self.validate_target(origin, destination)

        mover = self.current_player
        opponent = mover.opposite
        self._king(mover)
        self._king(opponent)

        captured = self.execute_move(origin, destination)
        try:
            if self.is_check(mover):
                raise MatchError(
                    "You cannot put yourself in check", MatchErrorKind.SELF_CHECK
                )
            check = self.is_check(opponent)
            checkmate = check and self.is_checkmate(opponent)
        except MatchError:
            self.undo_move(origin, destination, captured)
            raise
        self._pending.pop()

        self.check = check
        piece = self.board.piece_at(destination)
        assert piece is not None
        record = MoveRecord(
            turn=self.turn,
            color=mover,
            piece=piece,
            origin=origin,
            destination=destination,
            captured=captured,
            check=self.check,
            checkmate=checkmate,
        )
        self.history.append(record)

        if checkmate:
            self.finished = True
            _LOGGER.info("Checkmate: %s wins on turn %d", mover, self.turn)
        else:
            self.turn += 1
            self.current_player = opponent
            if self.check:
                _LOGGER.info("%s is in check", opponent)

        self._emit_move(record)
        if self.check:
            self._emit_check(opponent)
        if self.finished:
            self._emit_finished(mover)
        return record

    def try_move(self, origin: Position, destination: Position) -> MoveOutcome:
        """Like :meth:`make_move`, but report failures as a value."""
        try:
            record = self.make_move(origin, destination)
        except (MatchError, BoardError) as exc:
            _LOGGER.debug("Move rejected: %s", exc)
            return MoveOutcome(error_kind=exc.kind, message=str(exc))
        return MoveOutcome(record=record)

    # ── Check detection ──────────────────────────────────────────────────

    def _king(self, color: Color) -> Piece:
        for piece in self.pieces_in_play(color):
            if isinstance(piece, King):
                return piece
        raise MatchError(
            f"There's no {color} king on the board", MatchErrorKind.MISSING_KING
        )

    def is_check(self, color: Color) -> bool:
        king = self._king(color)
        assert king.position is not None
        for piece in self.pieces_in_play(color.opposite):
            if piece.can_move_to(king.position):
                return True
        return False

    def is_checkmate(self, color: Color) -> bool:
        """True when *color* is in check and no move of any of its pieces escapes."""
        if not self.is_check(color):
            return False

        for piece in self.pieces_in_play(color):
            origin = piece.position
            assert origin is not None
            matrix = piece.possible_moves()
            for row in range(self.board.rows):
                for column in range(self.board.columns):
                    if not matrix[row][column]:
                        continue
                    target = Position(row, column)
                    captured = self.execute_move(origin, target)
                    still_in_check = self.is_check(color)
                    self.undo_move(origin, target, captured)
                    if not still_in_check:
                        return False
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_finished(self, winner: Color) -> None:
        for cb in self.events.on_finished:
            cb(winner)
