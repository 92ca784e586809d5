"""Starting layouts, applied through :meth:`ChessMatch.place_new_piece`."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.pieces import King, Rook, create_piece
from chessrules.core.types import FILES

if TYPE_CHECKING:
    from chessrules.game.match import ChessMatch

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def standard_setup(match: ChessMatch) -> None:
    """Standard 32-piece starting position."""
    board = match.board
    for column, piece_type in zip(FILES, _BACK_RANK):
        for color, back_row, pawn_row in ((Color.WHITE, 1, 2), (Color.BLACK, 8, 7)):
            piece = create_piece(piece_type, color, board)
            match.place_new_piece(column, back_row, piece)
            pawn = create_piece(PieceType.PAWN, color, board)
            match.place_new_piece(column, pawn_row, pawn)


def rook_endgame_setup(match: ChessMatch) -> None:
    """Two white rooks and a king against a black rook and king."""
    board = match.board
    match.place_new_piece("c", 1, Rook(Color.WHITE, board))
    match.place_new_piece("h", 7, Rook(Color.WHITE, board))
    match.place_new_piece("d", 1, King(Color.WHITE, board))

    match.place_new_piece("b", 8, Rook(Color.BLACK, board))
    match.place_new_piece("a", 8, King(Color.BLACK, board))


SETUPS: dict[str, Callable[[ChessMatch], None]] = {
    "standard": standard_setup,
    "rook_endgame": rook_endgame_setup,
}
