"""Core domain layer with the board, pieces and coordinates.

Quick start::

    from chessrules.core import Board, Color, Rook, parse_square

    board = Board()
    board.place_piece(Rook(Color.WHITE, board), parse_square("c1"))
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import (
    BoardError,
    BoardErrorKind,
    ChessError,
    MatchError,
    MatchErrorKind,
)
from chessrules.core.piece import Piece
from chessrules.core.pieces import (
    Bishop,
    King,
    Knight,
    Pawn,
    Queen,
    Rook,
    create_piece,
)
from chessrules.core.types import ChessPosition, Position, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "BoardError",
    "BoardErrorKind",
    "ChessError",
    "MatchError",
    "MatchErrorKind",
    # Coordinates
    "ChessPosition",
    "Position",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Bishop",
    "King",
    "Knight",
    "Pawn",
    "Queen",
    "Rook",
    "create_piece",
]
