"""Piece interface shared by every piece variant."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Position

if TYPE_CHECKING:
    from chessrules.core.board import Board

# FEN-style character per (Color, PieceType), uppercase = white
_FEN_CHARS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "P",
    (Color.WHITE, PieceType.KNIGHT): "N",
    (Color.WHITE, PieceType.BISHOP): "B",
    (Color.WHITE, PieceType.ROOK): "R",
    (Color.WHITE, PieceType.QUEEN): "Q",
    (Color.WHITE, PieceType.KING): "K",
    (Color.BLACK, PieceType.PAWN): "p",
    (Color.BLACK, PieceType.KNIGHT): "n",
    (Color.BLACK, PieceType.BISHOP): "b",
    (Color.BLACK, PieceType.ROOK): "r",
    (Color.BLACK, PieceType.QUEEN): "q",
    (Color.BLACK, PieceType.KING): "k",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_ids = itertools.count(1)


class Piece(ABC):
    """A piece standing on (or captured from) a :class:`Board`.

    Identity is the integer ``id`` handed out at construction; pieces
    compare by identity, so two rooks of the same color are never equal.
    ``position`` is a cache maintained by :meth:`Board.place_piece`.
    """

    piece_type: ClassVar[PieceType]

    __slots__ = ("id", "color", "board", "position", "move_count")

    def __init__(self, color: Color, board: Board) -> None:
        self.id = next(_ids)
        self.color = color
        self.board = board
        self.position: Position | None = None
        self.move_count = 0

    # -- Reachability ---------------------------------------------------------

    @abstractmethod
    def possible_moves(self) -> list[list[bool]]:
        """Board-sized matrix, true where this piece could move.

        Only the piece's own movement rules apply; whether the move would
        expose the own king is the match's concern.
        """

    def can_move_to(self, position: Position) -> bool:
        self.board.validate_position(position)
        return self.possible_moves()[position.row][position.column]

    def has_any_possible_move(self) -> bool:
        return any(any(row) for row in self.possible_moves())

    def _can_land_on(self, position: Position) -> bool:
        """Empty cell or opponent-occupied cell inside the board."""
        if not self.board.is_valid_position(position):
            return False
        occupant = self.board.piece_at(position)
        return occupant is None or occupant.color != self.color

    # -- Move counter ---------------------------------------------------------

    def increment_move_count(self) -> None:
        self.move_count += 1

    def decrement_move_count(self) -> None:
        if self.move_count == 0:
            raise ValueError(f"Move count of {self!r} is already zero")
        self.move_count -= 1

    # -- Serialisation --------------------------------------------------------

    def __str__(self) -> str:
        return _FEN_CHARS[(self.color, self.piece_type)]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, color={self.color}, "
            f"position={self.position})"
        )

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
