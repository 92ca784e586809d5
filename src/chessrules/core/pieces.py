"""Concrete piece variants and their reachability rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece

if TYPE_CHECKING:
    from chessrules.core.board import Board

# (d_row, d_column); row 0 is rank 8
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


class _SlidingPiece(Piece):
    """Moves any distance along its directions until blocked."""

    __slots__ = ()

    directions: tuple[tuple[int, int], ...] = ()

    def possible_moves(self) -> list[list[bool]]:
        board = self.board
        matrix = board.empty_matrix()
        if self.position is None:
            return matrix
        for d_row, d_column in self.directions:
            target = self.position.offset(d_row, d_column)
            while board.is_valid_position(target):
                occupant = board.piece_at(target)
                if occupant is not None:
                    if occupant.color != self.color:
                        matrix[target.row][target.column] = True
                    break
                matrix[target.row][target.column] = True
                target = target.offset(d_row, d_column)
        return matrix


class _SteppingPiece(Piece):
    """Jumps to a fixed set of offsets."""

    __slots__ = ()

    offsets: tuple[tuple[int, int], ...] = ()

    def possible_moves(self) -> list[list[bool]]:
        matrix = self.board.empty_matrix()
        if self.position is None:
            return matrix
        for d_row, d_column in self.offsets:
            target = self.position.offset(d_row, d_column)
            if self._can_land_on(target):
                matrix[target.row][target.column] = True
        return matrix


class Rook(_SlidingPiece):
    __slots__ = ()
    piece_type = PieceType.ROOK
    directions = ROOK_DIRS


class Bishop(_SlidingPiece):
    __slots__ = ()
    piece_type = PieceType.BISHOP
    directions = BISHOP_DIRS


class Queen(_SlidingPiece):
    __slots__ = ()
    piece_type = PieceType.QUEEN
    directions = QUEEN_DIRS


class Knight(_SteppingPiece):
    __slots__ = ()
    piece_type = PieceType.KNIGHT
    offsets = KNIGHT_OFFSETS


class King(_SteppingPiece):
    __slots__ = ()
    piece_type = PieceType.KING
    offsets = KING_OFFSETS


class Pawn(Piece):
    """Pushes forward, double-steps on its first move, captures diagonally."""

    __slots__ = ()
    piece_type = PieceType.PAWN

    @property
    def forward(self) -> int:
        return -1 if self.color == Color.WHITE else 1

    def possible_moves(self) -> list[list[bool]]:
        board = self.board
        matrix = board.empty_matrix()
        if self.position is None:
            return matrix

        one = self.position.offset(self.forward, 0)
        if board.is_valid_position(one) and board.piece_at(one) is None:
            matrix[one.row][one.column] = True
            two = one.offset(self.forward, 0)
            if (
                self.move_count == 0
                and board.is_valid_position(two)
                and board.piece_at(two) is None
            ):
                matrix[two.row][two.column] = True

        for d_column in (-1, 1):
            target = self.position.offset(self.forward, d_column)
            if not board.is_valid_position(target):
                continue
            occupant = board.piece_at(target)
            if occupant is not None and occupant.color != self.color:
                matrix[target.row][target.column] = True
        return matrix


_PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.PAWN: Pawn,
    PieceType.KNIGHT: Knight,
    PieceType.BISHOP: Bishop,
    PieceType.ROOK: Rook,
    PieceType.QUEEN: Queen,
    PieceType.KING: King,
}


def create_piece(piece_type: PieceType, color: Color, board: Board) -> Piece:
    """Instantiate the variant for *piece_type*."""
    return _PIECE_CLASSES[piece_type](color, board)
