"""Board - piece placement on a fixed 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.errors import BoardError, BoardErrorKind
from chessrules.core.types import FILES, Position

if TYPE_CHECKING:
    from chessrules.core.piece import Piece


class Board:
    """Mutable grid of optional piece occupants.

    The board is the source of truth for where pieces stand; each piece
    keeps a cached copy of its position which is refreshed on placement.
    """

    __slots__ = ("rows", "columns", "_cells")

    def __init__(self, rows: int = 8, columns: int = 8) -> None:
        self.rows = rows
        self.columns = columns
        self._cells: list[list[Piece | None]] = [
            [None] * columns for _ in range(rows)
        ]

    # -- Bounds ---------------------------------------------------------------

    def is_valid_position(self, position: Position) -> bool:
        return 0 <= position.row < self.rows and 0 <= position.column < self.columns

    def validate_position(self, position: Position) -> None:
        """Raise :class:`BoardError` unless *position* is on the board."""
        if not self.is_valid_position(position):
            raise BoardError(
                f"Position {position} is outside the board",
                BoardErrorKind.OUT_OF_BOUNDS,
            )

    # -- Element access -------------------------------------------------------

    def piece_at(self, position: Position) -> Piece | None:
        self.validate_position(position)
        return self._cells[position.row][position.column]

    def __getitem__(self, position: Position) -> Piece | None:
        return self.piece_at(position)

    def has_piece(self, position: Position) -> bool:
        return self.piece_at(position) is not None

    # -- Mutation -------------------------------------------------------------

    def place_piece(self, piece: Piece, position: Position) -> None:
        if self.has_piece(position):
            raise BoardError(
                f"There is already a piece on position {position}",
                BoardErrorKind.OCCUPIED,
            )
        if piece.board is not self:
            raise BoardError(
                f"{piece!r} belongs to another board", BoardErrorKind.FOREIGN_PIECE
            )
        current = piece.position
        if current is not None and self._occupant(current) is piece:
            raise BoardError(
                f"{piece!r} is already on position {current}",
                BoardErrorKind.ALREADY_PLACED,
            )
        self._cells[position.row][position.column] = piece
        piece.position = position

    def _occupant(self, position: Position) -> Piece | None:
        if not self.is_valid_position(position):
            return None
        return self._cells[position.row][position.column]

    def remove_piece(self, position: Position) -> Piece | None:
        """Detach and return the occupant of *position* (``None`` if empty).

        The removed piece keeps its cached position.
        """
        piece = self.piece_at(position)
        if piece is None:
            return None
        self._cells[position.row][position.column] = None
        return piece

    # -- Iteration ------------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """Yield ``(position, piece)`` for every occupied cell, row-major."""
        for row in range(self.rows):
            for column in range(self.columns):
                piece = self._cells[row][column]
                if piece is not None:
                    yield Position(row, column), piece

    def empty_matrix(self) -> list[list[bool]]:
        """All-false matrix sized to the board."""
        return [[False] * self.columns for _ in range(self.rows)]

    # -- Dunder helpers -------------------------------------------------------

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in range(self.rows):
            cells = []
            for column in range(self.columns):
                piece = self._cells[row][column]
                cells.append(str(piece) if piece else ".")
            lines.append(f"{self.rows - row} {' '.join(cells)}")
        lines.append("  " + " ".join(FILES[: self.columns]))
        return "\n".join(lines)
