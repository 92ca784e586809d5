"""Board coordinates.

Internal layout is array-style: row 0 is rank 8 (Black's back rank),
column 0 is file a.  Human coordinates map as::

    row = 8 - rank
    column = ord(file) - ord("a")
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import BoardError, BoardErrorKind

FILES = "abcdefgh"
RANKS = 8


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-indexed (row, column) cell address."""

    row: int
    column: int

    def offset(self, d_row: int, d_column: int) -> Position:
        return Position(self.row + d_row, self.column + d_column)

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


@dataclass(frozen=True, slots=True)
class ChessPosition:
    """Human chess coordinate: file letter ``a``-``h`` and rank ``1``-``8``."""

    column: str
    row: int

    def to_position(self) -> Position:
        return Position(RANKS - self.row, ord(self.column) - ord("a"))

    @classmethod
    def from_position(cls, position: Position) -> ChessPosition:
        return cls(chr(ord("a") + position.column), RANKS - position.row)

    @classmethod
    def parse(cls, text: str) -> ChessPosition:
        """Parse a square name, e.g. ``'e4'``."""
        name = text.strip().lower()
        if len(name) != 2 or name[0] not in FILES or not name[1].isdigit():
            raise BoardError(
                f"Invalid chess coordinate: {text!r}", BoardErrorKind.INVALID_COORDINATE
            )
        row = int(name[1])
        if not 1 <= row <= RANKS:
            raise BoardError(
                f"Invalid chess coordinate: {text!r}", BoardErrorKind.INVALID_COORDINATE
            )
        return cls(name[0], row)

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


def parse_square(name: str) -> Position:
    """Shortcut: square name straight to an internal :class:`Position`."""
    return ChessPosition.parse(name).to_position()


def square_name(position: Position) -> str:
    """Human-readable name, e.g. ``Position(7, 0)`` -> ``'a1'``."""
    return str(ChessPosition.from_position(position))
