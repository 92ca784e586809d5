"""Error taxonomy for board and match operations.

Each exception carries a ``kind`` so callers (UI loops, tests) can branch
on the failure without matching message strings.
"""

from __future__ import annotations

from enum import Enum, auto


class BoardErrorKind(Enum):
    """Why a board operation was refused."""

    OUT_OF_BOUNDS = auto()
    OCCUPIED = auto()
    INVALID_COORDINATE = auto()
    ALREADY_PLACED = auto()
    FOREIGN_PIECE = auto()


class MatchErrorKind(Enum):
    """Why a match operation was refused."""

    EMPTY_ORIGIN = auto()
    WRONG_COLOR = auto()
    NO_POSSIBLE_MOVES = auto()
    ILLEGAL_TARGET = auto()
    SELF_CHECK = auto()
    MISSING_KING = auto()
    MATCH_FINISHED = auto()
    UNDO_MISMATCH = auto()


class ChessError(Exception):
    """Base class for all rule-engine errors."""


class BoardError(ChessError):
    """Invalid board access: out-of-bounds position or occupied cell."""

    def __init__(self, message: str, kind: BoardErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class MatchError(ChessError):
    """Rejected match operation (bad selection or illegal move)."""

    def __init__(self, message: str, kind: MatchErrorKind) -> None:
        super().__init__(message)
        self.kind = kind
