"""Observable match callbacks and move records."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color
from chessrules.core.errors import BoardErrorKind, MatchErrorKind
from chessrules.core.piece import Piece
from chessrules.core.types import Position, square_name


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A committed move and the state it produced."""

    turn: int
    color: Color
    piece: Piece
    origin: Position
    destination: Position
    captured: Piece | None
    check: bool
    checkmate: bool

    def __str__(self) -> str:
        text = f"{self.piece}{square_name(self.origin)}"
        text += "x" if self.captured is not None else "-"
        text += square_name(self.destination)
        if self.checkmate:
            return text + "#"
        if self.check:
            return text + "+"
        return text


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result value of :meth:`ChessMatch.try_move`."""

    record: MoveRecord | None = None
    error_kind: MatchErrorKind | BoardErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.record is not None


MoveCallback = Callable[[MoveRecord], None]
CheckCallback = Callable[[Color], None]  # color in check
FinishedCallback = Callable[[Color], None]  # winner


@dataclass
class MatchEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_finished: list[FinishedCallback] = field(default_factory=list)
