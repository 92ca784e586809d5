"""Game management layer: the match controller and its starting layouts.

Quick start::

    from chessrules.core import parse_square
    from chessrules.game import ChessMatch

    match = ChessMatch()
    match.make_move(parse_square("e2"), parse_square("e4"))
"""

from chessrules.game.events import MatchEvents, MoveOutcome, MoveRecord
from chessrules.game.match import ChessMatch, SetupRoutine
from chessrules.game.setup import SETUPS, rook_endgame_setup, standard_setup

__all__ = [
    "ChessMatch",
    "MatchEvents",
    "MoveOutcome",
    "MoveRecord",
    "SETUPS",
    "SetupRoutine",
    "rook_endgame_setup",
    "standard_setup",
]
