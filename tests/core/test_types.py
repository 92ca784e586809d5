"""Tests for coordinate translation."""

import pytest

from chessrules.core.errors import BoardError, BoardErrorKind
from chessrules.core.types import ChessPosition, Position, parse_square, square_name


class TestChessPosition:
    @pytest.mark.parametrize(
        ("column", "row", "expected"),
        [
            ("a", 8, Position(0, 0)),
            ("a", 1, Position(7, 0)),
            ("h", 1, Position(7, 7)),
            ("c", 1, Position(7, 2)),
            ("e", 4, Position(4, 4)),
        ],
    )
    def test_to_position(self, column: str, row: int, expected: Position) -> None:
        assert ChessPosition(column, row).to_position() == expected

    def test_from_position_inverts(self) -> None:
        for row in range(8):
            for column in range(8):
                position = Position(row, column)
                assert ChessPosition.from_position(position).to_position() == position

    def test_str(self) -> None:
        assert str(ChessPosition("d", 1)) == "d1"

    def test_parse(self) -> None:
        assert ChessPosition.parse("E4") == ChessPosition("e", 4)

    @pytest.mark.parametrize("text", ["", "e", "e9", "i1", "e0", "ee", "e44"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(BoardError) as exc_info:
            ChessPosition.parse(text)
        assert exc_info.value.kind == BoardErrorKind.INVALID_COORDINATE


class TestHelpers:
    def test_parse_square(self) -> None:
        assert parse_square("b8") == Position(0, 1)

    def test_square_name(self) -> None:
        assert square_name(Position(7, 3)) == "d1"

    def test_position_is_hashable_value(self) -> None:
        assert {Position(1, 2), Position(1, 2)} == {Position(1, 2)}
        assert Position(1, 2).offset(1, -1) == Position(2, 1)
