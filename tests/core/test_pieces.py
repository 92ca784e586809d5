"""Tests for piece reachability rules."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import BoardError, BoardErrorKind
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
from chessrules.core.types import Position, parse_square, square_name


def _place(board: Board, piece: Piece, name: str) -> Piece:
    board.place_piece(piece, parse_square(name))
    return piece


def _targets(piece: Piece) -> set[str]:
    matrix = piece.possible_moves()
    return {
        square_name(Position(row, column))
        for row in range(len(matrix))
        for column in range(len(matrix[row]))
        if matrix[row][column]
    }


class TestMatrixShape:
    def test_matrix_is_board_sized(self, board: Board) -> None:
        rook = _place(board, Rook(Color.WHITE, board), "d4")
        matrix = rook.possible_moves()
        assert len(matrix) == board.rows
        assert all(len(row) == board.columns for row in matrix)

    def test_unplaced_piece_has_no_moves(self, board: Board) -> None:
        assert not Queen(Color.WHITE, board).has_any_possible_move()


class TestSliders:
    def test_rook_on_empty_board(self, board: Board) -> None:
        rook = _place(board, Rook(Color.WHITE, board), "a1")
        assert len(_targets(rook)) == 14

    def test_rook_stops_at_own_piece_and_captures_opponent(self, board: Board) -> None:
        rook = _place(board, Rook(Color.WHITE, board), "c1")
        _place(board, King(Color.WHITE, board), "d1")
        _place(board, Rook(Color.BLACK, board), "c4")
        assert _targets(rook) == {"a1", "b1", "c2", "c3", "c4"}

    def test_bishop_diagonals(self, board: Board) -> None:
        bishop = _place(board, Bishop(Color.BLACK, board), "c8")
        _place(board, Pawn(Color.BLACK, board), "d7")
        assert _targets(bishop) == {"b7", "a6"}

    def test_queen_combines_rook_and_bishop(self, board: Board) -> None:
        queen = _place(board, Queen(Color.WHITE, board), "d4")
        assert len(_targets(queen)) == 27


class TestSteppers:
    def test_knight_in_corner(self, board: Board) -> None:
        knight = _place(board, Knight(Color.WHITE, board), "a1")
        assert _targets(knight) == {"b3", "c2"}

    def test_knight_jumps_over_pieces(self, board: Board) -> None:
        knight = _place(board, Knight(Color.WHITE, board), "b1")
        for name in ("a2", "b2", "c2"):
            _place(board, Pawn(Color.WHITE, board), name)
        assert _targets(knight) == {"a3", "c3", "d2"}

    def test_king_excludes_own_pieces(self, board: Board) -> None:
        king = _place(board, King(Color.WHITE, board), "e1")
        _place(board, Pawn(Color.WHITE, board), "e2")
        _place(board, Pawn(Color.BLACK, board), "d2")
        assert _targets(king) == {"d1", "f1", "d2", "f2"}


class TestPawn:
    def test_white_double_step_on_first_move(self, board: Board) -> None:
        pawn = _place(board, Pawn(Color.WHITE, board), "e2")
        assert _targets(pawn) == {"e3", "e4"}

    def test_double_step_only_before_first_move(self, board: Board) -> None:
        pawn = _place(board, Pawn(Color.WHITE, board), "e3")
        pawn.increment_move_count()
        assert _targets(pawn) == {"e4"}

    def test_black_moves_down_the_board(self, board: Board) -> None:
        pawn = _place(board, Pawn(Color.BLACK, board), "d7")
        assert _targets(pawn) == {"d6", "d5"}

    def test_blocked_pawn(self, board: Board) -> None:
        pawn = _place(board, Pawn(Color.WHITE, board), "e2")
        _place(board, Knight(Color.BLACK, board), "e3")
        assert not pawn.has_any_possible_move()

    def test_double_step_blocked_on_second_square(self, board: Board) -> None:
        pawn = _place(board, Pawn(Color.WHITE, board), "e2")
        _place(board, Knight(Color.BLACK, board), "e4")
        assert _targets(pawn) == {"e3"}

    def test_diagonal_capture_only_on_opponent(self, board: Board) -> None:
        pawn = _place(board, Pawn(Color.WHITE, board), "e4")
        pawn.increment_move_count()
        _place(board, Knight(Color.BLACK, board), "d5")
        _place(board, Knight(Color.WHITE, board), "f5")
        assert _targets(pawn) == {"e5", "d5"}


class TestPieceInterface:
    def test_can_move_to(self, board: Board) -> None:
        rook = _place(board, Rook(Color.WHITE, board), "c1")
        assert rook.can_move_to(parse_square("c8"))
        assert not rook.can_move_to(parse_square("d2"))

    @pytest.mark.parametrize(
        "position", [Position(-1, 0), Position(4, -8), Position(8, 0), Position(0, 8)]
    )
    def test_can_move_to_off_board_raises(
        self, board: Board, position: Position
    ) -> None:
        rook = _place(board, Rook(Color.WHITE, board), "a5")
        with pytest.raises(BoardError) as exc_info:
            rook.can_move_to(position)
        assert exc_info.value.kind == BoardErrorKind.OUT_OF_BOUNDS

    def test_move_counter(self, board: Board) -> None:
        king = King(Color.WHITE, board)
        king.increment_move_count()
        king.decrement_move_count()
        assert king.move_count == 0
        with pytest.raises(ValueError):
            king.decrement_move_count()

    def test_identity_not_value_equality(self, board: Board) -> None:
        first = Rook(Color.WHITE, board)
        second = Rook(Color.WHITE, board)
        assert first != second
        assert first.id != second.id

    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_create_piece(self, board: Board, piece_type: PieceType) -> None:
        piece = create_piece(piece_type, Color.BLACK, board)
        assert piece.piece_type == piece_type
        assert piece.color == Color.BLACK
        assert str(piece).islower()

    def test_symbols(self, board: Board) -> None:
        assert Knight(Color.BLACK, board).symbol == "♞"
        assert str(King(Color.WHITE, board)) == "K"
