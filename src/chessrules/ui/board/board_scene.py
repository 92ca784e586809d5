"""BoardScene - QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.types import Position
from chessrules.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and piece glyphs.

    The scene only reports clicks; deciding what a click means is the
    window's job.

    Signals:
        square_clicked(Position): Emitted when the user clicks a board cell.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_reachable = True
        self._selected: Position | None = None

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._reachable_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selected(self) -> Position | None:
        return self._selected

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board
        self.clear_selection()
        self.highlight_check(None)
        self.highlight_last_move(None, None)
        self.sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped
        self._draw_board()
        self.clear_selection()
        self.sync_pieces()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_reachable(self, visible: bool) -> None:
        """Show or hide reachable-square highlights."""
        self._show_reachable = visible
        if not visible:
            self._clear_items(self._reachable_items)

    def set_selection(self, origin: Position, reachable: list[Position]) -> None:
        """Highlight the selected piece and the cells it can reach."""
        self.clear_selection()
        self._selected = origin
        rect = self._make_highlight(origin, self._theme.highlight_from)
        self._highlight_items.append(rect)
        if self._show_reachable:
            for position in reachable:
                dot = self._make_highlight(position, self._theme.highlight_to)
                self._reachable_items.append(dot)

    def clear_selection(self) -> None:
        self._selected = None
        self._clear_items(self._highlight_items)
        self._clear_items(self._reachable_items)

    def highlight_check(self, king_position: Position | None) -> None:
        """Mark the king in check, or clear the mark with ``None``."""
        self._clear_items(self._check_items)
        if king_position is None:
            return
        rect = self._make_highlight(king_position, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_items.append(rect)

    def highlight_last_move(
        self, origin: Position | None, destination: Position | None
    ) -> None:
        self._clear_items(self._last_move_items)
        for position in (origin, destination):
            if position is None:
                continue
            rect = self._make_highlight(position, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_items.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for row in range(8):
            for column in range(8):
                position = Position(row, column)
                vx, vy = self._visual_coords(position)
                is_light = (row + column) % 2 == 0
                color = (
                    self._theme.light_square if is_light else self._theme.dark_square
                )
                rect = QGraphicsRectItem(vx * t, vy * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[position] = rect

                coord_color = (
                    self._theme.coord_dark if is_light else self._theme.coord_light
                )
                # Rank numbers on the left edge, file letters on the bottom edge
                if vx == 0:
                    rank = str(8 - row)
                    self._add_coord(rank, vx * t + 2, vy * t + 1, font, coord_color)
                if vy == 7:
                    letter = chr(ord("a") + column)
                    self._add_coord(
                        letter, vx * t + t - 12, vy * t + t - 16, font, coord_color
                    )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def sync_pieces(self) -> None:
        """Re-create all piece glyphs from the board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for position, piece in self._board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(
                QBrush(
                    self._theme.piece_white
                    if piece.color == Color.WHITE
                    else self._theme.piece_black
                )
            )
            item.setPen(QPen(QColor(0, 0, 0, 160)))
            vx, vy = self._visual_coords(position)
            bounds = item.boundingRect()
            item.setPos(
                vx * t + (t - bounds.width()) / 2, vy * t + (t - bounds.height()) / 2
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[position] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        position = self._pos_to_position(event.scenePos())
        if position is None:
            self.clear_selection()
        else:
            self.square_clicked.emit(position)
        super().mousePressEvent(event)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, position: Position) -> tuple[int, int]:
        """Board cell → visual (x, y) tile index."""
        if self._flipped:
            return 7 - position.column, 7 - position.row
        return position.column, position.row

    def _pos_to_position(self, pos: QPointF) -> Position | None:
        """Scene position → board cell."""
        t = self.TILE
        x = int(pos.x() // t)
        y = int(pos.y() // t)
        if not (0 <= x < 8 and 0 <= y < 8):
            return None
        if self._flipped:
            return Position(7 - y, 7 - x)
        return Position(y, x)

    def _make_highlight(self, position: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a cell."""
        t = self.TILE
        vx, vy = self._visual_coords(position)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
