"""CapturedPanel - pieces each side has lost."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chessrules.core.enums import Color
from chessrules.core.piece import Piece


class CapturedPanel(QWidget):
    """Two rows of glyphs: captured white pieces, captured black pieces."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        title = QLabel("Captured pieces")
        title.setStyleSheet("font-size: 14px; font-weight: bold;")
        layout.addWidget(title)

        glyph_font = QFont("DejaVu Sans", 20)
        self._labels: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            label = QLabel()
            label.setFont(glyph_font)
            label.setWordWrap(True)
            layout.addWidget(label)
            self._labels[color] = label
        layout.addStretch(1)
        self.clear()

    def set_captured(self, color: Color, pieces: Iterable[Piece]) -> None:
        glyphs = "".join(piece.symbol for piece in pieces)
        self._labels[color].setText(f"{str(color).title()}: {glyphs}")

    def text(self, color: Color) -> str:
        return self._labels[color].text()

    def clear(self) -> None:
        for color in self._labels:
            self.set_captured(color, ())
