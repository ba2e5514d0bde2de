"""Visual theme constants for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and side panel."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # selected piece origin
    movable: QColor  # legal move targets
    background: QColor  # side panel
    text: QColor
    font_family: str = "Sans Serif"

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 196, 108),
            dark_square=QColor(188, 140, 76),
            selected=QColor(209, 161, 29),
            movable=QColor(209, 62, 29),
            background=QColor(0, 0, 255),
            text=QColor(0, 0, 0),
        )

    def side_color(self, white: bool) -> QColor:
        """Text colour used for a side's turn, clock and win messages."""
        return QColor(255, 255, 255) if white else QColor(0, 0, 0)
