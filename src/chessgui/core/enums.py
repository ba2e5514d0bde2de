"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def label(self) -> str:
        """Display name, e.g. ``"White"``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """Position status as reported by the rules engine."""

    ONGOING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3


class MouseButton(IntEnum):
    """Pointer buttons the board controller reacts to."""

    PRIMARY = 1
    SECONDARY = 2
    OTHER = 3
