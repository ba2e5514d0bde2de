"""Abstract rules-engine interface consumed by the board controller.

The controller never looks inside a session: it only passes the handle
back to the engine that created it. Side to move and status are always
read from the engine, never tracked separately.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from chessgui.core.enums import Color, GameStatus, PieceType
from chessgui.core.piece import Piece
from chessgui.core.types import Square


class InvalidMoveError(ValueError):
    """The rules engine refused to apply a move."""

    def __init__(self, from_sq: Square, to_sq: Square, reason: str = "") -> None:
        self.from_sq = from_sq
        self.to_sq = to_sq
        msg = f"Illegal move {from_sq}{to_sq}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class RulesEngine(ABC):
    """Chess legality, move application and status evaluation."""

    @abstractmethod
    def new_game(self) -> Any:
        """Create a session in the standard starting position, White to move."""

    @abstractmethod
    def board_of(self, session: Any) -> Mapping[Square, Piece]:
        """Occupied squares of *session*."""

    @abstractmethod
    def side_to_move(self, session: Any) -> Color: ...

    @abstractmethod
    def legal_destinations(
        self, session: Any, square: Square
    ) -> frozenset[Square] | None:
        """Legal targets of the piece on *square*.

        ``None`` when the square is empty or the piece has no legal move.
        """

    @abstractmethod
    def apply_move(self, session: Any, from_sq: Square, to_sq: Square) -> None:
        """Play *from_sq* → *to_sq*.

        Raises:
            InvalidMoveError: the move is not legal in *session*.
        """

    @abstractmethod
    def set_promotion_preference(
        self, session: Any, side: Color, kind: PieceType
    ) -> None:
        """Piece that *side*'s next promoting pawn turns into."""

    @abstractmethod
    def status(self, session: Any) -> GameStatus: ...
