"""Per-frame read-only view of the board controller."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from chessgui.core.enums import Color, GameStatus, PieceType
from chessgui.core.piece import Piece
from chessgui.core.types import Square
from chessgui.game.clock import ClockSnapshot


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Everything the renderer needs to draw one frame.

    Built by :meth:`BoardController.snapshot`; holds no reference to the
    controller's mutable state, so it stays valid after later clicks.
    """

    occupancy: Mapping[Square, Piece]
    side_to_move: Color
    status: GameStatus
    selected: Square | None
    highlighted: frozenset[Square]
    promotion: Mapping[Color, PieceType]
    clock: ClockSnapshot
    is_checkmate: bool
    is_timeout: bool
    winner: Color | None

    # ── Derived display values ───────────────────────────────────────────

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.status == GameStatus.STALEMATE

    @property
    def turn_text(self) -> str:
        return f"{self.side_to_move.label}'s turn"

    @property
    def active_promotion(self) -> PieceType:
        """Promotion preference of the side to move."""
        return self.promotion[self.side_to_move]

    @property
    def active_clock_text(self) -> str:
        return self.clock.text(self.side_to_move)

    @property
    def end_message(self) -> str | None:
        if self.winner is None:
            if self.status == GameStatus.STALEMATE:
                return "Stalemate!"
            return None
        if self.is_timeout:
            return f"{self.winner.label} has won as the time ran out!"
        return f"{self.winner.label} has won!"

    def piece_at(self, square: Square) -> Piece | None:
        return self.occupancy.get(square)
