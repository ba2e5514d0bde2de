"""Pixel ↔ board-region mapping for the fixed window layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessgui.core.piece import PROMOTION_KINDS
from chessgui.core.types import Square
from chessgui.game.interfaces import BoardLayout

# ── Regions ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class BoardRegion:
    square: Square


@dataclass(frozen=True, slots=True)
class ResetRegion:
    pass


@dataclass(frozen=True, slots=True)
class PromotionSlotRegion:
    index: int  # 0–3, see PROMOTION_KINDS


@dataclass(frozen=True, slots=True)
class NoRegion:
    pass


Region: TypeAlias = BoardRegion | ResetRegion | PromotionSlotRegion | NoRegion

RESET_BUTTON = ResetRegion()
NO_REGION = NoRegion()

Rect: TypeAlias = tuple[int, int, int, int]  # x, y, width, height


class ViewportMapper:
    """Stateless conversion between window pixels and UI regions.

    The board is drawn with rank 8 on the top row and file a on the left.
    """

    __slots__ = ("_layout",)

    def __init__(self, layout: BoardLayout | None = None) -> None:
        self._layout = layout or BoardLayout()

    @property
    def layout(self) -> BoardLayout:
        return self._layout

    def classify(self, x: float, y: float) -> Region:
        """Return the region under pixel (*x*, *y*)."""
        lay = self._layout
        t = lay.tile_size
        rel_x = x - lay.origin_x
        rel_y = y - lay.origin_y
        if rel_x < 0 or rel_y < 0:
            return NO_REGION

        col = int(rel_x // t)
        row = int(rel_y // t)
        if row >= 8:
            return NO_REGION

        if col < 8:
            return BoardRegion(Square(col + 1, 8 - row))

        panel_col = col - 8
        if row == lay.reset_row and panel_col < lay.reset_columns:
            return RESET_BUTTON
        if row == lay.promotion_row and panel_col < len(PROMOTION_KINDS):
            return PromotionSlotRegion(panel_col)
        return NO_REGION

    # ── Inverse helpers for the renderer ─────────────────────────────────

    def square_rect(self, square: Square) -> Rect:
        lay = self._layout
        t = lay.tile_size
        return (
            lay.origin_x + (square.file - 1) * t,
            lay.origin_y + (8 - square.rank) * t,
            t,
            t,
        )

    def square_center(self, square: Square) -> tuple[float, float]:
        x, y, w, h = self.square_rect(square)
        return x + w / 2, y + h / 2

    def panel_cell(self, row: int, column: int = 0) -> Rect:
        """Rectangle of the panel tile at *row*, *column*."""
        lay = self._layout
        t = lay.tile_size
        return (lay.panel_x + column * t, lay.origin_y + row * t, t, t)

    def promotion_slot_rect(self, index: int) -> Rect:
        if not 0 <= index < len(PROMOTION_KINDS):
            raise ValueError(f"Promotion slot out of range: {index}")
        return self.panel_cell(self._layout.promotion_row, index)

    def reset_rect(self) -> Rect:
        x, y, t, _ = self.panel_cell(self._layout.reset_row)
        return (x, y, t * self._layout.reset_columns, t)

    def window_size(self) -> tuple[int, int]:
        return self._layout.window_size
