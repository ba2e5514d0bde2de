"""Configuration values and abstract interfaces for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from chessgui.core.enums import Color

# ── Time control presets ─────────────────────────────────────────────────────


class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_seconds: Starting time per player.
    """

    __slots__ = ("initial_seconds",)

    def __init__(self, initial_seconds: float) -> None:
        if initial_seconds < 0:
            raise ValueError(f"Negative time control: {initial_seconds}")
        self.initial_seconds = float(initial_seconds)

    # Common presets
    @classmethod
    def bullet_1m(cls) -> TimeControl:
        return cls(60)

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(300)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(600)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.initial_seconds == other.initial_seconds

    def __hash__(self) -> int:
        return hash(self.initial_seconds)

    def __repr__(self) -> str:
        return f"TimeControl({self.initial_seconds / 60:.0f}m)"


# ── Screen layout ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BoardLayout:
    """Fixed tile geometry of the board and its side panel.

    The side panel starts at the board's right edge. Its rows are counted
    in tiles from the top of the window.
    """

    tile_size: int = 45
    origin_x: int = 0
    origin_y: int = 0
    panel_columns: int = 10

    reset_row: int = 0
    reset_columns: int = 2
    turn_row: int = 1
    promotion_caption_row: int = 2
    promotion_row: int = 3
    clock_row: int = 4

    @property
    def board_pixels(self) -> int:
        return 8 * self.tile_size

    @property
    def panel_x(self) -> int:
        """Left pixel edge of the side panel."""
        return self.origin_x + self.board_pixels

    @property
    def window_size(self) -> tuple[int, int]:
        width = self.origin_x + (8 + self.panel_columns) * self.tile_size
        height = self.origin_y + self.board_pixels
        return width, height


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface for a frame-driven chess clock."""

    @abstractmethod
    def tick(self, delta_seconds: float, side_to_move: Color) -> None:
        """Advance the clock of *side_to_move* by one frame."""

    @abstractmethod
    def reset(self) -> None:
        """Restore both sides to the initial allotment."""

    @abstractmethod
    def remaining(self, color: Color) -> float:
        """Seconds remaining for *color*."""

    @abstractmethod
    def is_flag_fallen(self, color: Color) -> bool:
        """Has *color* run out of time?"""
