"""Frame-driven dual chess clock."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from chessgui.core.enums import Color
from chessgui.game.interfaces import IClock, TimeControl

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Read-only clock state for one frame."""

    white_remaining: float
    black_remaining: float
    white_text: str
    black_text: str
    expired: Color | None

    def remaining(self, color: Color) -> float:
        return self.white_remaining if color == Color.WHITE else self.black_remaining

    def text(self, color: Color) -> str:
        return self.white_text if color == Color.WHITE else self.black_text


def format_time(seconds: float) -> str:
    """Render *seconds* as ``M:SS:TT``.

    ``TT`` counts sixtieths of a second, rounded half up, so 65.5 s reads
    ``1:05:30``.
    """
    s = max(0.0, seconds)
    minutes = math.floor(s / 60)
    secs = math.floor(s - minutes * 60)
    ticks = min(59, math.floor((s - minutes * 60 - secs) * 60 + 0.5))
    return f"{minutes}:{secs:02d}:{ticks:02d}"


class ClockManager(IClock):
    """Per-side countdown advanced once per frame by the host loop.

    Only the side to move loses time. As soon as either side reaches zero
    both clocks freeze until :meth:`reset`.
    """

    __slots__ = ("_time_control", "_remaining")

    def __init__(self, time_control: TimeControl | None = None) -> None:
        self._time_control = time_control or TimeControl.rapid_10m()
        self._remaining: dict[Color, float] = {}
        self.reset()

    # ── IClock implementation ────────────────────────────────────────────

    def tick(self, delta_seconds: float, side_to_move: Color) -> None:
        if delta_seconds < 0:
            raise ValueError(f"Negative frame delta: {delta_seconds}")
        if self.is_expired:
            return
        left = max(0.0, self._remaining[side_to_move] - delta_seconds)
        self._remaining[side_to_move] = left
        if left == 0.0:
            _LOGGER.info("%s ran out of time", side_to_move.label)

    def reset(self) -> None:
        initial = self._time_control.initial_seconds
        self._remaining = {Color.WHITE: initial, Color.BLACK: initial}

    def remaining(self, color: Color) -> float:
        return self._remaining[color]

    def is_flag_fallen(self, color: Color) -> bool:
        return self._remaining[color] <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def is_expired(self) -> bool:
        """Whether either side has run out of time."""
        return self.expired_side() is not None

    def expired_side(self) -> Color | None:
        for color in Color:
            if self.is_flag_fallen(color):
                return color
        return None

    def winner_on_time(self) -> Color | None:
        """Side whose clock did not run out, if the game ended on time."""
        expired = self.expired_side()
        return None if expired is None else expired.opposite

    def set_remaining(self, color: Color, seconds: float) -> None:
        """Manually override remaining time (for testing / UI override)."""
        self._remaining[color] = max(0.0, seconds)

    def snapshot(self) -> ClockSnapshot:
        white = self._remaining[Color.WHITE]
        black = self._remaining[Color.BLACK]
        return ClockSnapshot(
            white_remaining=white,
            black_remaining=black,
            white_text=format_time(white),
            black_text=format_time(black),
            expired=self.expired_side(),
        )
