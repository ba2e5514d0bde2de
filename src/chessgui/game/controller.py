"""BoardController — turns pointer events into chess moves.

Coordinates: ViewportMapper, SelectionState, PromotionSelector,
ClockManager and a RulesEngine session. Hosts drive it through
handle_click, tick and snapshot.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from chessgui.core.chess_rules import ChessRules
from chessgui.core.enums import Color, GameStatus, MouseButton
from chessgui.core.piece import Piece, side_of
from chessgui.core.rules import InvalidMoveError, RulesEngine
from chessgui.core.types import Square
from chessgui.game.clock import ClockManager
from chessgui.game.interfaces import BoardLayout, TimeControl
from chessgui.game.promotion import PromotionSelector
from chessgui.game.selection import SelectionState
from chessgui.game.state import BoardSnapshot
from chessgui.game.viewport import (
    BoardRegion,
    PromotionSlotRegion,
    ResetRegion,
    ViewportMapper,
)

_LOGGER = logging.getLogger(__name__)


def _is_promoting(piece: Piece, to_sq: Square) -> bool:
    last_rank = 8 if side_of(piece) == Color.WHITE else 1
    return piece.is_pawn and to_sq.rank == last_rank


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Owns one game session and all interaction state around it.

    Entry points for the host loop: :meth:`handle_click` between frames,
    :meth:`tick` then :meth:`snapshot` once per frame. All calls must come
    from the same thread.
    """

    __slots__ = (
        "_engine",
        "_session",
        "_viewport",
        "_selection",
        "_promotion",
        "_clock",
    )

    def __init__(
        self,
        engine: RulesEngine | None = None,
        *,
        time_control: TimeControl | None = None,
        layout: BoardLayout | None = None,
    ) -> None:
        self._engine: RulesEngine = engine or ChessRules()
        self._session: Any = self._engine.new_game()
        self._viewport = ViewportMapper(layout)
        self._selection = SelectionState()
        self._promotion = PromotionSelector()
        self._clock = ClockManager(time_control)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> RulesEngine:
        return self._engine

    @property
    def session(self) -> Any:
        return self._session

    @property
    def viewport(self) -> ViewportMapper:
        return self._viewport

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def promotion(self) -> PromotionSelector:
        return self._promotion

    @property
    def clock(self) -> ClockManager:
        return self._clock

    @property
    def side_to_move(self) -> Color:
        return self._engine.side_to_move(self._session)

    @property
    def is_time_expired(self) -> bool:
        return self._clock.is_expired

    # ── Host entry points ────────────────────────────────────────────────

    def handle_click(self, x: float, y: float, button: MouseButton) -> None:
        """Dispatch a pointer release at window pixel (*x*, *y*)."""
        if button == MouseButton.SECONDARY:
            self._selection.clear()
            return
        if button != MouseButton.PRIMARY:
            return

        region = self._viewport.classify(x, y)
        _LOGGER.debug("Click at (%.0f, %.0f) → %s", x, y, region)
        if isinstance(region, BoardRegion):
            self._click_square(region.square)
        elif isinstance(region, ResetRegion):
            self.reset()
        elif isinstance(region, PromotionSlotRegion):
            side = self.side_to_move
            kind = self._promotion.select_slot(side, region.index)
            _LOGGER.debug("%s promotes to %s", side.label, kind.name.lower())

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Ask the engine to play *from_sq* → *to_sq*. Returns True if applied.

        Refused once a clock has run out. A move the engine rejects is
        logged and dropped; the selection is cleared either way.
        """
        if self._clock.is_expired:
            _LOGGER.debug("Ignoring %s%s: time expired", from_sq, to_sq)
            return False

        session = self._session
        side = self._engine.side_to_move(session)
        piece = self._engine.board_of(session).get(from_sq)
        if piece is not None and _is_promoting(piece, to_sq):
            self._engine.set_promotion_preference(
                session, side, self._promotion.preference(side)
            )

        try:
            self._engine.apply_move(session, from_sq, to_sq)
        except InvalidMoveError as exc:
            _LOGGER.warning("Move rejected by rules engine: %s", exc)
            return False
        finally:
            self._selection.clear()

        _LOGGER.info("%s played %s%s", side.label, from_sq, to_sq)
        return True

    def tick(self, delta_seconds: float) -> None:
        """Advance the clock of the side to move.

        Clocks stop once the position is checkmate or stalemate.
        """
        status = self._engine.status(self._session)
        if status in (GameStatus.CHECKMATE, GameStatus.STALEMATE):
            return
        self._clock.tick(delta_seconds, self.side_to_move)

    def reset(self) -> None:
        """Start over: new session, no selection, default promotion, full clocks."""
        self._session = self._engine.new_game()
        self._selection.clear()
        self._promotion.reset()
        self._clock.reset()
        _LOGGER.info("Game reset")

    def snapshot(self) -> BoardSnapshot:
        session = self._session
        side = self._engine.side_to_move(session)
        status = self._engine.status(session)
        clock = self._clock.snapshot()

        is_checkmate = status == GameStatus.CHECKMATE
        is_timeout = clock.expired is not None
        winner = self._clock.winner_on_time()
        if winner is None and is_checkmate:
            # The side left to move is the one that got mated.
            winner = side.opposite

        return BoardSnapshot(
            occupancy=MappingProxyType(dict(self._engine.board_of(session))),
            side_to_move=side,
            status=status,
            selected=self._selection.selected,
            highlighted=self._selection.highlighted,
            promotion=self._promotion.preferences(),
            clock=clock,
            is_checkmate=is_checkmate,
            is_timeout=is_timeout,
            winner=winner,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _click_square(self, target: Square) -> None:
        selection = self._selection
        source = selection.selected
        if source is not None and selection.is_target(target):
            if not self._clock.is_expired:
                self.submit_move(source, target)
            return

        side = self._engine.side_to_move(self._session)
        piece = self._engine.board_of(self._session).get(target)
        if piece is not None and side_of(piece) == side:
            destinations = self._engine.legal_destinations(self._session, target)
            selection.select(target, destinations)
            _LOGGER.debug("Selected %s", selection)
