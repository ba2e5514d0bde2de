"""Tests for BoardController — the orchestrator."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from chessgui.core.chess_rules import ChessRules, ChessSession
from chessgui.core.enums import Color, GameStatus, MouseButton, PieceType
from chessgui.core.piece import Piece
from chessgui.core.rules import InvalidMoveError
from chessgui.core.types import Square
from chessgui.game.controller import BoardController
from chessgui.game.interfaces import TimeControl

PROMOTION_FEN = "7k/P7/8/8/8/8/8/K7 w - - 0 1"
BLACK_PROMOTION_FEN = "k7/8/8/8/8/8/p7/2K5 b - - 0 1"


def sq(name: str) -> Square:
    return Square.parse(name)


class RecordingRules(ChessRules):
    """Real rules that remember every engine command."""

    def __init__(self, fen: str | None = None) -> None:
        self.fen_override = fen
        self.applied: list[tuple[Square, Square]] = []
        self.promotions: list[tuple[Color, PieceType]] = []

    def new_game(self, fen: str | None = None) -> ChessSession:
        return super().new_game(fen or self.fen_override)

    def apply_move(self, session: ChessSession, from_sq: Square, to_sq: Square) -> None:
        self.applied.append((from_sq, to_sq))
        super().apply_move(session, from_sq, to_sq)

    def set_promotion_preference(
        self, session: ChessSession, side: Color, kind: PieceType
    ) -> None:
        self.promotions.append((side, kind))
        super().set_promotion_preference(session, side, kind)


class RejectingRules(ChessRules):
    """Offers legal targets but refuses to play anything."""

    def apply_move(self, session: Any, from_sq: Square, to_sq: Square) -> None:
        raise InvalidMoveError(from_sq, to_sq, "rejected for test")


def click(
    ctrl: BoardController, name: str, button: MouseButton = MouseButton.PRIMARY
) -> None:
    x, y = ctrl.viewport.square_center(sq(name))
    ctrl.handle_click(x, y, button)


def click_slot(ctrl: BoardController, index: int) -> None:
    x, y, w, h = ctrl.viewport.promotion_slot_rect(index)
    ctrl.handle_click(x + w / 2, y + h / 2, MouseButton.PRIMARY)


def click_reset(ctrl: BoardController) -> None:
    x, y, w, h = ctrl.viewport.reset_rect()
    ctrl.handle_click(x + w / 2, y + h / 2, MouseButton.PRIMARY)


@pytest.fixture
def rules() -> RecordingRules:
    return RecordingRules()


@pytest.fixture
def ctrl(rules: RecordingRules) -> BoardController:
    return BoardController(rules)


class TestNewController:
    def test_initial_state(self, ctrl: BoardController) -> None:
        snap = ctrl.snapshot()
        assert snap.side_to_move == Color.WHITE
        assert snap.status == GameStatus.ONGOING
        assert snap.selected is None
        assert snap.highlighted == frozenset()
        assert len(snap.occupancy) == 32
        assert snap.winner is None
        assert snap.end_message is None
        assert snap.turn_text == "White's turn"
        assert snap.clock.text(Color.WHITE) == "10:00:00"

    def test_default_engine_is_python_chess(self) -> None:
        assert isinstance(BoardController().engine, ChessRules)


class TestSelection:
    def test_scenario_a_select_and_move(
        self, ctrl: BoardController, rules: RecordingRules
    ) -> None:
        click(ctrl, "e2")
        assert ctrl.selection.selected == sq("e2")
        assert {sq("e3"), sq("e4")} <= ctrl.selection.highlighted

        click(ctrl, "e4")
        snap = ctrl.snapshot()
        assert rules.applied == [(sq("e2"), sq("e4"))]
        assert snap.piece_at(sq("e4")) == Piece(Color.WHITE, PieceType.PAWN)
        assert snap.piece_at(sq("e2")) is None
        assert snap.side_to_move == Color.BLACK
        assert snap.selected is None
        assert snap.highlighted == frozenset()

    def test_scenario_b_opponent_piece_is_noop(self, ctrl: BoardController) -> None:
        click(ctrl, "e7")
        assert ctrl.selection.selected is None
        assert ctrl.selection.highlighted == frozenset()

    def test_empty_square_is_noop(self, ctrl: BoardController) -> None:
        click(ctrl, "e4")
        assert ctrl.selection.selected is None

    def test_highlight_matches_engine_for_every_own_piece(
        self, ctrl: BoardController
    ) -> None:
        engine = ctrl.engine
        board = engine.board_of(ctrl.session)
        own = [s for s, p in board.items() if p.color == Color.WHITE]
        assert len(own) == 16
        for square in own:
            click(ctrl, square.name)
            expected = engine.legal_destinations(ctrl.session, square) or frozenset()
            assert ctrl.selection.selected == square
            assert ctrl.selection.highlighted == expected
            ctrl.handle_click(0, 0, MouseButton.SECONDARY)

    def test_piece_without_moves_selected_with_empty_highlight(
        self, ctrl: BoardController
    ) -> None:
        click(ctrl, "a1")
        assert ctrl.selection.selected == sq("a1")
        assert ctrl.selection.highlighted == frozenset()

    def test_non_target_click_keeps_selection(self, ctrl: BoardController) -> None:
        click(ctrl, "e2")
        before = ctrl.selection.highlighted
        for name in ("e5", "e7", "h6"):
            click(ctrl, name)
            assert ctrl.selection.selected == sq("e2")
            assert ctrl.selection.highlighted == before

    def test_own_piece_switches_selection(self, ctrl: BoardController) -> None:
        click(ctrl, "e2")
        click(ctrl, "g1")
        assert ctrl.selection.selected == sq("g1")
        assert ctrl.selection.highlighted == {sq("f3"), sq("h3")}

    def test_secondary_click_clears(self, ctrl: BoardController) -> None:
        click(ctrl, "e2")
        click(ctrl, "e4", MouseButton.SECONDARY)
        assert ctrl.selection.selected is None
        assert ctrl.selection.highlighted == frozenset()

    def test_secondary_click_outside_board_clears(self, ctrl: BoardController) -> None:
        click(ctrl, "g1")
        ctrl.handle_click(-10, -10, MouseButton.SECONDARY)
        assert ctrl.selection.selected is None

    def test_secondary_click_when_idle(self, ctrl: BoardController) -> None:
        click(ctrl, "e4", MouseButton.SECONDARY)
        assert ctrl.selection.selected is None

    def test_other_buttons_ignored(self, ctrl: BoardController) -> None:
        click(ctrl, "e2", MouseButton.OTHER)
        assert ctrl.selection.selected is None

    def test_highlighted_click_applies_exactly_once(
        self, ctrl: BoardController, rules: RecordingRules
    ) -> None:
        click(ctrl, "g1")
        click(ctrl, "f3")
        assert len(rules.applied) == 1
        # Black's turn now: f3 holds a white knight, clicking it again is a no-op.
        click(ctrl, "f3")
        assert len(rules.applied) == 1
        assert ctrl.selection.selected is None

    def test_black_can_select_after_white_moves(self, ctrl: BoardController) -> None:
        click(ctrl, "e2")
        click(ctrl, "e4")
        click(ctrl, "e7")
        assert ctrl.selection.selected == sq("e7")
        assert ctrl.selection.highlighted == {sq("e6"), sq("e5")}


class TestSubmitMove:
    def test_submit_move_directly(self, ctrl: BoardController) -> None:
        assert ctrl.submit_move(sq("d2"), sq("d4"))
        assert ctrl.side_to_move == Color.BLACK

    def test_rejected_move_is_absorbed(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = BoardController(RejectingRules())
        click(ctrl, "e2")
        with caplog.at_level(logging.WARNING, logger="chessgui.game.controller"):
            click(ctrl, "e4")
        assert ctrl.selection.selected is None
        assert ctrl.selection.highlighted == frozenset()
        assert ctrl.side_to_move == Color.WHITE
        assert "rejected" in caplog.text

    def test_illegal_submit_returns_false(self, ctrl: BoardController) -> None:
        assert not ctrl.submit_move(sq("e2"), sq("e5"))
        assert ctrl.side_to_move == Color.WHITE

    def test_non_promoting_move_sends_no_preference(
        self, ctrl: BoardController, rules: RecordingRules
    ) -> None:
        ctrl.submit_move(sq("e2"), sq("e4"))
        assert rules.promotions == []


class TestPromotion:
    def test_scenario_d_knight_promotion(self) -> None:
        rules = RecordingRules(PROMOTION_FEN)
        ctrl = BoardController(rules)
        click(ctrl, "a7")
        click_slot(ctrl, 1)
        assert ctrl.promotion.preference(Color.WHITE) == PieceType.KNIGHT
        assert ctrl.selection.selected == sq("a7")
        assert ctrl.selection.highlighted == {sq("a8")}
        assert rules.applied == []

        click(ctrl, "a8")
        assert rules.promotions == [(Color.WHITE, PieceType.KNIGHT)]
        assert ctrl.snapshot().piece_at(sq("a8")) == Piece(
            Color.WHITE, PieceType.KNIGHT
        )

    def test_default_promotion_is_queen(self) -> None:
        ctrl = BoardController(RecordingRules(PROMOTION_FEN))
        click(ctrl, "a7")
        click(ctrl, "a8")
        assert ctrl.snapshot().piece_at(sq("a8")) == Piece(
            Color.WHITE, PieceType.QUEEN
        )

    def test_slot_sets_side_to_move_only(self) -> None:
        ctrl = BoardController(RecordingRules(BLACK_PROMOTION_FEN))
        click_slot(ctrl, 2)
        assert ctrl.promotion.preference(Color.BLACK) == PieceType.ROOK
        assert ctrl.promotion.preference(Color.WHITE) == PieceType.QUEEN
        snap = ctrl.snapshot()
        assert snap.active_promotion == PieceType.ROOK

        click(ctrl, "a2")
        click(ctrl, "a1")
        assert ctrl.snapshot().piece_at(sq("a1")) == Piece(Color.BLACK, PieceType.ROOK)


class TestClock:
    def test_tick_only_side_to_move(self, ctrl: BoardController) -> None:
        ctrl.tick(2.0)
        assert ctrl.clock.remaining(Color.WHITE) == pytest.approx(598.0)
        assert ctrl.clock.remaining(Color.BLACK) == 600.0

        ctrl.submit_move(sq("e2"), sq("e4"))
        ctrl.tick(3.0)
        assert ctrl.clock.remaining(Color.WHITE) == pytest.approx(598.0)
        assert ctrl.clock.remaining(Color.BLACK) == pytest.approx(597.0)

    def test_scenario_c_timeout_blocks_moves(
        self, ctrl: BoardController, rules: RecordingRules
    ) -> None:
        ctrl.tick(600.0)
        assert ctrl.clock.remaining(Color.WHITE) == 0.0
        assert ctrl.is_time_expired

        click(ctrl, "e2")
        click(ctrl, "e4")
        assert rules.applied == []
        assert not ctrl.submit_move(sq("e2"), sq("e4"))
        assert rules.applied == []

        snap = ctrl.snapshot()
        assert snap.is_timeout
        assert snap.winner == Color.BLACK
        assert snap.end_message == "Black has won as the time ran out!"
        assert snap.side_to_move == Color.WHITE

    def test_no_tick_after_expiry(self, ctrl: BoardController) -> None:
        ctrl.tick(700.0)
        ctrl.tick(5.0)
        assert ctrl.clock.remaining(Color.WHITE) == 0.0
        assert ctrl.clock.remaining(Color.BLACK) == 600.0

    def test_custom_time_control(self) -> None:
        ctrl = BoardController(time_control=TimeControl.blitz_5m())
        assert ctrl.snapshot().clock.text(Color.BLACK) == "5:00:00"

    def test_clock_stops_at_checkmate(self, ctrl: BoardController) -> None:
        for a, b in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            assert ctrl.submit_move(sq(a), sq(b))
        ctrl.tick(10.0)
        assert ctrl.clock.remaining(Color.WHITE) == 600.0


class TestGameEnd:
    def test_checkmate_winner_is_other_side(self, ctrl: BoardController) -> None:
        for a, b in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            ctrl.submit_move(sq(a), sq(b))
        snap = ctrl.snapshot()
        assert snap.is_checkmate
        assert not snap.is_timeout
        assert snap.side_to_move == Color.WHITE
        assert snap.winner == Color.BLACK
        assert snap.end_message == "Black has won!"
        assert snap.is_over

    def test_timeout_ignores_engine_status(self, ctrl: BoardController) -> None:
        ctrl.clock.set_remaining(Color.BLACK, 0.0)
        snap = ctrl.snapshot()
        assert snap.status == GameStatus.ONGOING
        assert snap.winner == Color.WHITE

    def test_timeout_winner_overrides_checkmate(
        self, ctrl: BoardController
    ) -> None:
        for a, b in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            ctrl.submit_move(sq(a), sq(b))
        ctrl.clock.set_remaining(Color.BLACK, 0.0)
        snap = ctrl.snapshot()
        assert snap.is_checkmate
        assert snap.winner == ctrl.clock.winner_on_time() == Color.WHITE
        assert snap.end_message == "White has won as the time ran out!"

    def test_stalemate_message(self) -> None:
        ctrl = BoardController(RecordingRules("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"))
        snap = ctrl.snapshot()
        assert snap.winner is None
        assert snap.is_over
        assert snap.end_message == "Stalemate!"


class TestReset:
    def test_reset_restores_defaults(
        self, ctrl: BoardController, rules: RecordingRules
    ) -> None:
        ctrl.submit_move(sq("e2"), sq("e4"))
        click_slot(ctrl, 3)
        click(ctrl, "e7")
        ctrl.tick(30.0)

        ctrl.reset()
        snap = ctrl.snapshot()
        assert snap.side_to_move == Color.WHITE
        assert snap.piece_at(sq("e2")) == Piece(Color.WHITE, PieceType.PAWN)
        assert snap.selected is None
        assert snap.highlighted == frozenset()
        assert dict(snap.promotion) == {
            Color.WHITE: PieceType.QUEEN,
            Color.BLACK: PieceType.QUEEN,
        }
        assert ctrl.clock.remaining(Color.WHITE) == 600.0
        assert ctrl.clock.remaining(Color.BLACK) == 600.0

    def test_reset_button(self, ctrl: BoardController) -> None:
        first_session = ctrl.session
        ctrl.submit_move(sq("e2"), sq("e4"))
        click_reset(ctrl)
        assert ctrl.session is not first_session
        assert ctrl.side_to_move == Color.WHITE

    def test_reset_unfreezes_time(self, ctrl: BoardController) -> None:
        ctrl.tick(600.0)
        ctrl.reset()
        assert not ctrl.is_time_expired
        assert ctrl.submit_move(sq("e2"), sq("e4"))


class TestSnapshot:
    def test_snapshot_does_not_mutate(self, ctrl: BoardController) -> None:
        click(ctrl, "e2")
        first = ctrl.snapshot()
        second = ctrl.snapshot()
        assert first == second
        assert ctrl.selection.selected == sq("e2")
        assert ctrl.clock.remaining(Color.WHITE) == 600.0

    def test_snapshot_is_read_only(self, ctrl: BoardController) -> None:
        snap = ctrl.snapshot()
        with pytest.raises(TypeError):
            queen = Piece(Color.WHITE, PieceType.QUEEN)
            snap.occupancy[sq("e4")] = queen  # type: ignore[index]
        with pytest.raises(AttributeError):
            snap.selected = sq("e2")  # type: ignore[misc]

    def test_snapshot_detached_from_later_moves(self, ctrl: BoardController) -> None:
        click(ctrl, "e2")
        snap = ctrl.snapshot()
        click(ctrl, "e4")
        assert snap.selected == sq("e2")
        assert snap.piece_at(sq("e2")) == Piece(Color.WHITE, PieceType.PAWN)
        assert snap.side_to_move == Color.WHITE

    def test_active_clock_text_follows_turn(self, ctrl: BoardController) -> None:
        ctrl.tick(1.5)
        assert ctrl.snapshot().active_clock_text == "9:58:30"
        ctrl.submit_move(sq("e2"), sq("e4"))
        assert ctrl.snapshot().active_clock_text == "10:00:00"
        assert ctrl.snapshot().turn_text == "Black's turn"
