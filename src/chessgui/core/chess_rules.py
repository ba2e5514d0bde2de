"""Rules engine backed by the ``python-chess`` library."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import chess

from chessgui.core.enums import Color, GameStatus, PieceType
from chessgui.core.piece import Piece, is_promotion_kind
from chessgui.core.rules import InvalidMoveError, RulesEngine
from chessgui.core.types import Square


def _from_chess_color(color: chess.Color) -> Color:
    return Color.WHITE if color == chess.WHITE else Color.BLACK


def _to_chess_square(square: Square) -> chess.Square:
    return chess.parse_square(square.name)


def _from_chess_square(square: chess.Square) -> Square:
    return Square.parse(chess.square_name(square))


@dataclass
class ChessSession:
    """Game handle: the python-chess board plus per-side promotion choice."""

    board: chess.Board = field(default_factory=chess.Board)
    promotion: dict[Color, PieceType] = field(
        default_factory=lambda: {
            Color.WHITE: PieceType.QUEEN,
            Color.BLACK: PieceType.QUEEN,
        }
    )


class ChessRules(RulesEngine):
    """:class:`RulesEngine` implementation over :class:`chess.Board`.

    Squares cross the boundary as algebraic names, so any disagreement
    between the two coordinate systems surfaces as a
    :class:`~chessgui.core.types.MalformedSquareError`.
    """

    def new_game(self, fen: str | None = None) -> ChessSession:
        board = chess.Board(fen) if fen else chess.Board()
        return ChessSession(board=board)

    def board_of(self, session: ChessSession) -> Mapping[Square, Piece]:
        occupancy = {
            _from_chess_square(sq): Piece.from_char(p.symbol())
            for sq, p in session.board.piece_map().items()
        }
        return MappingProxyType(occupancy)

    def side_to_move(self, session: ChessSession) -> Color:
        return _from_chess_color(session.board.turn)

    def legal_destinations(
        self, session: ChessSession, square: Square
    ) -> frozenset[Square] | None:
        origin = _to_chess_square(square)
        targets = frozenset(
            _from_chess_square(move.to_square)
            for move in session.board.generate_legal_moves(
                from_mask=chess.BB_SQUARES[origin]
            )
        )
        return targets or None

    def apply_move(
        self, session: ChessSession, from_sq: Square, to_sq: Square
    ) -> None:
        board = session.board
        origin = _to_chess_square(from_sq)
        target = _to_chess_square(to_sq)

        promotion: int | None = None
        piece = board.piece_at(origin)
        if (
            piece is not None
            and piece.piece_type == chess.PAWN
            and chess.square_rank(target) in (0, 7)
        ):
            mover = _from_chess_color(piece.color)
            promotion = int(session.promotion[mover])

        move = chess.Move(origin, target, promotion=promotion)
        if not board.is_legal(move):
            raise InvalidMoveError(from_sq, to_sq, f"not legal in {board.fen()}")
        board.push(move)

    def set_promotion_preference(
        self, session: ChessSession, side: Color, kind: PieceType
    ) -> None:
        if not is_promotion_kind(kind):
            raise ValueError(f"Cannot promote to {kind.name.lower()}")
        session.promotion[side] = kind

    def status(self, session: ChessSession) -> GameStatus:
        board = session.board
        if board.is_checkmate():
            return GameStatus.CHECKMATE
        if board.is_stalemate():
            return GameStatus.STALEMATE
        if board.is_check():
            return GameStatus.CHECK
        return GameStatus.ONGOING
