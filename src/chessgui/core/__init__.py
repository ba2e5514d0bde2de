"""Core domain layer — value types and the rules-engine boundary.

Quick start::

    from chessgui.core import ChessRules, Square

    rules = ChessRules()
    session = rules.new_game()
    rules.legal_destinations(session, Square.parse("e2"))
"""

from chessgui.core.chess_rules import ChessRules, ChessSession
from chessgui.core.enums import Color, GameStatus, MouseButton, PieceType
from chessgui.core.piece import PROMOTION_KINDS, Piece, is_promotion_kind, side_of
from chessgui.core.rules import InvalidMoveError, RulesEngine
from chessgui.core.types import MalformedSquareError, Square, all_squares

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MouseButton",
    "PieceType",
    # Types / helpers
    "MalformedSquareError",
    "PROMOTION_KINDS",
    "Piece",
    "Square",
    "all_squares",
    "is_promotion_kind",
    "side_of",
    # Rules engine
    "ChessRules",
    "ChessSession",
    "InvalidMoveError",
    "RulesEngine",
]
