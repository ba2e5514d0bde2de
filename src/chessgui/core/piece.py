"""Piece value object and promotion helpers."""

from __future__ import annotations

from dataclasses import dataclass

from chessgui.core.enums import Color, PieceType

# Lowercase FEN letter per piece type; white pieces use the uppercase form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER = {letter: ptype for ptype, letter in _LETTERS.items()}

# Slot order of the promotion picker.
PROMOTION_KINDS: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.BISHOP,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece of one side; the side is always explicit."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a FEN letter: ``'N'`` is a white knight, ``'n'`` a black one."""
        ptype = _TYPES_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN


def side_of(piece: Piece) -> Color:
    return piece.color


def is_promotion_kind(piece_type: PieceType) -> bool:
    """Whether a pawn may promote to *piece_type*."""
    return piece_type in PROMOTION_KINDS


def all_pieces() -> tuple[Piece, ...]:
    """Every (color, piece type) combination, white first."""
    return tuple(Piece(color, ptype) for color in Color for ptype in PieceType)
