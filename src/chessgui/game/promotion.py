"""Per-side promotion piece preference."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from chessgui.core.enums import Color, PieceType
from chessgui.core.piece import PROMOTION_KINDS, is_promotion_kind

DEFAULT_PROMOTION = PieceType.QUEEN


class PromotionSelector:
    """Remembers which piece each side's pawns promote to."""

    __slots__ = ("_preference",)

    def __init__(self) -> None:
        self._preference: dict[Color, PieceType] = {}
        self.reset()

    def preference(self, side: Color) -> PieceType:
        return self._preference[side]

    def preferences(self) -> Mapping[Color, PieceType]:
        return MappingProxyType(dict(self._preference))

    def set(self, side: Color, kind: PieceType) -> None:
        if not is_promotion_kind(kind):
            raise ValueError(f"Cannot promote to {kind.name.lower()}")
        self._preference[side] = kind

    def select_slot(self, side: Color, index: int) -> PieceType:
        """Apply picker slot *index* to *side* and return the chosen kind."""
        if not 0 <= index < len(PROMOTION_KINDS):
            raise ValueError(f"Promotion slot out of range: {index}")
        kind = PROMOTION_KINDS[index]
        self.set(side, kind)
        return kind

    def reset(self) -> None:
        self._preference = {color: DEFAULT_PROMOTION for color in Color}
