"""Selected square and its legal destinations."""

from __future__ import annotations

from collections.abc import Iterable

from chessgui.core.types import Square


class SelectionState:
    """Selected square (``None`` when idle) plus the highlight set.

    ``highlighted`` is only ever filled together with ``selected`` and is
    replaced wholesale on every selection change.
    """

    __slots__ = ("_selected", "_highlighted")

    def __init__(self) -> None:
        self._selected: Square | None = None
        self._highlighted: frozenset[Square] = frozenset()

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def highlighted(self) -> frozenset[Square]:
        return self._highlighted

    def is_target(self, square: Square) -> bool:
        """Whether *square* is an offered destination of the selection."""
        return self._selected is not None and square in self._highlighted

    def select(self, square: Square, destinations: Iterable[Square] | None) -> None:
        self._selected = square
        self._highlighted = frozenset(destinations or ())

    def clear(self) -> None:
        self._selected = None
        self._highlighted = frozenset()

    def __repr__(self) -> str:
        targets = ",".join(sorted(sq.name for sq in self._highlighted))
        return f"SelectionState(selected={self._selected}, highlighted={{{targets}}})"
