"""Square value type and algebraic-notation helpers.

Files and ranks are 1-based, matching the board as players read it:
``Square(1, 1)`` is a1 and ``Square(8, 8)`` is h8.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = "12345678"


class MalformedSquareError(ValueError):
    """A string or coordinate pair does not describe a board square."""


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate, compared by value."""

    file: int  # 1–8 (a–h)
    rank: int  # 1–8

    def __post_init__(self) -> None:
        if not (1 <= self.file <= 8 and 1 <= self.rank <= 8):
            raise MalformedSquareError(
                f"Square out of range: file={self.file}, rank={self.rank}"
            )

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. ``'e4'`` → ``Square(5, 4)``."""
        if (
            not isinstance(name, str)
            or len(name) != 2
            or name[0] not in FILES
            or name[1] not in RANKS
        ):
            raise MalformedSquareError(f"Invalid square name: {name!r}")
        return cls(FILES.index(name[0]) + 1, RANKS.index(name[1]) + 1)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``'a1'``."""
        return FILES[self.file - 1] + RANKS[self.rank - 1]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


def all_squares() -> Iterator[Square]:
    """Yield the 64 squares, a1 first, h8 last (rank-major)."""
    for rank in range(1, 9):
        for file in range(1, 9):
            yield Square(file, rank)
