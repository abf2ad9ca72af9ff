"""Board model for the 8-puzzle viewer."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

SIZE = 3
BLANK = "x"
DIGITS = frozenset("12345678")


class BoardError(ValueError):
    """Raised when a board cannot be built from the given symbols."""


class Position(NamedTuple):
    """Grid coordinate: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


class Direction(StrEnum):
    """Direction the *blank* travels, spelled as in solution files."""

    UP = "u"
    DOWN = "d"
    LEFT = "l"
    RIGHT = "r"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def inverse(self) -> Direction:
        return _INVERSES[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_INVERSES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Board:
    """A 3×3 puzzle board.

    Tiles are stored row-major as one-character strings, so ``tiles[row][col]``
    holds the symbol at column ``col`` of row ``row``. ``blank_pos`` caches the
    blank's coordinate and must be kept in sync by whoever moves tiles.
    """

    tiles: list[list[str]]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_symbols(cls, symbols: Sequence[str]) -> Board:
        """Create a board from 9 symbols in file (row-major reading) order.

        The k-th symbol lands on row ``k // 3``, column ``k % 3``.

        Example::

            Board.from_symbols("1 2 3 4 5 6 7 x 8".split())
        """
        if len(symbols) != SIZE * SIZE:
            raise BoardError(
                f"Expected {SIZE * SIZE} symbols for a {SIZE}×{SIZE} board, "
                f"got {len(symbols)}."
            )
        blanks = [i for i, s in enumerate(symbols) if s == BLANK]
        if len(blanks) != 1:
            raise BoardError(
                f"Expected exactly one blank '{BLANK}', got {len(blanks)}."
            )
        digits = [s for s in symbols if s != BLANK]
        if set(digits) != DIGITS or len(digits) != len(DIGITS):
            raise BoardError(
                f"Tiles must be the digits 1-8 exactly once, got {' '.join(symbols)}."
            )

        tiles = [list(symbols[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]
        row, col = divmod(blanks[0], SIZE)
        return cls(tiles=tiles, blank_pos=Position(col, row))

    # -- queries --------------------------------------------------------------

    def get(self, x: int, y: int) -> str:
        return self.tiles[y][x]

    def rows(self) -> Iterator[list[str]]:
        yield from self.tiles

    def symbols(self) -> list[str]:
        """Flatten back to file order."""
        return [s for row in self.tiles for s in row]

    def copy(self) -> Board:
        return Board(
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.tiles)
