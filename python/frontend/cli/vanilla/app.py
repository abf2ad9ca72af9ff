"""Vanilla terminal frontend — no third-party dependencies.

Uses only raw ANSI escape codes. The board is redrawn in place after each
move by jumping the cursor back over the previous frame, and applied moves
accumulate on the line below the solution string.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from backend.engine.grader import GradeReport, Grader
from backend.models.board import BLANK, Board
from backend.models.puzzlecase import PuzzleCase

# -- ANSI helpers -------------------------------------------------------------

_RED = "\033[31m"
_GREEN = "\033[32m"
_BLUE = "\033[34m"
_BANNER = "\033[41m"        # red background
_TILE_FG = "\033[30m"       # black
_TILE_BG = "\033[107m"      # bright white
_BLANK_BG = "\033[40m"      # black
_R = "\033[m"               # reset

_SAVE = "\033[s"
_RESTORE = "\033[u"
_LINE_UP = "\033[F"
# From the line after the move trail back to the first board row.
_FRAME_UP = "\033[6F"


def _banner(title: str) -> str:
    return f"{_BANNER}----------[{title}]----------{_R}"


def _render_board(board: Board) -> str:
    """Return the grid as three lines of coloured tiles."""
    lines: list[str] = []
    for row in board.rows():
        cells: list[str] = []
        for symbol in row:
            if symbol == BLANK:
                cells.append(f"{_TILE_FG}{_BLANK_BG}   {_R}")
            else:
                cells.append(f"{_TILE_FG}{_TILE_BG} {symbol} {_R}")
        lines.append("".join(cells))
    return "\n".join(lines)


class VanillaRenderer:
    """Writes the animated transcript with plain ANSI codes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    # -- frames ---------------------------------------------------------------

    def header(self, number: int) -> None:
        self._write(_banner(f"Test #{number}") + "\n")

    def setup(self, board: Board, solution: str) -> None:
        self._write(
            f"\n{_render_board(board)}\n\n{solution}\n\n{_LINE_UP}{_SAVE}\n"
        )

    def update(self, board: Board, move: str) -> None:
        self._write(
            f"{_FRAME_UP}{_render_board(board)}\n{_RESTORE}{move}{_SAVE}\n"
        )

    # -- verdicts -------------------------------------------------------------

    def malformed(self, error: str) -> None:
        self._write(f"{_RED}Malformed test: {error} Skipping test...{_R}\n")

    def skipped(self) -> None:
        self._write(
            f"{_BLUE}Your output says it doesn't have a solution. "
            f"Skipping test...{_R}\n"
        )

    def claim_rejected(self) -> None:
        self._write(
            f"{_RED}Your output says it doesn't have a solution, "
            f"but this board is solvable.{_R}\n"
        )

    def invalid_move(self, move: str) -> None:
        self._write(f"{_RED}Invalid move {move!r}! Ending this test...{_R}\n")

    def completed(self) -> None:
        self._write(f"{_GREEN}Test completed{_R}\n")

    def incomplete(self) -> None:
        self._write(f"{_BLUE}Test incompleted{_R}\n")

    def results(self, correct: int, total: int) -> None:
        if correct == total:
            colour = _GREEN
        elif correct == 0:
            colour = _RED
        else:
            colour = _BLUE
        self._write(
            f"{_banner('Results')}\n"
            f"{colour}Your results: {correct}/{total} "
            f"tests successfully completed{_R}\n"
        )

    def close(self) -> None:
        self._write(_R)


# -- public entry point -------------------------------------------------------


def run(
    cases: Iterable[PuzzleCase],
    delay: float = 1.0,
    verify_unsolvable: bool = False,
) -> GradeReport:
    """Grade *cases* and animate them with raw ANSI output."""
    grader = Grader(
        VanillaRenderer(),
        delay=delay,
        verify_unsolvable=verify_unsolvable,
    )
    return grader.run(cases)
