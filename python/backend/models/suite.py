"""Reading test boards and candidate solutions from their two files."""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.board import SIZE, Board, BoardError
from backend.models.puzzlecase import PuzzleCase

logger = logging.getLogger(__name__)


class SuiteFormatError(ValueError):
    """Raised when the test file does not describe a readable suite."""


def parse_suite(tests_text: str, solutions_text: str) -> list[PuzzleCase]:
    """Pair every board of *tests_text* with its token in *solutions_text*.

    The tests text starts with the case count followed by 9 whitespace
    separated symbols per board. Solutions are one token per case, matched
    by position only. A missing solution token is read as an empty move
    string.

    An invalid or truncated board does not stop parsing: its case carries
    no board and the reason in ``error``. Only an unreadable count raises.
    """
    tokens = tests_text.split()
    solutions = solutions_text.split()

    if not tokens:
        raise SuiteFormatError("Test file is empty; expected a test count.")
    try:
        count = int(tokens[0])
    except ValueError:
        raise SuiteFormatError(
            f"Test count must be an integer, got {tokens[0]!r}."
        ) from None
    if count < 0:
        raise SuiteFormatError(f"Test count must not be negative, got {count}.")

    cells = SIZE * SIZE
    cases: list[PuzzleCase] = []
    for i in range(count):
        start = 1 + i * cells
        symbols = tokens[start : start + cells]
        solution = solutions[i] if i < len(solutions) else ""

        board: Board | None = None
        error: str | None = None
        if len(symbols) < cells:
            error = f"Expected {cells} board symbols, found {len(symbols)}."
        else:
            try:
                board = Board.from_symbols(symbols)
            except BoardError as exc:
                error = str(exc)
        if error is not None:
            logger.warning("Test #%d: %s", i + 1, error)

        cases.append(
            PuzzleCase(number=i + 1, board=board, solution=solution, error=error)
        )

    if len(solutions) < count:
        logger.warning(
            "Solution file has %d token(s) for %d test(s); "
            "missing solutions are graded as empty.",
            len(solutions),
            count,
        )
    return cases


def load_suite(tests_path: Path, solutions_path: Path) -> list[PuzzleCase]:
    """Open both files, then read and parse them.

    Both files are opened before either is read. ``OSError`` is left to the
    caller; text that is not UTF-8 raises ``SuiteFormatError``.
    """
    with (
        open(tests_path, encoding="utf-8") as tests_file,
        open(solutions_path, encoding="utf-8") as solutions_file,
    ):
        try:
            tests_text = tests_file.read()
        except UnicodeDecodeError as exc:
            raise SuiteFormatError(f"Not UTF-8 text in {tests_path}: {exc}") from exc
        try:
            solutions_text = solutions_file.read()
        except UnicodeDecodeError as exc:
            raise SuiteFormatError(
                f"Not UTF-8 text in {solutions_path}: {exc}"
            ) from exc
    cases = parse_suite(tests_text, solutions_text)
    logger.info("Loaded %d test(s) from %s", len(cases), tests_path)
    return cases
