"""Replays each candidate solution and tallies the verdicts."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from backend.engine.gameplay import MoveEngine
from backend.engine.gamesolver import Solver
from backend.engine.grader.renderer import Renderer
from backend.models.board import Board
from backend.models.puzzlecase import Outcome, PuzzleCase

logger = logging.getLogger(__name__)


@dataclass
class GradeReport:
    outcomes: list[Outcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def correct(self) -> int:
        return sum(1 for o in self.outcomes if o.is_correct)

    @property
    def all_passed(self) -> bool:
        return self.correct == self.total

    @property
    def none_passed(self) -> bool:
        return self.correct == 0


class Grader:
    """Drives one run: display, replay, verdict, repeated for every case.

    *sleep* is called with *delay* after the initial display, after every
    applied move, after an invalid move, after a malformed board and after
    an ``unsolvable`` skip.
    Pass a no-op to grade without pacing.
    """

    def __init__(
        self,
        renderer: Renderer,
        delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        verify_unsolvable: bool = False,
    ) -> None:
        self.renderer = renderer
        self.delay = delay
        self._sleep = sleep
        self.verify_unsolvable = verify_unsolvable

    def _pause(self) -> None:
        if self.delay > 0:
            self._sleep(self.delay)

    # -- one case -------------------------------------------------------------

    def _show_move(self, board: Board, move: str) -> None:
        logger.debug("Applied %r", move)
        self.renderer.update(board, move)
        self._pause()

    def run_case(self, case: PuzzleCase) -> Outcome:
        self.renderer.header(case.number)

        if case.board is None:
            logger.debug("Test #%d: malformed board: %s", case.number, case.error)
            self.renderer.malformed(case.error or "unreadable board")
            self._pause()
            return Outcome.MALFORMED

        board = case.board.copy()
        logger.debug("Test #%d: initial board\n%s", case.number, board)
        self.renderer.setup(board, case.solution)
        self._pause()

        if case.claims_unsolvable:
            if self.verify_unsolvable and Solver.is_solvable(board):
                logger.debug("Test #%d: solvable board claimed unsolvable", case.number)
                self.renderer.claim_rejected()
                self._pause()
                return Outcome.CLAIM_REJECTED
            self.renderer.skipped()
            self._pause()
            return Outcome.SKIPPED

        rejected = MoveEngine.replay(board, case.solution, on_move=self._show_move)
        if rejected is not None:
            move = case.solution[rejected]
            logger.debug(
                "Test #%d: move %d (%r) rejected at blank %s",
                case.number,
                rejected,
                move,
                tuple(board.blank_pos),
            )
            self.renderer.invalid_move(move)
            self._pause()
            return Outcome.INVALID_MOVE

        if MoveEngine.is_solved(board):
            self.renderer.completed()
            return Outcome.COMPLETED
        self.renderer.incomplete()
        return Outcome.INCOMPLETE

    # -- whole run ------------------------------------------------------------

    def run(self, cases: Iterable[PuzzleCase]) -> GradeReport:
        """Grade every case, then show the tally.

        The renderer is closed even when grading is interrupted.
        """
        report = GradeReport()
        try:
            for case in cases:
                outcome = self.run_case(case)
                logger.info("Test #%d: %s", case.number, outcome.value)
                report.outcomes.append(outcome)
            self.renderer.results(report.correct, report.total)
        finally:
            self.renderer.close()
        return report
