"""One graded case: a board plus the candidate solution for it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Board

UNSOLVABLE = "unsolvable"


class Outcome(StrEnum):
    SKIPPED = "skipped"
    MALFORMED = "malformed"
    INVALID_MOVE = "invalid-move"
    INCOMPLETE = "incomplete"
    COMPLETED = "completed"
    CLAIM_REJECTED = "claim-rejected"

    @property
    def is_correct(self) -> bool:
        return self in (Outcome.SKIPPED, Outcome.COMPLETED)


@dataclass(frozen=True)
class PuzzleCase:
    """A numbered board and the move string (or sentinel) submitted for it.

    ``board`` is None when the test file did not hold a valid board for
    this case; ``error`` then says why.
    """

    number: int
    board: Board | None
    solution: str
    error: str | None = None

    @property
    def claims_unsolvable(self) -> bool:
        return self.solution == UNSOLVABLE
