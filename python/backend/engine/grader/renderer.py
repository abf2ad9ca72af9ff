"""Presentation interface the grader drives.

Frontends implement this protocol; the grader never touches terminal codes.
"""

from __future__ import annotations

from typing import Protocol

from backend.models.board import Board


class Renderer(Protocol):
    def header(self, number: int) -> None:
        """Announce the start of test *number* (1-based)."""

    def setup(self, board: Board, solution: str) -> None:
        """Show the initial board and the full solution token."""

    def update(self, board: Board, move: str) -> None:
        """Show *board* after *move* was applied."""

    def malformed(self, error: str) -> None:
        """The test file held no valid board for this case."""

    def skipped(self) -> None: ...

    def claim_rejected(self) -> None: ...

    def invalid_move(self, move: str) -> None: ...

    def completed(self) -> None: ...

    def incomplete(self) -> None: ...

    def results(self, correct: int, total: int) -> None:
        """Show the final tally."""

    def close(self) -> None:
        """Restore the terminal; called once a run ends, however it ends."""
