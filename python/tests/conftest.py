"""Shared helpers for the viewer test suite."""

from __future__ import annotations

import pytest

from backend.models.board import Board


class RecordingRenderer:
    """Renderer double that records every call as ``(name, *args)``."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    def header(self, number: int) -> None:
        self.calls.append(("header", number))

    def setup(self, board: Board, solution: str) -> None:
        self.calls.append(("setup", str(board), solution))

    def update(self, board: Board, move: str) -> None:
        self.calls.append(("update", str(board), move))

    def malformed(self, error: str) -> None:
        self.calls.append(("malformed", error))

    def skipped(self) -> None:
        self.calls.append(("skipped",))

    def claim_rejected(self) -> None:
        self.calls.append(("claim_rejected",))

    def invalid_move(self, move: str) -> None:
        self.calls.append(("invalid_move", move))

    def completed(self) -> None:
        self.calls.append(("completed",))

    def incomplete(self) -> None:
        self.calls.append(("incomplete",))

    def results(self, correct: int, total: int) -> None:
        self.calls.append(("results", correct, total))

    def close(self) -> None:
        self.calls.append(("close",))


def board_of(text: str) -> Board:
    """Build a board from a row-major string such as ``"123 456 7x8"``."""
    return Board.from_symbols([c for c in text if not c.isspace()])


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def sleeps() -> list[float]:
    return []
