"""Solvability check — inversion parity on the 3×3 board."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import MoveEngine
from backend.engine.gamesolver import Solver

from conftest import board_of


@pytest.mark.parametrize(
    ("rows", "inversions"),
    [
        ("123 456 78x", 0),
        ("213 456 78x", 1),
        ("x23 156 478", 4),
        ("876 543 21x", 28),
    ],
)
def test_inversion_count(rows: str, inversions: int) -> None:
    assert Solver.inversions(board_of(rows)) == inversions


@pytest.mark.parametrize(
    ("rows", "solvable"),
    [
        ("123 456 78x", True),
        ("123 456 7x8", True),
        ("x23 156 478", True),
        ("213 456 78x", False),
        ("123 456 87x", False),
        ("813 4x2 765", True),
    ],
)
def test_parity_decides_solvability(rows: str, solvable: bool) -> None:
    assert Solver.is_solvable(board_of(rows)) is solvable


def test_moves_preserve_solvability() -> None:
    board = board_of("123 456 78x")
    for move in "ulldrurdllu":
        assert MoveEngine.apply_move(board, move)
        assert Solver.is_solvable(board)
