"""Solvability check for 8-puzzle boards."""

from __future__ import annotations

from backend.models.board import BLANK, Board


class Solver:
    """Stateless — all methods are static.

    Only answers whether a board can reach the goal; it never produces
    moves.
    """

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong relative order."""
        tiles = [int(s) for s in board.symbols() if s != BLANK]
        return sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        On an odd-width grid a board is solvable exactly when its
        inversion count is even.
        """
        return Solver.inversions(board) % 2 == 0
