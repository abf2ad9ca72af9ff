"""Move engine — applies blank moves and checks the goal layout."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from backend.models.board import BLANK, SIZE, Board, Direction, Position


class MoveEngine:
    """Stateless move rules — all methods are static."""

    # -- movement (direction = where the *blank* moves) -----------------------

    @staticmethod
    def apply_move(board: Board, move: str) -> bool:
        """Shift the blank one cell in direction *move* (``u``/``d``/``l``/``r``).

        The blank swaps places with the neighbouring tile. Returns False,
        leaving the board untouched, for an unknown character or a move
        that would leave the grid.
        """
        try:
            direction = Direction(move)
        except ValueError:
            return False

        bx, by = board.blank_pos
        dx, dy = direction.offset
        tx, ty = bx + dx, by + dy

        if not (0 <= tx < SIZE and 0 <= ty < SIZE):
            return False

        MoveEngine._swap(board, Position(tx, ty))
        return True

    @staticmethod
    def replay(
        board: Board,
        moves: Iterable[str],
        on_move: Callable[[Board, str], None] | None = None,
    ) -> int | None:
        """Apply *moves* in order, calling ``on_move(board, move)`` after each.

        Returns the index of the first rejected move, or None when every
        move was applied. Moves after a rejected one are not attempted.
        """
        for i, move in enumerate(moves):
            if not MoveEngine.apply_move(board, move):
                return i
            if on_move is not None:
                on_move(board, move)
        return None

    # -- queries --------------------------------------------------------------

    @staticmethod
    def is_solved(board: Board) -> bool:
        """Check that every tile reads 1..8 in row-major order.

        The blank is accepted on any cell, so only the eight digits are
        compared against their goal positions.
        """
        for y, row in enumerate(board.tiles):
            for x, symbol in enumerate(row):
                if symbol != BLANK and symbol != str(1 + x + SIZE * y):
                    return False
        return True

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: Position) -> None:
        bx, by = board.blank_pos
        tx, ty = target
        board.tiles[by][bx], board.tiles[ty][tx] = (
            board.tiles[ty][tx],
            board.tiles[by][bx],
        )
        board.blank_pos = target
