"""Solvability check for sliding puzzle boards."""

from __future__ import annotations

from bisect import bisect_left, insort

from puzzlecore.models.board import EMPTY, Board


class Solver:
    """Stateless helpers; all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong relative order."""
        inv = 0
        seen: list[int] = []
        for v in board.flat():
            if v == EMPTY:
                continue
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        return inv

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd widths need an even inversion count.  Even widths need
        inversions plus the blank's row distance from the bottom to be even.
        """
        inv = Solver.inversions(board)
        if board.size % 2 == 1:
            return inv % 2 == 0
        blank_from_bottom = board.size - 1 - board.blank_pos[0]
        return (inv + blank_from_bottom) % 2 == 0
