"""Builds the goal board and scrambles it with random legal slides."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import TypeVar

from puzzlecore.models.board import EMPTY, Board

T = TypeVar("T")

Chooser = Callable[[Sequence[T]], T]

# Order in which neighbours of the blank are listed: up, down, left, right.
_NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Shuffler:
    """Creates solvable puzzles by sliding tiles away from the solved state.

    Every step is a legal slide, so the result can always be slid back to
    the goal; no parity bookkeeping is needed.
    """

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(
        board: Board,
        move_count: int,
        choose: Chooser = random.choice,
    ) -> list[tuple[int, int]]:
        """Slide *move_count* randomly chosen tiles into the blank, in place.

        Returns the coordinates that were slid, in order.
        """
        if move_count < 0:
            raise ValueError(f"move_count must be >= 0, got {move_count}.")

        slid: list[tuple[int, int]] = []
        for _ in range(move_count):
            target = choose(Shuffler.neighbours(board))
            Shuffler.swap(board, target)
            slid.append(target)
        return slid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def neighbours(board: Board) -> list[tuple[int, int]]:
        br, bc = board.blank_pos
        neighbours: list[tuple[int, int]] = []
        for dr, dc in _NEIGHBOUR_OFFSETS:
            nr, nc = br + dr, bc + dc
            if board.in_bounds(nr, nc):
                neighbours.append((nr, nc))
        return neighbours

    @staticmethod
    def swap(board: Board, target: tuple[int, int]) -> None:
        """Move the tile at *target* into the blank; *target* becomes the blank."""
        br, bc = board.blank_pos
        tr, tc = target
        board.tiles[br][bc] = board.tiles[tr][tc]
        board.tiles[tr][tc] = EMPTY
        board.blank_pos = (tr, tc)
