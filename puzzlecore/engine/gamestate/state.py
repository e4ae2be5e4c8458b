"""Tracks the mutable state of a puzzle in progress."""

from __future__ import annotations

from puzzlecore.models.board import Board


class GameState:
    """Holds the current board, the solved flag, the move gate, and a move counter.

    ``accepting_moves`` is the gate closed while the board is being
    shuffled.  ``solved`` is only written by an explicit solved check.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.solved: bool = False
        self.accepting_moves: bool = True

    # -- gate -----------------------------------------------------------------

    def close_gate(self) -> None:
        self.accepting_moves = False

    def open_gate(self) -> None:
        self.accepting_moves = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def can_play(self) -> bool:
        return self.accepting_moves and not self.solved
