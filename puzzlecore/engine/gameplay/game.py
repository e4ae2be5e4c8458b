"""Core gameplay logic: legal moves, sliding, shuffling, and the win check."""

from __future__ import annotations

import logging
import random

from puzzlecore.engine.gamegenerator import Chooser, Shuffler
from puzzlecore.engine.gamesolver import Solver
from puzzlecore.engine.gamestate import GameState
from puzzlecore.models.board import Board, Direction
from puzzlecore.models.settings import (
    DEFAULT_SHUFFLE_MOVES,
    DEFAULT_SIZE,
    PuzzleSettings,
)

LOGGER = logging.getLogger("puzzlecore.engine")

# Offset from the blank to the tile that slides in the given direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class PuzzleEngine:
    """Owns one puzzle: its board, solved flag, and move gate.

    Frontends read the accessors below and forward clicks to
    :meth:`player_move`.  Everything runs synchronously; callers must not
    interleave :meth:`initialize` and :meth:`shuffle` from different threads.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        *,
        choose: Chooser = random.choice,
        shuffle_moves: int = DEFAULT_SHUFFLE_MOVES,
    ) -> None:
        self._choose = choose
        self.shuffle_moves = shuffle_moves
        self.state: GameState
        self.initialize(size)

    @classmethod
    def from_board(
        cls,
        board: Board,
        *,
        choose: Chooser = random.choice,
        shuffle_moves: int = DEFAULT_SHUFFLE_MOVES,
    ) -> PuzzleEngine:
        """Create an engine around an existing board (e.g. a test fixture)."""
        board.validate()
        board.locate_blank()
        if not Solver.is_solvable(board):
            LOGGER.warning("Loaded %d×%d board cannot reach the goal state", board.size, board.size)
        obj = cls(board.size, choose=choose, shuffle_moves=shuffle_moves)
        obj.state = GameState(board)
        obj.check_solved()
        return obj

    @classmethod
    def from_settings(cls, settings: PuzzleSettings) -> PuzzleEngine:
        """Create a freshly shuffled engine; a seed makes the shuffle repeatable."""
        rng = random.Random(settings.seed)
        obj = cls(settings.size, choose=rng.choice, shuffle_moves=settings.shuffle_moves)
        obj.shuffle()
        return obj

    # -- accessors ------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def tiles(self) -> list[list[int]]:
        """A copy of the grid, safe to hand to renderers."""
        return [row[:] for row in self.state.board.tiles]

    @property
    def empty_position(self) -> tuple[int, int]:
        return self.state.board.blank_pos

    @property
    def solved(self) -> bool:
        return self.state.solved

    @property
    def accepting_moves(self) -> bool:
        return self.state.accepting_moves

    @property
    def is_shuffling(self) -> bool:
        return not self.state.accepting_moves

    @property
    def moves(self) -> int:
        return self.state.moves

    # -- lifecycle ------------------------------------------------------------

    def initialize(self, size: int | None = None) -> None:
        """Reset to the goal arrangement.  Raises ``InvalidBoardError`` if size < 2."""
        if size is None:
            size = self.size
        self.state = GameState(Shuffler.solved(size))
        LOGGER.debug("Initialized %d×%d board", size, size)

    def shuffle(self, move_count: int | None = None) -> list[tuple[int, int]]:
        """Apply *move_count* random legal slides with the move gate closed.

        The solved flag is left alone; a short shuffle may land back on the
        goal arrangement.
        """
        if move_count is None:
            move_count = self.shuffle_moves
        if move_count < 0:
            raise ValueError(f"move_count must be >= 0, got {move_count}.")

        LOGGER.debug("Shuffling with %d moves", move_count)
        self.state.close_gate()
        try:
            slid = Shuffler.shuffle(self.state.board, move_count, self._choose)
        finally:
            self.state.open_gate()
        LOGGER.debug("Shuffle done, blank at %s", self.empty_position)
        return slid

    def reset(self, move_count: int | None = None) -> None:
        """Start over: goal board, then a fresh shuffle."""
        self.initialize()
        self.shuffle(move_count)

    # -- queries --------------------------------------------------------------

    def legal_moves(self) -> list[tuple[int, int]]:
        """Cells next to the blank, listed up, down, left, right."""
        return Shuffler.neighbours(self.state.board)

    def is_adjacent(self, row: int, col: int) -> bool:
        board = self.state.board
        if not board.in_bounds(row, col):
            return False
        br, bc = board.blank_pos
        return abs(row - br) + abs(col - bc) == 1

    def check_solved(self) -> bool:
        was_solved = self.state.solved
        self.state.solved = self.state.board.is_solved()
        if self.state.solved and not was_solved:
            LOGGER.info("Puzzle solved after %d moves", self.state.moves)
        return self.state.solved

    # -- movement -------------------------------------------------------------

    def apply_move(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank.

        Returns False and leaves the board untouched when the cell is not
        next to the blank.  Does not re-check the solved state.
        """
        if not self.is_adjacent(row, col):
            LOGGER.debug("Ignored move to (%d, %d); blank at %s", row, col, self.empty_position)
            return False
        Shuffler.swap(self.state.board, (row, col))
        LOGGER.debug("Slid tile from (%d, %d); blank now at %s", row, col, self.empty_position)
        return True

    def player_move(self, row: int, col: int) -> bool:
        """Handle a move requested by the player (e.g. a click on a tile).

        Ignored while shuffling or once solved.  A successful move bumps the
        move counter and re-evaluates the solved flag.
        """
        if not self.state.can_play:
            return False
        self.resync_empty_position()
        if not self.apply_move(row, col):
            return False
        self.state.increment_moves()
        self.check_solved()
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        br, bc = self.resync_empty_position()
        dr, dc = _DIRECTION_OFFSETS[direction]
        return self.player_move(br + dr, bc + dc)

    # -- cache coherence ------------------------------------------------------

    def resync_empty_position(self) -> tuple[int, int]:
        """Recompute the cached blank position from the grid.

        Raises ``BoardConsistencyError`` if the grid has no blank.
        """
        cached = self.state.board.blank_pos
        actual = self.state.board.locate_blank()
        if actual != cached:
            LOGGER.debug("Blank cache was stale: %s -> %s", cached, actual)
        return actual

    # -- diagnostics ----------------------------------------------------------

    def debug_snapshot(self) -> str:
        board = self.state.board
        br, bc = board.blank_pos
        lines = [
            f"Empty tile at: {(br, bc)}",
            f"Board value at empty position: {board.get_tile(br, bc)}",
            "Board state:",
            str(board),
            "Possible moves:",
        ]
        for i, (r, c) in enumerate(self.legal_moves()):
            lines.append(f"  move {i}: ({r}, {c}) -> tile {board.get_tile(r, c)}")
        return "\n".join(lines)
