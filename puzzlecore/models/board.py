"""Board model for the fifteen puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

EMPTY = 0


class BoardError(ValueError):
    """Base class for board contract failures."""


class InvalidBoardError(BoardError):
    """Raised when a board is built from malformed data or a size below 2."""


class BoardConsistencyError(BoardError):
    """Raised when the board no longer holds exactly one blank."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """An N×N sliding puzzle grid.

    Tiles are stored as a 2D list of ints; ``EMPTY`` (0) marks the blank.
    ``blank_pos`` caches where the blank is.  Only moves made through the
    engine keep it current, so anything else that edits ``tiles`` must call
    :meth:`locate_blank` afterwards.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board: 1..n²-1 row-major, blank bottom-right."""
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        tiles = [
            [r * size + c + 1 for c in range(size)]
            for r in range(size)
        ]
        tiles[size - 1][size - 1] = EMPTY
        return cls(size=size, tiles=tiles, blank_pos=(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        rows = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        return cls.from_rows(rows)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, validating its contents."""
        board = cls(size=len(rows), tiles=[list(row) for row in rows], blank_pos=(0, 0))
        board.validate()
        board.locate_blank()
        return board

    # -- validation -----------------------------------------------------------

    def validate(self) -> None:
        """Raise ``InvalidBoardError`` unless this is a well-formed puzzle."""
        n = self.size
        if n < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {n}.")
        if len(self.tiles) != n or any(len(row) != n for row in self.tiles):
            raise InvalidBoardError(f"Board is not a {n}×{n} square.")
        if any(type(v) is not int for v in self.flat()):
            raise InvalidBoardError("Board cells must all be integers.")
        if sorted(self.flat()) != list(range(n * n)):
            raise InvalidBoardError(
                f"Board must hold each of 1..{n * n - 1} once plus one blank."
            )

    def locate_blank(self) -> tuple[int, int]:
        """Rescan the grid for the blank and refresh ``blank_pos``."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == EMPTY:
                    self.blank_pos = (r, c)
                    return self.blank_pos
        raise BoardConsistencyError("No blank cell found on the board.")

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == EMPTY
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == EMPTY:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    def __str__(self) -> str:
        return "\n".join("\t".join(str(v) for v in row) for row in self.tiles)
