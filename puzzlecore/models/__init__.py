from puzzlecore.models.board import (
    EMPTY,
    Board,
    BoardConsistencyError,
    BoardError,
    Direction,
    InvalidBoardError,
)
from puzzlecore.models.settings import PuzzleSettings

__all__ = [
    "EMPTY",
    "Board",
    "BoardConsistencyError",
    "BoardError",
    "Direction",
    "InvalidBoardError",
    "PuzzleSettings",
]
