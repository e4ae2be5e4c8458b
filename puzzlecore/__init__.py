"""Fifteen puzzle core: board model and puzzle engine."""

from puzzlecore.engine import PuzzleEngine
from puzzlecore.models import Board, Direction, PuzzleSettings

__all__ = ["Board", "Direction", "PuzzleEngine", "PuzzleSettings"]
