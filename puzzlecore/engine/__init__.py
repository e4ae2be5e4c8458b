from puzzlecore.engine.gameplay import PuzzleEngine

__all__ = ["PuzzleEngine"]
