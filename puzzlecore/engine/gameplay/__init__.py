from puzzlecore.engine.gameplay.game import PuzzleEngine

__all__ = ["PuzzleEngine"]
