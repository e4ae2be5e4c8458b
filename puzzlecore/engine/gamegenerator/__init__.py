from puzzlecore.engine.gamegenerator.generator import Chooser, Shuffler

__all__ = ["Chooser", "Shuffler"]
