"""Runtime settings shared by the frontends."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_SIZE = 4
DEFAULT_SHUFFLE_MOVES = 100


@dataclass(frozen=True)
class PuzzleSettings:
    """Options picked on the command line.

    ``show_legal_move_hints`` only affects rendering; the engine never
    looks at it.
    """

    size: int = DEFAULT_SIZE
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES
    show_legal_move_hints: bool = True
    debug: bool = False
    seed: int | None = None

    def with_hints_toggled(self) -> PuzzleSettings:
        return replace(self, show_legal_move_hints=not self.show_legal_move_hints)
