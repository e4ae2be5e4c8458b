#!/usr/bin/env python3
"""Fifteen: sliding tile puzzle.

Usage::

    fifteen                      # Pygame canvas, 4×4
    fifteen -f rich -s 3         # Rich terminal, 3×3
    fifteen --seed 7 --no-hints  # repeatable shuffle, no move highlighting
    fifteen --debug              # log engine diagnostics
"""

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer

from puzzlecore.models.settings import DEFAULT_SHUFFLE_MOVES, DEFAULT_SIZE, PuzzleSettings


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    pygame = "pygame"
    rich = "rich"


_RUNNERS = {
    Frontend.pygame: "puzzleview.gui.pygame.app",
    Frontend.rich: "puzzleview.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def build_settings(
    size: int = DEFAULT_SIZE,
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES,
    hints: bool = True,
    seed: Optional[int] = None,
    debug: bool = False,
) -> PuzzleSettings:
    return PuzzleSettings(
        size=size,
        shuffle_moves=shuffle_moves,
        show_legal_move_hints=hints,
        debug=debug,
        seed=seed,
    )


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.pygame, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    shuffle_moves: int = typer.Option(
        DEFAULT_SHUFFLE_MOVES, "-m", "--shuffle-moves",
        min=0,
        help="Random slides applied when shuffling.",
    ),
    hints: bool = typer.Option(
        True, "--hints/--no-hints",
        help="Highlight tiles that can slide.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a repeatable shuffle.",
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Log engine diagnostics.",
    ),
) -> None:
    """Fifteen: sliding tile puzzle."""
    _configure_logging(debug)
    settings = build_settings(size, shuffle_moves, hints, seed, debug)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(settings)


if __name__ == "__main__":
    app()
