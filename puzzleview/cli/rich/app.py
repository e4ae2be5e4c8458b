"""Rich terminal frontend.

Renders the engine's grid as a Rich table and maps arrow keys to slides.
Legal moves are highlighted while hints are on.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from puzzlecore.engine.gameplay import PuzzleEngine
from puzzlecore.models.board import EMPTY, Direction
from puzzlecore.models.settings import PuzzleSettings
from puzzleview.cli.input_handler import get_key

LOGGER = logging.getLogger("puzzleview.rich")

console = Console()

_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(engine: PuzzleEngine, show_hints: bool) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    size = engine.size
    width = len(str(size * size - 1))
    hinted = set(engine.legal_moves()) if show_hints else set()
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(engine.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == EMPTY:
                cells.append("[dim]·[/dim]")
            elif (r, c) in hinted:
                cells.append(f"[bold blue]{val:>{width}}[/bold blue]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screen -------------------------------------------------------------------


def _draw(engine: PuzzleEngine, settings: PuzzleSettings) -> None:
    console.clear()

    size = engine.size
    parts = [Align.center(render_board(engine, settings.show_legal_move_hints))]
    if engine.solved:
        parts.append(Align.center(Text("\n  SOLVED!\n", style="bold green")))

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(engine.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append(
        f"  hints ({'on' if settings.show_legal_move_hints else 'off'})   ", style="dim"
    )
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Fifteen  {size}×{size}[/bold cyan]",
        border_style="bold green" if engine.solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    console.print(Align.center(controls))


# -- diagnostics --------------------------------------------------------------


def _show_debug(engine: PuzzleEngine) -> None:
    """Print the board diagnostics and hold them on screen until a key is pressed."""
    snapshot = engine.debug_snapshot()
    LOGGER.debug("Board debug:\n%s", snapshot)
    console.print(
        Panel(
            Text(snapshot),
            title="[bold yellow]Board debug[/bold yellow]",
            border_style="yellow",
            padding=(0, 2),
        )
    )
    console.print(Align.center(Text("  Press any key to continue.", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _play(settings: PuzzleSettings) -> None:
    engine = PuzzleEngine.from_settings(settings)

    while True:
        _draw(engine, settings)
        key = get_key()

        if key in _DIRECTIONS:
            engine.move(_DIRECTIONS[key])
        elif key == "reset":
            engine.reset()
        elif key == "hints":
            settings = settings.with_hints_toggled()
        elif key == "debug":
            _show_debug(engine)
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(settings: PuzzleSettings) -> None:
    """Launch the Rich terminal frontend."""
    _play(settings)
