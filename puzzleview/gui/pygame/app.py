"""Pygame canvas frontend.

Draws the board from the engine's read-only state and forwards clicks and
key presses to it.  All puzzle rules live in ``puzzlecore``.
"""

from __future__ import annotations

import logging

import pygame

from puzzlecore.engine.gameplay import PuzzleEngine
from puzzlecore.models.board import EMPTY, Direction
from puzzlecore.models.settings import PuzzleSettings
from puzzleview.gui.layout import BoardLayout

LOGGER = logging.getLogger("puzzleview.pygame")

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
BOARD_PX = 500
FOOTER_H = 36
TILE_INSET = 2

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class PygameApp:
    def __init__(self, settings: PuzzleSettings) -> None:
        self._settings = settings
        self._engine = PuzzleEngine.from_settings(settings)
        self._layout = BoardLayout.fit(settings.size, BOARD_PX)

        pygame.init()
        side = self._layout.total_px
        self._surf = pygame.display.set_mode((side, side + FOOTER_H))
        pygame.display.set_caption("Fifteen")
        self._clock = pygame.time.Clock()

        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._layout.tile_px // 3), bold=True
        )
        self._f_big = pygame.font.SysFont("Helvetica", 30, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._f_mono = pygame.font.SysFont("Courier", 13)
        self._show_debug = False

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        engine = self._engine
        layout = self._layout
        tpx = layout.tile_px
        hinted = set(engine.legal_moves()) if self._settings.show_legal_move_hints else set()

        pygame.draw.rect(
            self._surf, COL_MANTLE, pygame.Rect(0, 0, layout.total_px, layout.total_px)
        )

        for r, row in enumerate(engine.tiles):
            for c, val in enumerate(row):
                if val == EMPTY:
                    continue
                x, y = layout.tile_origin(r, c)
                rect = pygame.Rect(
                    x + TILE_INSET, y + TILE_INSET, tpx - 2 * TILE_INSET, tpx - 2 * TILE_INSET
                )
                col = COL_BLUE if (r, c) in hinted else COL_SURFACE0
                pygame.draw.rect(self._surf, col, rect, border_radius=5)
                pygame.draw.rect(self._surf, COL_SURFACE1, rect, width=1, border_radius=5)
                lbl = self._f_tile.render(str(val), True, COL_TEXT)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )

        if engine.solved:
            lbl = self._f_big.render("SOLVED!", True, COL_GREEN)
            self._surf.blit(
                lbl,
                (
                    (layout.total_px - lbl.get_width()) // 2,
                    (layout.total_px - lbl.get_height()) // 2,
                ),
            )

        if self._show_debug:
            self._draw_debug()

        footer = (
            f"Moves: {engine.moves}     R  reset     "
            f"H  hints {'on' if self._settings.show_legal_move_hints else 'off'}"
            "     Esc  quit"
        )
        lbl = self._f_small.render(footer, True, COL_OVERLAY0)
        self._surf.blit(
            lbl,
            (
                (layout.total_px - lbl.get_width()) // 2,
                layout.total_px + (FOOTER_H - lbl.get_height()) // 2,
            ),
        )

    def _draw_debug(self) -> None:
        """Overlay the engine diagnostics in the top-left corner."""
        lines = self._engine.debug_snapshot().expandtabs(4).splitlines()
        rendered = [self._f_mono.render(line, True, COL_TEXT) for line in lines]
        w = max(lbl.get_width() for lbl in rendered) + 16
        h = sum(lbl.get_height() for lbl in rendered) + 16
        panel = pygame.Surface((w, h), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 200))
        y = 8
        for lbl in rendered:
            panel.blit(lbl, (8, y))
            y += lbl.get_height()
        self._surf.blit(panel, (8, 8))

    # ── event handling ──────────────────────────────────────────────────────

    def _on_event(self, ev: pygame.event.Event) -> bool:
        engine = self._engine
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            cell = self._layout.cell_at(*ev.pos)
            if cell is not None:
                engine.player_move(*cell)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEY_DIRECTIONS:
                engine.move(_KEY_DIRECTIONS[ev.key])
            elif ev.key == pygame.K_r:
                engine.reset()
            elif ev.key == pygame.K_h:
                self._settings = self._settings.with_hints_toggled()
            elif ev.key == pygame.K_d:
                self._show_debug = not self._show_debug
                LOGGER.debug("Board debug:\n%s", engine.debug_snapshot())
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._on_event(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(settings: PuzzleSettings) -> None:
    """Launch the Pygame canvas."""
    app = PygameApp(settings)
    app.run_loop()
