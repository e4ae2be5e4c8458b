"""Pixel ↔ grid arithmetic for the canvas frontend."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardLayout:
    """Square board of ``size`` tiles, ``tile_px`` wide, drawn from ``origin``."""

    size: int
    tile_px: int
    origin: tuple[int, int] = (0, 0)

    @classmethod
    def fit(cls, size: int, board_px: int, origin: tuple[int, int] = (0, 0)) -> BoardLayout:
        """Largest whole-pixel tiles that fit *size* columns into *board_px*."""
        return cls(size=size, tile_px=max(1, board_px // size), origin=origin)

    @property
    def total_px(self) -> int:
        return self.size * self.tile_px

    def cell_at(self, x: int, y: int) -> tuple[int, int] | None:
        """Grid (row, col) under pixel (x, y), or None outside the board."""
        ox, oy = self.origin
        dx, dy = x - ox, y - oy
        if dx < 0 or dy < 0:
            return None
        row, col = dy // self.tile_px, dx // self.tile_px
        if row >= self.size or col >= self.size:
            return None
        return row, col

    def tile_origin(self, row: int, col: int) -> tuple[int, int]:
        ox, oy = self.origin
        return ox + col * self.tile_px, oy + row * self.tile_px
