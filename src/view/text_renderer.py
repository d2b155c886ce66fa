"""Renders tiles and pipe grids as box-drawing text for the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from constants import ANSI_FIXED_COLOR, ANSI_RESET
from model.tile import Tile, get_glyph

if TYPE_CHECKING:
    from model.grid import Grid


def render_tile(tile: Tile, highlight_fixed: bool = False) -> str:
    """Returns the glyph of a single tile.

    Args:
        tile: The tile to render.
        highlight_fixed: If True, a fixed tile is wrapped in ANSI color codes. This is purely presentational.

    Returns:
        The glyph, optionally wrapped in color codes.
    """
    glyph = get_glyph(tile)
    if highlight_fixed and tile & Tile.FIXED:
        return ANSI_FIXED_COLOR + glyph + ANSI_RESET
    return glyph


def render_grid(grid: Grid, highlight_fixed: bool = False) -> str:
    """Returns the text representation of a grid: one glyph per cell and a newline after every row."""
    glyphs = [render_tile(grid.get(point), highlight_fixed) for point in grid.iter_points()]
    rows = [glyphs[row * grid.width : (row + 1) * grid.width] for row in range(grid.height)]
    return "".join("".join(row) + "\n" for row in rows)
