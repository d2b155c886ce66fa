"""Implements the constraint propagation sweep of the pipe collapse algorithm."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from enums import Direction
from model.tile import Tile, get_directions, remove_flags, tile_for_direction

if TYPE_CHECKING:
    from model.grid import Grid

logger = logging.getLogger(__name__)


class Propagator:
    """Prunes connections that the neighboring cells cannot accept.

    A single call performs one synchronous row-major sweep over the grid. For every unfixed cell, each open side is
    cleared unless the neighbor on that side offers the opposite side (out-of-bounds neighbors offer nothing). A cell
    left without any open side is walled off and becomes fixed. The sweep works in place, so cells visited later see
    the changes made to cells visited earlier, but not the other way round; convergence happens across repeated
    calls of the generation loop.
    """

    def propagate(self, grid: Grid) -> None:
        """Runs one propagation sweep over the whole grid, mutating it in place.

        Args:
            grid: The grid to prune.
        """
        cleared_sides = 0
        walled_off_cells = 0

        for point in grid.iter_points():
            if grid.is_fixed(point):
                continue

            tile = grid.get(point)
            for direction in Direction:
                side = tile_for_direction(direction)
                if not tile & side:
                    continue

                opposite_side = tile_for_direction(direction.reverse())
                if not grid.get_neighbor(point, direction) & opposite_side:
                    tile = remove_flags(tile, side)
                    cleared_sides += 1

            if get_directions(tile) == Tile.EMPTY:
                tile |= Tile.FIXED
                walled_off_cells += 1

            grid.set(point, tile)

        logger.debug("Propagation cleared %d sides and walled off %d cells", cleared_sides, walled_off_cells)
