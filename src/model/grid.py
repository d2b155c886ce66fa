"""Contains the 2D tile grid that holds the complete state of a pipe generation run."""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, TYPE_CHECKING

import numpy as np

from enums import Direction
from model.tile import INITIAL_TILE, Tile

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """A (row, col) index pair identifying a single grid cell."""

    row: int
    col: int


class Grid:
    """A fixed-size 2D array of tile bitmasks addressed by (row, col).

    The grid is created once at full entropy (every cell fully open and unfixed) and is mutated in place by the
    propagator and the collapser until every cell carries the FIXED flag. Once a cell is fixed, its direction bits are
    final; 'set()' refuses to change them.

    Attributes:
        width: The number of columns.
        height: The number of rows.
    """

    width: int
    height: int

    # The tile bitmasks, stored as plain integers with shape (height, width).
    _tiles: NDArray[np.int_]

    def __init__(self, width: int, height: int) -> None:
        """Initializes a grid at full entropy.

        Args:
            width: The number of columns. Must be positive.
            height: The number of rows. Must be positive.

        Raises:
            ValueError: If width or height is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles = np.full((height, width), int(INITIAL_TILE), dtype=np.int_)
        logger.debug("Initialized grid %dx%d", width, height)

    def is_within(self, point: Point) -> bool:
        """Checks if a point lies inside the grid bounds. Never raises."""
        return 0 <= point.row < self.height and 0 <= point.col < self.width

    def get(self, point: Point) -> Tile:
        """Returns the tile at the given point."""
        return Tile(int(self._tiles[point.row, point.col]))

    def set(self, point: Point, tile: Tile) -> None:
        """Replaces the tile at the given point.

        Args:
            point: The cell to update.
            tile: The new tile value.

        Raises:
            ValueError: If the cell is already fixed and the update would change or unfix it.
        """
        current = self.get(point)
        if current & Tile.FIXED and tile != current:
            raise ValueError(f"Cell {tuple(point)} is fixed as {current!r} and cannot become {tile!r}")
        self._tiles[point.row, point.col] = int(tile)

    def is_fixed(self, point: Point) -> bool:
        """Checks if the cell at the given point carries the FIXED flag."""
        return bool(self._tiles[point.row, point.col] & int(Tile.FIXED))

    def get_neighbor_point(self, point: Point, direction: Direction) -> Point | None:
        """Returns the neighboring point in a direction, or None if it lies outside the grid."""
        vector = direction.to_vector()
        neighbor = Point(point.row + vector[0], point.col + vector[1])
        return neighbor if self.is_within(neighbor) else None

    def get_neighbor(self, point: Point, direction: Direction) -> Tile:
        """Returns the neighboring tile in a direction. Out-of-bounds neighbors offer nothing (Tile.EMPTY)."""
        neighbor = self.get_neighbor_point(point, direction)
        if neighbor is None:
            return Tile.EMPTY
        return self.get(neighbor)

    def count_fixed_neighbors(self, point: Point) -> int:
        """Returns the number of in-bounds neighbors that are fixed, regardless of their connections."""
        count = 0
        for direction in Direction:
            neighbor = self.get_neighbor_point(point, direction)
            if neighbor is not None and self.is_fixed(neighbor):
                count += 1
        return count

    def has_fixed_neighbor(self, point: Point) -> bool:
        """Checks if at least one in-bounds neighbor is fixed."""
        return self.count_fixed_neighbors(point) > 0

    def iter_points(self) -> Iterator[Point]:
        """Yields every point of the grid in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield Point(row, col)

    def get_unfixed_points(self) -> list[Point]:
        """Returns all points whose cell is not fixed yet, in row-major order."""
        return [point for point in self.iter_points() if not self.is_fixed(point)]

    def fixed_count(self) -> int:
        """Returns the number of fixed cells."""
        return int(np.count_nonzero(self._tiles & int(Tile.FIXED)))

    def is_complete(self) -> bool:
        """Checks if every cell of the grid is fixed."""
        return bool(np.all(self._tiles & int(Tile.FIXED)))

    def to_array(self) -> NDArray[np.int_]:
        """Returns a copy of the tile bitmasks with shape (height, width)."""
        return self._tiles.copy()
