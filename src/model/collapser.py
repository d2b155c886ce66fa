"""Implements entropy scoring, cell selection and cell resolution of the pipe collapse algorithm."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from constants import MAX_ENTROPY, SIDE_DROP_PROBABILITY
from enums import CollapsePolicy, Direction
from model.tile import Tile, count_open_sides, get_directions, remove_flags, tile_for_direction

if TYPE_CHECKING:
    import random

    from model.grid import Grid, Point

logger = logging.getLogger(__name__)


class Collapser:
    """Fixes exactly one unfixed cell of the grid per call.

    The next cell is chosen among the boundary cells (unfixed cells with at least one fixed neighbor) that share the
    lowest entropy. If no boundary cell exists, which only happens before the first cell is fixed, a random unfixed
    cell is chosen instead. The chosen cell is then resolved and marked as fixed.

    How the entropy is scored and how a cell is resolved both depend on the collapse policy:

    - CollapsePolicy.NEIGHBOR_AWARE: entropy is 4 minus the number of fixed neighbors. Resolution flips a coin for
      each side that faces a fixed neighbor and clears that side on heads.
    - CollapsePolicy.INDEPENDENT_RANDOM: entropy is the number of open sides of the cell. Resolution intersects the
      cell with a random mask that contains each side with probability 1/2.

    Neither policy checks the resolved pattern against its fixed neighbors. A kept side facing a fixed neighbor without
    the matching side stays as a dangling connection, since the algorithm never backtracks.

    Attributes:
        policy: The collapse policy pairing the entropy measure with the resolution strategy.
    """

    policy: CollapsePolicy

    # The random number generator used for every random decision of the collapser.
    _rng: random.Random

    def __init__(self, policy: CollapsePolicy, rng: random.Random) -> None:
        """Initializes the collapser.

        Args:
            policy: The collapse policy pairing the entropy measure with the resolution strategy.
            rng: The random number generator used for every random decision. Seed it to make runs reproducible.
        """
        self.policy = policy
        self._rng = rng

    def compute_entropy(self, grid: Grid, point: Point) -> int:
        """Calculates the entropy score of a single cell under the current policy. Lower scores are collapsed first."""
        match self.policy:
            case CollapsePolicy.NEIGHBOR_AWARE:
                return MAX_ENTROPY - grid.count_fixed_neighbors(point)
            case CollapsePolicy.INDEPENDENT_RANDOM:
                return count_open_sides(grid.get(point))

    def find_min_entropy_points(self, grid: Grid) -> tuple[int | None, list[Point]]:
        """Finds all boundary cells that share the lowest entropy.

        Only unfixed cells with at least one fixed neighbor are eligible. A cell without any fixed neighbor is never
        part of the result, even if its score equals the lowest score of the grid.

        Args:
            grid: The grid to inspect.

        Returns:
            A tuple of the lowest entropy and the points reaching it, in row-major order. If there is no boundary cell,
                (None, []) is returned.
        """
        min_entropy: int | None = None
        min_entropy_points: list[Point] = []

        for point in grid.iter_points():
            if grid.is_fixed(point) or not grid.has_fixed_neighbor(point):
                continue

            entropy = self.compute_entropy(grid, point)
            if min_entropy is None or entropy < min_entropy:
                min_entropy = entropy
                min_entropy_points = []

            if entropy == min_entropy:
                min_entropy_points.append(point)

        return min_entropy, min_entropy_points

    def collapse(self, grid: Grid) -> Point:
        """Chooses and resolves the next cell, increasing the number of fixed cells by exactly one.

        Args:
            grid: The grid to collapse a cell of. It is mutated in place.

        Returns:
            The point of the cell that was resolved.

        Raises:
            RuntimeError: If every cell of the grid is already fixed.
        """
        min_entropy, min_entropy_points = self.find_min_entropy_points(grid)

        if min_entropy_points:
            point = self._rng.choice(min_entropy_points)
            logger.debug(
                "Collapsing %s out of %d candidates with entropy %d", tuple(point), len(min_entropy_points), min_entropy
            )
        else:
            # Only happens before the first cell is fixed.
            unfixed_points = grid.get_unfixed_points()
            if not unfixed_points:
                raise RuntimeError("Cannot collapse a grid whose cells are all fixed")
            point = self._rng.choice(unfixed_points)
            logger.debug("No boundary cell found, collapsing random cell %s", tuple(point))

        self.resolve(grid, point)
        return point

    def resolve(self, grid: Grid, point: Point) -> None:
        """Resolves an unfixed cell to its final pattern under the current policy and marks it as fixed.

        Args:
            grid: The grid containing the cell. It is mutated in place.
            point: The point of the cell to resolve.
        """
        tile = grid.get(point)

        match self.policy:
            case CollapsePolicy.NEIGHBOR_AWARE:
                for direction in Direction:
                    neighbor = grid.get_neighbor_point(point, direction)
                    if neighbor is not None and grid.is_fixed(neighbor) and self._drop_side():
                        tile = remove_flags(tile, tile_for_direction(direction))
            case CollapsePolicy.INDEPENDENT_RANDOM:
                random_mask = Tile.EMPTY
                for direction in Direction:
                    if not self._drop_side():
                        random_mask |= tile_for_direction(direction)
                tile &= random_mask

        grid.set(point, tile | Tile.FIXED)
        logger.debug("Resolved %s to %r", tuple(point), get_directions(tile))

    def _drop_side(self) -> bool:
        """Flips the coin deciding whether a single side is dropped."""
        return self._rng.random() < SIDE_DROP_PROBABILITY
