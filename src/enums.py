"""Contains all global enumeration classes used throughout the project."""

from __future__ import annotations

from enum import Enum


class CollapsePolicy(Enum):
    """Defines how cells are scored and resolved when the pipe grid is collapsed.

    Each policy pairs an entropy measure with a matching resolution strategy. The two are never mixed.
    """

    NEIGHBOR_AWARE = "Neighbor Aware (Default)"
    """Entropy is 4 minus the number of fixed neighbors. Resolution flips a coin for each side facing a fixed
    neighbor and clears that side on heads."""
    INDEPENDENT_RANDOM = "Independent Random"
    """Entropy is the number of open sides of the cell. Resolution intersects the cell with a fresh random mask."""


class UpdateMode(Enum):
    """Defines the frequency at which the grid is written to the output."""

    ON_EACH_STEP = "On Each Step (Default)"
    """Writes the grid after every propagation sweep and after every collapse."""
    ONLY_WHEN_DONE = "Only When Done"
    """Writes the grid once when every cell is fixed."""


class GenerationStepType(Enum):
    """Defines the types of update notifications the pipe generator sends to its listeners."""

    PROPAGATED = 0
    """Sent after a propagation sweep over the whole grid."""
    COLLAPSED = 1
    """Sent after a single cell has been collapsed."""
    FINISHED = 2
    """Sent once after every cell of the grid is fixed."""


class Direction(Enum):
    """Defines the cardinal directions used for tile connections and neighbor lookup."""

    LEFT = 0
    """Left direction."""
    RIGHT = 1
    """Right direction."""
    UP = 2
    """Upward direction."""
    DOWN = 3
    """Downward direction."""

    def reverse(self) -> Direction:
        """Returns the opposite direction of the current direction."""
        match self:
            case Direction.LEFT:
                return Direction.RIGHT
            case Direction.RIGHT:
                return Direction.LEFT
            case Direction.UP:
                return Direction.DOWN
            case Direction.DOWN:
                return Direction.UP

    def to_vector(self) -> tuple[int, int]:
        """Returns the (row, col) vector representation for the direction."""
        match self:
            case Direction.LEFT:
                return (0, -1)
            case Direction.RIGHT:
                return (0, 1)
            case Direction.UP:
                return (-1, 0)
            case Direction.DOWN:
                return (1, 0)
