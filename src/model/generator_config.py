"""Contains the configuration of a pipe generation run."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

import constants
from enums import CollapsePolicy, UpdateMode

logger = logging.getLogger(__name__)


def _random_seed() -> int:
    return random.randint(0, constants.RANDOM_SEED_MAX)


@dataclass
class GeneratorConfig:
    """Settings of a single pipe generation run.

    Attributes:
        width: The number of grid columns.
        height: The number of grid rows.
        seed: Seed of the random number generator driving every random decision. A random seed is drawn if none is
            given, so a run can always be reproduced from its logged seed.
        policy: The collapse policy pairing the entropy measure with the resolution strategy.
        update_mode: Defines how often the grid is written to the output.
        highlight_fixed: If True, fixed cells are colored when rendered to the terminal.
    """

    width: int = constants.GRID_WIDTH_DEFAULT
    height: int = constants.GRID_HEIGHT_DEFAULT
    seed: int = field(default_factory=_random_seed)
    policy: CollapsePolicy = constants.COLLAPSE_POLICY_DEFAULT
    update_mode: UpdateMode = constants.UPDATE_MODE_DEFAULT
    highlight_fixed: bool = True

    @classmethod
    def from_argv(cls, argv: list[str]) -> GeneratorConfig:
        """Creates a configuration from command line arguments.

        The grid size is read from the first two positional arguments (width, then height), and only if both are
        present. Each value that cannot be parsed as an integer silently falls back to its default.

        Args:
            argv: Command line arguments passed to the application (sys.argv).

        Returns:
            The configuration for the requested grid size, with all other settings at their defaults.
        """
        width = constants.GRID_WIDTH_DEFAULT
        height = constants.GRID_HEIGHT_DEFAULT
        if len(argv) > 2:
            width = _parse_int(argv[1], width)
            height = _parse_int(argv[2], height)
        return cls(width=width, height=height)


def _parse_int(value: str, default: int) -> int:
    """Parses an integer argument, returning the default if it is not a valid integer."""
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring non-integer argument %r, using default %d", value, default)
        return default
