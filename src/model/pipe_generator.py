"""Contains the driving loop that alternates propagation and collapse until the pipe grid is complete."""

from __future__ import annotations

import logging
import random
from typing import Callable, TYPE_CHECKING

from enums import GenerationStepType
from model.collapser import Collapser
from model.grid import Grid
from model.propagator import Propagator

if TYPE_CHECKING:
    from model.generator_config import GeneratorConfig
    from model.grid import Point

logger = logging.getLogger(__name__)

GenerationListener = Callable[[Grid, GenerationStepType], None]


class PipeGenerator:
    """Generates a grid of connected pipe tiles.

    Each step runs one propagation sweep over the whole grid followed by one collapse. Every collapse fixes exactly one
    more cell and propagation never unfixes a cell, so the loop ends after at most width * height steps. Listeners
    registered with 'add_listener()' are notified after each propagation sweep, after each collapse and once when the
    grid is complete.

    Attributes:
        config: The settings of the generation run.
        grid: The grid being generated. Complete once every cell is fixed.
        collapse_count: The number of collapses performed so far.
    """

    config: GeneratorConfig
    grid: Grid
    collapse_count: int

    # The random number generator shared by all random decisions of the run, seeded from the config.
    _rng: random.Random
    _propagator: Propagator
    _collapser: Collapser
    # Callables notified after every generation step.
    _listeners: list[GenerationListener]

    def __init__(self, config: GeneratorConfig) -> None:
        """Initializes the generator with a grid at full entropy.

        Args:
            config: The settings of the generation run.
        """
        self.config = config
        self.grid = Grid(config.width, config.height)
        self.collapse_count = 0

        self._rng = random.Random(config.seed)
        self._propagator = Propagator()
        self._collapser = Collapser(config.policy, self._rng)
        self._listeners = []

    def add_listener(self, listener: GenerationListener) -> None:
        """Registers a callable that is notified with the grid and the step type after every generation step."""
        self._listeners.append(listener)

    def step(self) -> Point | None:
        """Runs one propagation sweep followed by one collapse.

        The collapse is skipped if the propagation sweep already fixed the last remaining cells.

        Returns:
            The point of the collapsed cell, or None if no collapse was necessary.
        """
        self._propagator.propagate(self.grid)
        self._notify(GenerationStepType.PROPAGATED)

        if self.grid.is_complete():
            return None

        point = self._collapser.collapse(self.grid)
        self.collapse_count += 1
        self._notify(GenerationStepType.COLLAPSED)
        return point

    def run(self) -> Grid:
        """Runs generation steps until every cell of the grid is fixed.

        A step whose propagation sweep fixes the last cells performs no collapse, so a 1x1 grid finishes with zero
        collapses.

        Returns:
            The completed grid.
        """
        logger.info(
            "Generating %dx%d pipe grid with seed %d and policy %s",
            self.config.width,
            self.config.height,
            self.config.seed,
            self.config.policy.name,
        )

        while not self.grid.is_complete():
            self.step()

        logger.info("Pipe grid complete after %d collapses", self.collapse_count)
        self._notify(GenerationStepType.FINISHED)
        return self.grid

    def _notify(self, step_type: GenerationStepType) -> None:
        for listener in self._listeners:
            listener(self.grid, step_type)
