"""Serves as the entry point and initializer for the pipe generator."""

from __future__ import annotations

import sys
from typing import TextIO, TYPE_CHECKING

from enums import GenerationStepType, UpdateMode
from logging_config import setup_logging
from model.generator_config import GeneratorConfig
from model.pipe_generator import PipeGenerator
from view.text_renderer import render_grid

if TYPE_CHECKING:
    from model.grid import Grid


class MainApp:
    """The application initializer and integrator for the pipe generator.

    It creates the generator from the command line arguments and connects it to the terminal output according to the
    configured update mode.
    """

    # The generator producing the pipe grid.
    _generator: PipeGenerator
    # The stream the rendered grids are written to.
    _output: TextIO

    def __init__(self, argv: list[str], output: TextIO | None = None) -> None:
        """Initializes the generator and connects it to the output.

        Args:
            argv: Command line arguments passed to the application (sys.argv).
            output: The stream the rendered grids are written to. Defaults to standard output.
        """
        config = GeneratorConfig.from_argv(argv)
        self._generator = PipeGenerator(config)
        self._output = output if output is not None else sys.stdout
        self._generator.add_listener(self.on_generation_step)

    @property
    def generator(self) -> PipeGenerator:
        """The generator producing the pipe grid."""
        return self._generator

    def on_generation_step(self, grid: Grid, step_type: GenerationStepType) -> None:
        """Writes the grid to the output if the update mode asks for this step type."""
        match self._generator.config.update_mode:
            case UpdateMode.ON_EACH_STEP:
                if step_type == GenerationStepType.FINISHED:
                    return
            case UpdateMode.ONLY_WHEN_DONE:
                if step_type != GenerationStepType.FINISHED:
                    return

        print(render_grid(grid, self._generator.config.highlight_fixed), file=self._output)

    def exec(self) -> int:
        """Runs the generation until the grid is complete.

        Returns:
            The exit code of the application.
        """
        self._generator.run()
        return 0


def main() -> int:
    setup_logging()
    app = MainApp(sys.argv)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
