import numpy as np
import pytest

import constants
from enums import CollapsePolicy, GenerationStepType
from model.generator_config import GeneratorConfig
from model.grid import Point
from model.pipe_generator import PipeGenerator
from model.propagator import Propagator
from model.tile import DIRECTION_MASK, Tile

SIZES = [(1, 1), (2, 1), (1, 2), (1, 6), (5, 5), (7, 3), (20, 10)]
FIXED = int(Tile.FIXED)
DIRECTIONS = int(DIRECTION_MASK)


def make_generator(width, height, seed=1234, policy=CollapsePolicy.NEIGHBOR_AWARE):
    return PipeGenerator(GeneratorConfig(width=width, height=height, seed=seed, policy=policy))


@pytest.mark.parametrize("policy", list(CollapsePolicy))
@pytest.mark.parametrize("width, height", SIZES)
@pytest.mark.parametrize("seed", [0, 1, 99])
def test_generation_terminates_with_every_cell_fixed(width, height, seed, policy):
    generator = make_generator(width, height, seed, policy)

    grid = generator.run()

    assert grid.is_complete()
    assert grid.fixed_count() == width * height
    assert generator.collapse_count <= width * height


def test_single_cell_grid_is_walled_off_by_propagation():
    generator = make_generator(1, 1)

    grid = generator.run()

    assert grid.to_array().tolist() == [[FIXED]]
    assert generator.collapse_count == 0


@pytest.mark.parametrize("seed", range(6))
def test_two_cell_grid_prunes_against_first_fixed_cell(seed):
    generator = make_generator(2, 1, seed=seed)
    grid = generator.grid

    fixed_point = generator.step()
    free_point = Point(0, 1 - fixed_point.col)
    toward_fixed = Tile.LEFT if free_point.col == 1 else Tile.RIGHT
    offered = Tile.RIGHT if free_point.col == 1 else Tile.LEFT

    # The first sweep leaves each cell with only the side facing the other cell
    assert grid.get(free_point) == toward_fixed

    Propagator().propagate(grid)

    if grid.get(fixed_point) & offered:
        assert grid.get(free_point) == toward_fixed
    else:
        assert grid.get(free_point) == Tile.EMPTY | Tile.FIXED


@pytest.mark.parametrize("policy", list(CollapsePolicy))
def test_invariants_hold_after_every_step(policy):
    generator = make_generator(8, 6, seed=42, policy=policy)
    snapshots = []
    generator.add_listener(lambda grid, step_type: snapshots.append((step_type, grid.to_array())))

    previous = generator.grid.to_array()
    generator.run()

    for step_type, current in snapshots:
        previous_fixed = (previous & FIXED) != 0
        current_fixed = (current & FIXED) != 0

        assert not np.any(previous_fixed & ~current_fixed), "fixed cells must stay fixed"
        assert not np.any(current & DIRECTIONS & ~previous), "cleared sides must stay cleared"
        assert np.array_equal(current[previous_fixed], previous[previous_fixed]), "fixed cells must not change"

        if step_type == GenerationStepType.PROPAGATED:
            assert np.all(current_fixed[(current & DIRECTIONS) == 0]), "empty cells must be fixed"
        elif step_type == GenerationStepType.COLLAPSED:
            assert current_fixed.sum() == previous_fixed.sum() + 1

        previous = current


def test_listeners_receive_every_step():
    generator = make_generator(6, 4, seed=8)
    step_types = []
    generator.add_listener(lambda grid, step_type: step_types.append(step_type))

    generator.run()

    assert step_types[0] == GenerationStepType.PROPAGATED
    assert step_types[-1] == GenerationStepType.FINISHED
    assert step_types.count(GenerationStepType.FINISHED) == 1
    assert step_types.count(GenerationStepType.COLLAPSED) == generator.collapse_count
    # Propagation always comes first within a step
    for earlier, later in zip(step_types, step_types[1:]):
        if later == GenerationStepType.COLLAPSED:
            assert earlier == GenerationStepType.PROPAGATED


@pytest.mark.parametrize("policy", list(CollapsePolicy))
def test_same_seed_same_grid(policy):
    grid_a = make_generator(20, 10, seed=2024, policy=policy).run()
    grid_b = make_generator(20, 10, seed=2024, policy=policy).run()

    assert np.array_equal(grid_a.to_array(), grid_b.to_array())


def test_different_seeds_change_the_grid():
    grids = [make_generator(20, 10, seed=seed).run().to_array() for seed in range(4)]

    assert any(not np.array_equal(grids[0], other) for other in grids[1:])


def test_random_seed_is_drawn_when_not_given():
    config = GeneratorConfig()

    assert 0 <= config.seed <= constants.RANDOM_SEED_MAX
    assert (config.width, config.height) == (constants.GRID_WIDTH_DEFAULT, constants.GRID_HEIGHT_DEFAULT)
    assert config.policy == CollapsePolicy.NEIGHBOR_AWARE
