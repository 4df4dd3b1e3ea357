import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def _shared_id(grid, idx, last):
    shared = [h for h in grid[idx] if h in last]
    assert len(shared) == 1, f"expected exactly one shared id at position {idx}, found {len(shared)}"
    return shared[0]


def _verify_grid_slice(grid):
    """
    Walking along one row (or column) of a unit grid, every box must share
    exactly one id with the last box beyond what earlier boxes already
    shared, so that the last box ends up with a single unique id.
    """
    grid = [list(box) for box in grid]
    last = grid[-1]
    for i in range(len(grid) - 1):
        common = _shared_id(grid, i, last)
        for j in range(i, len(grid)):
            grid[j].remove(common)
        last = grid[-1]
    assert len(grid[-1]) == 1


@pytest.fixture
def verify_grid_slice():
    return _verify_grid_slice
