import numpy as np
import pytest

from models import Coordinate
from rasterization import accumulate
from visualization import build_count_grid, render


AXIS_ONLY_GRID = """\
.......1..
..1....1..
..1....1..
.......1..
.112111211
..........
..........
..........
..........
222111....
"""

FULL_GRID = """\
1.1....11.
.111...2..
..2.1.111.
...1.2.2..
.112313211
...1.2....
..1...1...
.1.....1..
1.......1.
222111....
"""


def test_render_sample_axis_only(sample_segments):
    assert render(accumulate(sample_segments, include_diagonals=False)) == AXIS_ONLY_GRID


def test_render_sample_with_diagonals(sample_segments):
    assert render(accumulate(sample_segments)) == FULL_GRID


def test_render_empty_map():
    assert render({}) == ".\n"


def test_render_custom_empty_cell():
    assert render({Coordinate(1, 0): 1}, empty_cell="-") == "-1\n"


def test_render_widens_cells_above_nine():
    overlap = {Coordinate(0, 0): 12, Coordinate(1, 0): 3}
    assert render(overlap) == "12 3\n"
    assert render({Coordinate(1, 1): 10}) == " . .\n .10\n"


def test_count_grid_shape_and_values():
    overlap = {Coordinate(2, 1): 4, Coordinate(0, 0): 1}
    grid = build_count_grid(overlap)
    assert grid.shape == (2, 3)
    assert grid[1, 2] == 4
    assert grid[0, 0] == 1
    assert int(np.count_nonzero(grid)) == 2


def test_count_grid_includes_negative_coordinates():
    grid = build_count_grid({Coordinate(-1, -2): 2})
    assert grid.shape == (3, 2)
    assert grid[0, 0] == 2


def test_count_grid_refuses_huge_bounding_box():
    with pytest.raises(ValueError, match="exceeds"):
        build_count_grid({Coordinate(100000, 100000): 1})


def test_count_grid_explicit_cell_limit():
    overlap = {Coordinate(2, 2): 1}
    assert build_count_grid(overlap, max_cells=9).shape == (3, 3)
    with pytest.raises(ValueError):
        build_count_grid(overlap, max_cells=8)


def test_render_uses_configured_cell_limit(monkeypatch):
    import config

    monkeypatch.setattr(config, "MAX_GRID_CELLS", 4)
    with pytest.raises(ValueError):
        render({Coordinate(2, 2): 1})
