"""
Text and array projections of an overlap map.

This module provides:
    • build_count_grid(overlap_map)
    • render(overlap_map, empty_cell)
"""

import numpy as np

from rasterization.accumulator import OverlapMap
from utils.geometry import bounding_box
from config import get_active_params


def build_count_grid(overlap_map: OverlapMap, max_cells: int = None) -> np.ndarray:
    """
    Projects the overlap map onto a dense 2D count array.

    The array spans the bounding box from the origin (or the most
    negative coordinate) to the largest x / y present, indexed
    [row = y - min_y, column = x - min_x]. Uncovered points are 0.

    The array is dense, so one far-away point makes it huge. Boxes with
    more than max_cells cells (default MAX_GRID_CELLS from config) raise
    ValueError instead of being allocated.

    Returns
    -------
    np.ndarray
        int32 array of shape (height, width); (1, 1) for an empty map.
    """
    if max_cells is None:
        max_cells = get_active_params()["MAX_GRID_CELLS"]

    min_x, min_y, max_x, max_y = bounding_box(overlap_map.keys())
    height, width = max_y - min_y + 1, max_x - min_x + 1
    if height * width > max_cells:
        raise ValueError(
            f"grid of {width}x{height} cells exceeds the {max_cells}-cell limit"
        )

    grid = np.zeros((height, width), dtype=np.int32)
    for coord, count in overlap_map.items():
        grid[coord.y - min_y, coord.x - min_x] = count

    return grid


def render(overlap_map: OverlapMap, empty_cell: str = ".") -> str:
    """
    Renders the overlap map as a character grid, one line per row.

        1.1....11.
        .111...2..
        ..2.1.111.

    Zero cells print as `empty_cell`, others as their decimal count.
    Cells are one character wide until some count exceeds 9; after that
    every cell is right-aligned to the width of the largest count.
    """
    grid = build_count_grid(overlap_map)
    peak = int(grid.max())
    width = len(str(peak)) if peak > 9 else 1

    lines = []
    for row in grid:
        cells = [
            (str(int(v)) if v else empty_cell).rjust(width)
            for v in row
        ]
        lines.append("".join(cells))

    return "\n".join(lines) + "\n"
