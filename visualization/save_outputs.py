"""
Centralized output-saving utilities for the vent-line pipeline.

This module provides:
    • save_all_outputs(...)
    • save_grid_text(...)
    • save_heatmap(...)

Uses render/draw modules to visualize and utils.text_io for filesystem handling.
"""

import os
from typing import List

from models.segment import Segment
from rasterization.accumulator import OverlapMap
from utils.geometry import bounding_box
from utils.text_io import save_text, save_image, ensure_output_dir
from visualization.render_grid import build_count_grid, render
from visualization.draw_segments import draw_heatmap, draw_segments
from config import get_active_params


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_grid_text(path: str, overlap_map: OverlapMap):
    """
    Writes the rendered character grid.
    """
    params = get_active_params()
    save_text(path, render(overlap_map, empty_cell=params["EMPTY_CELL"]))


def save_heatmap(path: str, overlap_map: OverlapMap, segments: List[Segment] = None):
    """
    Writes the overlap map as a colorized PNG, optionally with the raw
    segments drawn on top.
    """
    params = get_active_params()
    cell = params["HEATMAP_CELL_PIXELS"]

    vis = draw_heatmap(
        build_count_grid(overlap_map),
        cell_pixels=cell,
        colormap=params["HEATMAP_COLORMAP"]
    )

    if segments and params["DRAW_SEGMENT_OUTLINES"]:
        min_x, min_y, _, _ = bounding_box(overlap_map.keys())
        draw_segments(vis, segments, origin=(min_x, min_y), cell_pixels=cell)

    save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    name: str,
    overlap_map: OverlapMap,
    segments: List[Segment] = None
):
    """
    Saves every diagnostic artifact for one processed input.

    Example output:
        <name>_grid.txt
        <name>_heatmap.png

    Returns the list of written paths.
    """

    ensure_output_dir(output_dir)

    grid_path = os.path.join(output_dir, f"{name}_grid.txt")
    heatmap_path = os.path.join(output_dir, f"{name}_heatmap.png")

    # 1) Character grid
    save_grid_text(grid_path, overlap_map)

    # 2) Heat map
    save_heatmap(heatmap_path, overlap_map, segments)

    return [grid_path, heatmap_path]
