"""
Visualization utilities for rendering vent lines and overlap counts.

This module provides:
    • draw_heatmap(grid, cell_pixels, colormap)
    • draw_segments(image, segments, origin, cell_pixels, color, thickness)

It is used by:
    - visualization.save_outputs
"""

from typing import List, Tuple

import cv2
import numpy as np

from models.segment import Segment
from config import COLOR_EMPTY, COLOR_SEGMENT


# ---------------------------------------------------------------------
#  HEAT MAP: one colored block per lattice point
# ---------------------------------------------------------------------

def draw_heatmap(
    grid: np.ndarray,
    cell_pixels: int = 8,
    colormap: str = "JET"
):
    """
    Colorizes a count grid into a BGR image.

    Counts are scaled so the busiest point maps to the top of the
    colormap; uncovered points stay COLOR_EMPTY. Each point becomes a
    cell_pixels x cell_pixels block (nearest-neighbour upscaling).

    Args:
        grid: 2D count array from build_count_grid
        cell_pixels: block size per lattice point
        colormap: suffix of a cv2.COLORMAP_* constant, e.g. "JET"
    """
    peak = int(grid.max())
    if peak > 0:
        scaled = (grid.astype(np.float32) * (255.0 / peak)).astype(np.uint8)
    else:
        scaled = np.zeros(grid.shape, dtype=np.uint8)

    image = cv2.applyColorMap(scaled, getattr(cv2, f"COLORMAP_{colormap.upper()}"))
    image[grid == 0] = COLOR_EMPTY

    h, w = grid.shape
    return cv2.resize(
        image,
        (w * cell_pixels, h * cell_pixels),
        interpolation=cv2.INTER_NEAREST
    )


# ---------------------------------------------------------------------
#  OUTLINES: draw raw segments over an upscaled image
# ---------------------------------------------------------------------

def draw_segments(
    image,
    segments: List[Segment],
    origin: Tuple[int, int] = (0, 0),
    cell_pixels: int = 8,
    color: Tuple[int, int, int] = COLOR_SEGMENT,
    thickness: int = 1
):
    """
    Draws each segment from cell centre to cell centre.

    Args:
        image: BGR numpy array (modified in-place)
        segments: list of Segment objects
        origin: (min_x, min_y) of the grid the image was built from
        cell_pixels: block size used for the image
        color: (B, G, R)
        thickness: pixel width
    """
    ox, oy = origin
    half = cell_pixels // 2

    def to_pixel(c):
        return ((c.x - ox) * cell_pixels + half, (c.y - oy) * cell_pixels + half)

    for seg in segments:
        cv2.line(
            image,
            to_pixel(seg.start),
            to_pixel(seg.end),
            color,
            thickness
        )
    return image
