"""
Visualization Tools

Provides diagnostic views of an overlap map:
- Character grid
- Count array
- Heat map with optional segment outlines
"""

from .render_grid import build_count_grid, render
from .draw_segments import draw_heatmap, draw_segments
from .save_outputs import save_all_outputs, save_grid_text, save_heatmap

__all__ = [
    "build_count_grid",
    "render",
    "draw_heatmap",
    "draw_segments",
    "save_all_outputs",
    "save_grid_text",
    "save_heatmap",
]
