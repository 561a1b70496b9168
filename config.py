"""
Configuration file for the vent-line overlap system.

Contains both AXIS-ONLY and FULL (with 45° diagonals) parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to False to count only horizontal and vertical vent lines
INCLUDE_DIAGONALS = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_PATH = "inputs/vents.txt"
OUTPUT_FOLDER = "output"

# Write <name>_grid.txt and <name>_heatmap.png next to the result
SAVE_OUTPUTS = False


# ===============================================================
# AXIS-ONLY PARAMETERS
# ===============================================================

AXIS_ONLY = {
    "INCLUDE_DIAGONALS": False,
}


# ===============================================================
# FULL PARAMETERS
# ===============================================================

FULL = {
    "INCLUDE_DIAGONALS": True,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

DANGER_THRESHOLD = 2              # points hit by at least this many lines are dangerous

EMPTY_CELL = "."
MAX_GRID_CELLS = 10_000_000       # refuse to project larger bounding boxes

HEATMAP_CELL_PIXELS = 8           # each lattice point becomes an NxN block
HEATMAP_COLORMAP = "JET"          # name of a cv2.COLORMAP_* constant
DRAW_SEGMENT_OUTLINES = False     # overlay the raw segments on the heat map


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_EMPTY = (0, 0, 0)           # uncovered points - black
COLOR_SEGMENT = (255, 255, 255)   # segment outlines - white


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by main and the output writers so they only import one dictionary.
    """

    base = {
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "SAVE_OUTPUTS": SAVE_OUTPUTS,
        "DANGER_THRESHOLD": DANGER_THRESHOLD,
        "EMPTY_CELL": EMPTY_CELL,
        "MAX_GRID_CELLS": MAX_GRID_CELLS,
        "HEATMAP_CELL_PIXELS": HEATMAP_CELL_PIXELS,
        "HEATMAP_COLORMAP": HEATMAP_COLORMAP,
        "DRAW_SEGMENT_OUTLINES": DRAW_SEGMENT_OUTLINES,
    }

    # Merge in axis-only or full mode values
    if INCLUDE_DIAGONALS:
        base.update(FULL)
    else:
        base.update(AXIS_ONLY)

    return base
