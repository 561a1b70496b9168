"""
File I/O utilities for the vent-line pipeline.

This module provides:
    • read_text(path)
    • load_segments(path)
    • extract_name(path)
    • ensure_output_dir(path)
    • save_text(path, text)
    • save_image(path, image)

Handles all filesystem interaction so the core stays free of I/O.
"""

import os
from typing import List

import cv2
import numpy as np

from models.segment import Segment, parse_segments


# -------------------------------------------------------------------------
#  INPUT
# -------------------------------------------------------------------------

def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def load_segments(path: str) -> List[Segment]:
    """
    Reads and parses a vent-line file. Parse errors propagate.

    Example:
        segments = load_segments('inputs/vents.txt')
    """
    return parse_segments(read_text(path))


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_name(path: str) -> str:
    """
    Base filename without extension, used to name output artifacts.

    Example:
        'inputs/day5.txt' → 'day5'
    """
    return os.path.splitext(os.path.basename(path))[0] or "vents"


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def save_text(path: str, text: str):
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)


def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OSError(f"could not write image to {path}")
