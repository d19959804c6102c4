"""
Module: sheet

Purpose:
    Tile copy engine: compose tiles into a sheet, decompose a sheet into
    tiles, and extract arbitrary regions.

Key Functions:
    - compose(): Tiles -> sheet
    - decompose(): Sheet -> tiles
    - extract(): Clamped region copy
"""

from .cropper import (
    all_same_size,
    extract,
    largest_dimensions,
    smallest_dimensions,
)
from .composer import ProgressCallback, apply_color_key, compose, load_tiles
from .decomposer import cell_size_for, decompose

__all__ = [
    "ProgressCallback",
    "all_same_size",
    "apply_color_key",
    "cell_size_for",
    "compose",
    "decompose",
    "extract",
    "largest_dimensions",
    "load_tiles",
    "smallest_dimensions",
]
