"""
Module: sheet.decomposer

Purpose:
    Slice a sheet back into one tile per grid cell.

    Cell size is the sheet size floor-divided by the grid, so any remainder
    columns at the right edge and rows at the bottom are left out of every
    tile. Tiles come out in the same row-major order the composer places
    them, which makes compose -> decompose order-preserving.

Key Functions:
    - cell_size_for(): Per-cell size of a sheet for a grid
    - decompose(): Sheet + GridShape -> ordered tiles

Dependencies:
    - PIL: Image type
    - sheet.cropper: extract()
    - sheet.composer: ProgressCallback

Used By:
    - controller.unpack_sprite_sheet()
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PIL import Image

from spritesheet_toolkit.core.models import GridShape, Point

from .composer import ProgressCallback
from .cropper import extract

logger = logging.getLogger(__name__)


def cell_size_for(sheet: Image.Image, grid: GridShape) -> Tuple[int, int]:
    """
    Size of one cell when sheet is divided into grid.

    Example:
        >>> cell_size_for(Image.new("RGBA", (100, 100)), GridShape(3, 3))
        (33, 33)
    """
    return sheet.width // grid.columns, sheet.height // grid.rows


def decompose(
    sheet: Image.Image,
    grid: GridShape,
    progress: Optional[ProgressCallback] = None,
) -> List[Image.Image]:
    """
    Cut a sheet into grid.columns * grid.rows tiles.

    Args:
        sheet: Composite image
        grid: Arrangement of cells on the sheet
        progress: Called once after each tile is extracted

    Returns:
        New images of cell_size_for(sheet, grid), row-major order
    """
    cell_width, cell_height = cell_size_for(sheet, grid)
    if sheet.width % grid.columns or sheet.height % grid.rows:
        logger.debug(
            f"Sheet {sheet.width}x{sheet.height} does not divide evenly into {grid.label}; "
            f"dropping {sheet.width % grid.columns}px right, {sheet.height % grid.rows}px bottom"
        )

    tiles: List[Image.Image] = []
    for column, row in grid.cell_positions(grid.cell_count):
        left, top = column * cell_width, row * cell_height
        tile = extract(sheet, Point(left, top), Point(left + cell_width, top + cell_height))
        tiles.append(tile)

        if progress is not None:
            progress()

    logger.info(f"Decomposed {sheet.width}x{sheet.height} sheet into {len(tiles)} tiles ({cell_width}x{cell_height})")
    return tiles
