"""
Module: sheet.composer

Purpose:
    Compose a list of tiles into one sheet.

    Every cell is sized to the widest and tallest tile. Tiles are placed
    in row-major order, anchored at the top-left of their cell; the rest of
    a smaller tile's cell keeps the background. An optional colour key then
    turns every pixel of the mask colour fully transparent.

Key Functions:
    - compose(): Tiles + SheetSpec -> sheet image
    - apply_color_key(): Colour-key pass over a whole image
    - load_tiles(): Decode the input files for compose()

Dependencies:
    - PIL: Sheet allocation and tile copies
    - numpy: Vectorised colour-key comparison
    - layout.solver: Grid when the SheetSpec carries none

Used By:
    - controller.pack_sprite_sheet()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

import numpy as np
from PIL import Image

from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import RGBA, GridShape, SheetSpec
from spritesheet_toolkit.io.codec import TILE_MODE, load_image
from spritesheet_toolkit.layout.solver import solve

from .cropper import largest_dimensions

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[], None]

CLEAR: RGBA = (0, 0, 0, 0)


def load_tiles(paths: Sequence[Union[str, Path]]) -> List[Image.Image]:
    """
    Decode every input file into an RGBA tile.

    Raises:
        DecodeError: For the first path that is not a readable image.
            No tiles are returned in that case.
    """
    tiles = [load_image(path) for path in paths]
    logger.debug(f"Loaded {len(tiles)} tiles")
    return tiles


def apply_color_key(image: Image.Image, color: RGBA) -> Image.Image:
    """
    Make every pixel exactly equal to `color` fully transparent.

    The comparison includes alpha. Matching pixels become (0, 0, 0, 0).
    Applying the same key twice gives the same image as applying it once.

    Args:
        image: Source image (any mode; converted to RGBA)
        color: RGBA colour to key out

    Returns:
        New RGBA image
    """
    rgba = image if image.mode == TILE_MODE else image.convert(TILE_MODE)
    if rgba.width == 0 or rgba.height == 0:
        return rgba.copy()

    pixels = np.array(rgba)
    key = np.array(color, dtype=pixels.dtype)
    matches = np.all(pixels == key, axis=-1)
    pixels[matches] = CLEAR

    logger.debug(f"Colour key {color} cleared {int(matches.sum())} pixels")
    return Image.fromarray(pixels)


def compose(
    tiles: Sequence[Image.Image],
    spec: SheetSpec,
    progress: Optional[ProgressCallback] = None,
) -> Image.Image:
    """
    Compose tiles into a single sheet.

    Steps:
    1. Cell size = (max tile width, max tile height)
    2. Grid = spec.grid, or solve() for the tile count and cell size
    3. Allocate the sheet, filled with spec.background_color or clear
    4. Tile i goes to cell GridShape.cell_positions() order, top-left anchored
    5. Apply spec.mask_color as a colour key over the whole sheet

    Args:
        tiles: Ordered tiles; none are modified
        spec: Grid, background and mask settings
        progress: Called once after each tile is placed

    Returns:
        New RGBA sheet of cell_width * columns by cell_height * rows

    Raises:
        InvalidArgumentError: If tiles is empty

    Example:
        >>> sheet = compose(tiles, SheetSpec(grid=GridShape(4, 2)))
        >>> sheet.size
        (128, 64)  # eight 32x32 tiles
    """
    if not tiles:
        raise InvalidArgumentError("No tiles to compose")

    cell_width, cell_height = largest_dimensions(tiles)
    grid: GridShape = spec.grid or solve(len(tiles), cell_width, cell_height)

    fill = spec.background_color if spec.background_color is not None else CLEAR
    sheet = Image.new(TILE_MODE, grid.sheet_size(cell_width, cell_height), fill)

    for tile, (column, row) in zip(tiles, grid.cell_positions(len(tiles))):
        if tile.mode != TILE_MODE:
            tile = tile.convert(TILE_MODE)
        # paste() without a mask copies pixels as-is, alpha included
        sheet.paste(tile, (column * cell_width, row * cell_height))

        if progress is not None:
            progress()

    if spec.mask_color is not None:
        sheet = apply_color_key(sheet, spec.mask_color)

    logger.info(
        f"Composed {len(tiles)} tiles into {grid.label} sheet "
        f"({sheet.width}x{sheet.height}, cell {cell_width}x{cell_height})"
    )
    return sheet
