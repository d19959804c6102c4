"""
Module: layout.solver

Purpose:
    Choose a grid arrangement for a number of same-size tiles.

    A long strip (11 images as 11x1) is awkward to load into video memory,
    so the search also considers grids with a few more cells than images
    (11 images as 3x4). Every candidate is scored by how far the resulting
    sheet is from square, measured in pixels with the real tile size, so
    tall thin tiles are laid out differently from short wide ones.

Key Functions:
    - factor_pairs(): Lazy divisor enumeration for one value
    - layout_candidates(): Unique scored grids for an image count
    - solve(): Best grid for an image count and tile size

Dependencies:
    - math (std)
    - core.models: GridShape, LayoutCandidate

Used By:
    - sheet.composer: When the SheetSpec carries no grid
    - cli: `solve` sub-command
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterator, List, Tuple

from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import GridShape, LayoutCandidate

logger = logging.getLogger(__name__)

# Cells the search may allocate beyond the image count, as a multiplier
SEARCH_HEADROOM = 1.2


def factor_pairs(value: int) -> Iterator[Tuple[int, int]]:
    """
    Yield (factor, value) pairs for every divisor of value.

    Factors are probed from 1 up to ceil(sqrt(value)). For each divisor d
    both (d, value) and (value // d, value) are produced, except when d is
    the probe limit itself, which is only produced once.

    Args:
        value: Positive integer to factor

    Yields:
        (factor, value) tuples in discovery order

    Example:
        >>> list(factor_pairs(12))
        [(1, 12), (12, 12), (2, 12), (6, 12), (3, 12), (4, 12), (4, 12)]
    """
    limit = math.ceil(math.sqrt(value))

    for factor in range(1, limit + 1):
        if value % factor == 0:
            yield factor, value

            if factor != limit:
                yield value // factor, value


def layout_candidates(
    image_count: int,
    tile_width: int,
    tile_height: int,
) -> List[LayoutCandidate]:
    """
    Build the unique scored grid candidates for an image count.

    Every value from image_count up to floor(image_count * SEARCH_HEADROOM)
    is factored; each (factor, value) pair becomes a grid of
    factor columns by value // factor rows. Duplicate grids keep their
    first occurrence.

    Args:
        image_count: Number of tiles to place (> 0)
        tile_width: Width of one cell in pixels (>= 0)
        tile_height: Height of one cell in pixels (>= 0)

    Returns:
        Candidates in discovery order

    Raises:
        InvalidArgumentError: If image_count <= 0 or a tile dimension < 0
    """
    if image_count <= 0:
        raise InvalidArgumentError(f"image_count must be positive: {image_count}")
    if tile_width < 0 or tile_height < 0:
        raise InvalidArgumentError(
            f"tile dimensions must be non-negative: {tile_width}x{tile_height}"
        )

    upper_limit = int(image_count * SEARCH_HEADROOM)

    # dicts keep insertion order, which is the tie-break order
    scores: Dict[GridShape, int] = {}
    for value in range(image_count, upper_limit + 1):
        for factor, ceiling in factor_pairs(value):
            grid = GridShape(factor, ceiling // factor)
            if grid not in scores:
                scores[grid] = abs(grid.columns * tile_width - grid.rows * tile_height)

    return [LayoutCandidate(grid, score) for grid, score in scores.items()]


def solve(image_count: int, tile_width: int, tile_height: int) -> GridShape:
    """
    Pick the grid whose sheet is closest to square.

    Args:
        image_count: Number of tiles to place (> 0)
        tile_width: Width of one cell in pixels (>= 0)
        tile_height: Height of one cell in pixels (>= 0)

    Returns:
        GridShape with columns * rows >= image_count

    Raises:
        InvalidArgumentError: If image_count <= 0 or a tile dimension < 0

    Example:
        >>> solve(11, 1, 1)
        GridShape(3, 4)
    """
    candidates = layout_candidates(image_count, tile_width, tile_height)

    # min() returns the first of equal scores, keeping ties in discovery order
    best = min(candidates, key=lambda candidate: candidate.score)

    logger.debug(
        f"Solved {image_count} tiles of {tile_width}x{tile_height} as {best.grid.label} "
        f"(score {best.score}, {len(candidates)} candidates)"
    )
    return best.grid
