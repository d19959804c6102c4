"""
Module: sheet.cropper

Purpose:
    Utilities for cutting regions out of a bitmap and measuring tile sets.
    Extraction clamps its corners rather than failing on out-of-range input.

Key Functions:
    - extract(): Copy a clamped rectangle out of a bitmap
    - largest_dimensions(): Max width and max height over a tile set
    - smallest_dimensions(): Min width and min height over a tile set
    - all_same_size(): Whether every tile shares one size

Dependencies:
    - PIL: Image cropping
    - core.models: Point

Used By:
    - sheet.decomposer: Carves each grid cell
    - sheet.composer: Cell size for a tile set
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PIL import Image

from spritesheet_toolkit.core.models import Point


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


def extract(
    bitmap: Optional[Image.Image],
    top_left: Optional[Point],
    bottom_right: Optional[Point],
) -> Optional[Image.Image]:
    """
    Copy the region [top_left, bottom_right) out of a bitmap.

    Both corners are clamped independently into
    [0, bitmap.width] x [0, bitmap.height] before the box is checked.

    Args:
        bitmap: Source image
        top_left: Inclusive top-left corner
        bottom_right: Exclusive bottom-right corner

    Returns:
        New image with the region's pixels, or None if any argument is
        None or the clamped box is inverted. A box that collapses to zero
        width or height yields an empty image, not None.

    Example:
        >>> region = extract(sheet, Point(-5, -5), Point(sheet.width + 5, sheet.height + 5))
        >>> region.size == sheet.size
        True
    """
    if bitmap is None or top_left is None or bottom_right is None:
        return None

    left = _clamp(top_left.x, bitmap.width)
    top = _clamp(top_left.y, bitmap.height)
    right = _clamp(bottom_right.x, bitmap.width)
    bottom = _clamp(bottom_right.y, bitmap.height)

    if left > right or top > bottom:
        return None

    # crop() returns a new image, never a view onto the source
    return bitmap.crop((left, top, right, bottom))


def largest_dimensions(images: Optional[Sequence[Image.Image]]) -> Tuple[int, int]:
    """
    Widest width and tallest height over a set of images.

    The two maxima may come from different images. Returns (0, 0) for an
    empty or missing set.
    """
    width, height = 0, 0
    if not images:
        return width, height

    for image in images:
        width = max(width, image.width)
        height = max(height, image.height)
    return width, height


def smallest_dimensions(images: Optional[Sequence[Image.Image]]) -> Tuple[int, int]:
    """Narrowest width and shortest height over a set of images, (0, 0) if empty."""
    if not images:
        return 0, 0

    width = min(image.width for image in images)
    height = min(image.height for image in images)
    return width, height


def all_same_size(images: Optional[Sequence[Image.Image]]) -> bool:
    """True if every image matches the first image's size (vacuously for empty)."""
    if not images:
        return True

    first = images[0].size
    return all(image.size == first for image in images)
