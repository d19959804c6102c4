"""
Module: core.models.sheet

Purpose:
    Value objects describing how a sheet is built and written.

Key Classes:
    - ImageFormatInfo: One entry of the codec's output format table
    - SheetSpec: Grid, background, mask and output format for one operation

Dependencies:
    - dataclasses (std)

Used By:
    - io.codec: IMAGE_FORMATS table
    - sheet.composer: Reads grid, background_color, mask_color
    - config.PackConfig: Builds the resolved SheetSpec
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import InvalidArgumentError
from .geometry import GridShape

# (red, green, blue, alpha), each 0-255
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class ImageFormatInfo:
    """
    Output raster format.

    Attributes:
        name: Tag used to select the format ("Png", "Jpeg", ...)
        pil_format: Format name passed to PIL's Image.save
        extension: File extension without the dot
        save_mode: PIL mode the image is converted to before saving
    """

    name: str
    pil_format: str
    extension: str
    save_mode: str = "RGBA"


@dataclass(frozen=True)
class SheetSpec:
    """
    Configuration bundle for composing one sheet (immutable).

    Attributes:
        grid: Columns x rows, or None to let the layout solver choose
        background_color: Fill applied before tiles are placed, None = no fill
        mask_color: Colour keyed to full transparency after placement,
            None = no mask
        image_format: Output format used when the sheet is written

    Note:
        The mask pass runs over the whole sheet, background included, so a
        mask equal to the background turns every uncovered cell transparent.
        Callers choose distinct colours when that is not wanted.
    """

    grid: Optional[GridShape] = None
    background_color: Optional[RGBA] = None
    mask_color: Optional[RGBA] = None
    image_format: Optional[ImageFormatInfo] = None

    def __post_init__(self) -> None:
        """Validate colours on construction."""
        for field_name in ("background_color", "mask_color"):
            color = getattr(self, field_name)
            if color is None:
                continue
            if len(color) != 4 or any(not 0 <= c <= 255 for c in color):
                raise InvalidArgumentError(
                    f"{field_name} must be an RGBA tuple of 0-255 values: {color!r}"
                )
