"""
Module: config

Purpose:
    Configuration dataclasses for packing and unpacking sprite sheets.
    Immutable, validated on construction, with colour names and format
    tags resolved through the io collaborators.

Key Classes:
    - PackConfig: Settings for building one sheet from image files
    - UnpackConfig: Settings for separating one sheet into frames

Dependencies:
    - dataclasses (std)
    - io.colors, io.codec: Name and tag resolution

Used By:
    - controller: pack_sprite_sheet(), unpack_sprite_sheet()
    - cli: Builds configs from arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import GridShape, ImageFormatInfo, SheetSpec
from spritesheet_toolkit.io.codec import parse_output_type
from spritesheet_toolkit.io.colors import TRANSPARENT, resolve_color

DEFAULT_IMAGE_FORMAT = "Png"
DEFAULT_WRITE_WORKERS = 4


@dataclass(frozen=True)
class PackConfig:
    """
    Configuration for building a sheet (immutable).

    Attributes:
        image_paths: Input images, in placement order
        output_dir: Directory for the sheet; created if absent
        file_name: Base name of the sheet, without extension or path
        grid: Columns x rows, None to solve from the image count
        background_color: Colour name for uncovered cell area
        mask_color: Colour name keyed to transparency after placement
        image_format: Output format tag ("Png", "Jpeg", ...); unknown tags
            select Bmp

    Example:
        >>> config = PackConfig(
        ...     image_paths=[Path("walk_01.png"), Path("walk_02.png")],
        ...     output_dir=Path("out"),
        ...     file_name="walk",
        ... )
        >>> config.format_info.extension
        'png'
    """

    # Required
    image_paths: List[Path]
    output_dir: Path
    file_name: str

    # Layout
    grid: Optional[GridShape] = None

    # Colours ("Transparent" = none)
    background_color: str = TRANSPARENT
    mask_color: str = TRANSPARENT

    # Output
    image_format: str = DEFAULT_IMAGE_FORMAT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.image_paths:
            raise InvalidArgumentError("image_paths must not be empty")
        if not self.file_name:
            raise InvalidArgumentError("file_name must not be empty")
        # Fail early on unknown colour names
        resolve_color(self.background_color)
        resolve_color(self.mask_color)

    @property
    def format_info(self) -> ImageFormatInfo:
        return parse_output_type(self.image_format)

    def sheet_spec(self) -> SheetSpec:
        """Resolved SheetSpec for the composer."""
        return SheetSpec(
            grid=self.grid,
            background_color=resolve_color(self.background_color),
            mask_color=resolve_color(self.mask_color),
            image_format=self.format_info,
        )


@dataclass(frozen=True)
class UnpackConfig:
    """
    Configuration for separating a sheet into frames (immutable).

    Attributes:
        sheet_path: Existing sheet image
        grid: Columns x rows of the sheet
        output_dir: Directory for frames; created if absent
        file_name: Base name of each frame, numbered "(0001)", "(0002)", ...
        image_format: Output format tag; unknown tags select Bmp
        write_workers: Threads writing frames, 0 to write synchronously
    """

    sheet_path: Path
    grid: GridShape
    output_dir: Path
    file_name: str
    image_format: str = DEFAULT_IMAGE_FORMAT
    write_workers: int = field(default=DEFAULT_WRITE_WORKERS)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.grid, GridShape):
            raise InvalidArgumentError(f"grid must be a GridShape: {self.grid!r}")
        if not self.file_name:
            raise InvalidArgumentError("file_name must not be empty")
        if self.write_workers < 0:
            raise InvalidArgumentError(f"write_workers must be non-negative: {self.write_workers}")

    @property
    def format_info(self) -> ImageFormatInfo:
        return parse_output_type(self.image_format)
