"""
Module: controller

Purpose:
    Orchestrate the file-to-file pipelines.
    Pack:   Load -> Compose -> Name -> Write
    Unpack: Load -> Decompose -> Write frames

Key Functions:
    - pack_sprite_sheet(): Build and write one sheet, raising on failure
    - unpack_sprite_sheet(): Split one sheet into frame files, raising on failure
    - create_sprite_sheet(): Boolean-outcome wrapper around pack
    - separate_sprite_sheet(): Boolean-outcome wrapper around unpack

Dependencies:
    - sheet: compose(), decompose()
    - io: Codec, naming and writing
    - config: PackConfig, UnpackConfig

Used By:
    - cli: `pack` and `unpack` sub-commands
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from spritesheet_toolkit.core.errors import SpriteSheetError
from spritesheet_toolkit.core.models import GridShape

from .config import DEFAULT_WRITE_WORKERS, PackConfig, UnpackConfig
from .io.codec import load_image
from .io.naming import build_file_name, frame_file_name, next_available_name
from .io.write_queue import WriteQueue
from .io.writer import ensure_directory, output_lock, write_image
from .sheet import ProgressCallback, compose, decompose, largest_dimensions, load_tiles

logger = logging.getLogger(__name__)

GridLike = Union[GridShape, Tuple[int, int]]


def _as_grid(grid: Optional[GridLike]) -> Optional[GridShape]:
    if grid is None or isinstance(grid, GridShape):
        return grid
    return GridShape(*grid)


def pack_sprite_sheet(
    config: PackConfig,
    progress: Optional[ProgressCallback] = None,
) -> Path:
    """
    Build a sheet from image files and write it.

    The output name is "{file_name} ({w}x{h}x{count}).{ext}", where w x h
    is the cell size. If that file exists, "(1)", "(2)", ... is inserted
    after file_name until a free name is found.

    Args:
        config: Pack configuration
        progress: Called once per tile placed

    Returns:
        Path of the written sheet

    Raises:
        DecodeError: If an input is not a readable image
        EncodeError: If the sheet cannot be encoded
        OutputError: If the directory or file cannot be written
    """
    start_time = time.perf_counter()
    logger.info(f"Packing {len(config.image_paths)} images into {config.file_name!r}")

    tiles = load_tiles(config.image_paths)
    spec = config.sheet_spec()
    sheet = compose(tiles, spec, progress)

    output_dir = ensure_directory(config.output_dir)
    image_format = config.format_info
    template = build_file_name(config.file_name, largest_dimensions(tiles), len(tiles), image_format)

    with output_lock(output_dir):
        name, file_number = next_available_name(output_dir, template)
        if file_number:
            logger.info(f"Output name taken, using file number {file_number}")
        output_path = write_image(sheet, output_dir / name, image_format)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {output_path} in {elapsed:.2f}s")
    return output_path


def unpack_sprite_sheet(
    config: UnpackConfig,
    progress: Optional[ProgressCallback] = None,
) -> List[Path]:
    """
    Split a sheet into one file per grid cell.

    Frames are named "{file_name}(0001).{ext}", "{file_name}(0002).{ext}", ...
    in row-major order. Existing files with those names are replaced.

    Args:
        config: Unpack configuration
        progress: Called once per tile extracted

    Returns:
        Paths of the written frames, in order

    Raises:
        DecodeError: If the sheet is not a readable image
        EncodeError: If a frame cannot be encoded
        OutputError: If the directory or a file cannot be written
    """
    start_time = time.perf_counter()
    output_dir = ensure_directory(config.output_dir)

    sheet = load_image(config.sheet_path)
    logger.info(f"Unpacking {config.sheet_path} ({sheet.width}x{sheet.height}) as {config.grid.label}")

    tiles = decompose(sheet, config.grid, progress)
    image_format = config.format_info

    with WriteQueue(max_workers=config.write_workers) as queue:
        for index, tile in enumerate(tiles, start=1):
            path = output_dir / frame_file_name(config.file_name, index, image_format)
            queue.queue_image_write(tile, path, image_format)
        paths = queue.wait_all()

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {len(paths)} frames to {output_dir} in {elapsed:.2f}s")
    return paths


def create_sprite_sheet(
    image_file_names: Sequence[Union[str, Path]],
    image_pattern: Optional[GridLike],
    background_color: str,
    mask_color: str,
    file_name: str,
    output_directory: Union[str, Path],
    image_format: str,
    progress: Optional[ProgressCallback] = None,
) -> bool:
    """
    Create a sprite sheet from a list of image files.

    Args:
        image_file_names: Images to include, in placement order
        image_pattern: (columns, rows) grid, or None to solve one
        background_color: Colour name; only visible where tiles do not
            cover the sheet. "Transparent" for none.
        mask_color: Colour name keyed to transparency after the sheet is
            built. "Transparent" for none.
        file_name: Output base name, without extension or path
        output_directory: Created if it does not exist
        image_format: Format tag ("Png", "Jpeg", ...); unknown tags select Bmp
        progress: Called once per tile placed

    Returns:
        True on success, False if any load, compose or save step failed.
        Details of a failure are logged.
    """
    try:
        config = PackConfig(
            image_paths=[Path(name) for name in image_file_names],
            output_dir=Path(output_directory),
            file_name=file_name,
            grid=_as_grid(image_pattern),
            background_color=background_color,
            mask_color=mask_color,
            image_format=image_format,
        )
        pack_sprite_sheet(config, progress)
    except SpriteSheetError:
        logger.exception(f"Failed to create sprite sheet {file_name!r}")
        return False

    return True


def separate_sprite_sheet(
    spritesheet_file_name: Union[str, Path],
    image_pattern: GridLike,
    output_file_name: str,
    output_directory: Union[str, Path],
    output_file_type: str,
    progress: Optional[ProgressCallback] = None,
    write_workers: int = DEFAULT_WRITE_WORKERS,
) -> bool:
    """
    Separate a sprite sheet into individual images.

    Args:
        spritesheet_file_name: Existing sheet to load
        image_pattern: (columns, rows) grid of the sheet
        output_file_name: Base name of each frame, without extension or path
        output_directory: Created if it does not exist
        output_file_type: Format tag; unknown tags select Bmp
        progress: Called once per tile extracted
        write_workers: Threads writing frames, 0 to write synchronously

    Returns:
        True on success, False if any load or save step failed.
    """
    try:
        config = UnpackConfig(
            sheet_path=Path(spritesheet_file_name),
            grid=_as_grid(image_pattern),
            output_dir=Path(output_directory),
            file_name=output_file_name,
            image_format=output_file_type,
            write_workers=write_workers,
        )
        unpack_sprite_sheet(config, progress)
    except SpriteSheetError:
        logger.exception(f"Failed to separate sprite sheet {spritesheet_file_name}")
        return False

    return True
