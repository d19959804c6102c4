"""
Module: io.naming

Purpose:
    Output file names for sheets and separated frames.

    Sheet names are built from a template holding FILE_NUMBER_TOKEN. The
    first probe strips the token; on collision it is replaced with "(1)",
    "(2)", ... until a free name is found. The number that was used is
    returned to the caller instead of being kept between calls.

Key Functions:
    - build_file_name(): Sheet name template with size and count
    - number_file_name(): Fill the template for one file number
    - next_available_name(): First non-colliding name in a directory
    - frame_file_name(): Name of one separated frame
    - unique_image_name(): Timestamp-based name

Dependencies:
    - pathlib (std)

Used By:
    - controller: Sheet and frame output paths
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Tuple

from spritesheet_toolkit.core.models import ImageFormatInfo

FILE_NUMBER_TOKEN = "[file_number]"

# 100ns ticks between 1601-01-01 and the Unix epoch
_FILETIME_EPOCH_OFFSET = 116444736000000000


def build_file_name(
    file_name: str,
    cell_size: Tuple[int, int],
    image_count: int,
    image_format: ImageFormatInfo,
) -> str:
    """
    Build the sheet name template.

    Example:
        >>> build_file_name("walk", (32, 48), 12, IMAGE_FORMATS["Png"])
        'walk[file_number] (32x48x12).png'
    """
    width, height = cell_size
    return f"{file_name}{FILE_NUMBER_TOKEN} ({width}x{height}x{image_count}).{image_format.extension}"


def number_file_name(template: str, file_number: int) -> str:
    """
    Fill FILE_NUMBER_TOKEN in a template.

    0 removes the token; any other number becomes "(n)".

    Example:
        >>> number_file_name("sheet[file_number].png", 0)
        'sheet.png'
        >>> number_file_name("sheet[file_number].png", 2)
        'sheet(2).png'
    """
    if file_number == 0:
        return template.replace(FILE_NUMBER_TOKEN, "")
    return template.replace(FILE_NUMBER_TOKEN, f"({file_number})")


def next_available_name(
    directory: Path,
    template: str,
    start: int = 0,
) -> Tuple[str, int]:
    """
    Find the first file name from a template that does not exist yet.

    Probes number_file_name(template, n) for n = start, start + 1, ...
    in order. With the default start the un-numbered name is tried first.

    Args:
        directory: Directory the file will be written to
        template: Name containing FILE_NUMBER_TOKEN
        start: First file number to probe

    Returns:
        (file name, file number used)

    Example:
        >>> # directory already holds sheet.png and sheet(1).png
        >>> next_available_name(directory, "sheet[file_number].png")
        ('sheet(2).png', 2)
    """
    file_number = start
    name = number_file_name(template, file_number)

    while (directory / name).exists():
        file_number += 1
        name = number_file_name(template, file_number)

    return name, file_number


def frame_file_name(base_name: str, index: int, image_format: ImageFormatInfo) -> str:
    """
    Name of a separated frame; index is 1-based and zero-padded to 4 digits.

    Example:
        >>> frame_file_name("walk", 3, IMAGE_FORMATS["Png"])
        'walk(0003).png'
    """
    return f"{base_name}({index:04d}).{image_format.extension}"


def unique_image_name(
    file_name: str,
    image_format: ImageFormatInfo,
    now_ns: Optional[int] = None,
) -> str:
    """
    Name made unique by appending the current time.

    The time is written as Windows file-time ticks (100ns since 1601)
    followed by the format name, e.g. "shot133459872000000000Png".
    """
    if now_ns is None:
        now_ns = time.time_ns()
    ticks = now_ns // 100 + _FILETIME_EPOCH_OFFSET
    return f"{file_name}{ticks}{image_format.name}"
