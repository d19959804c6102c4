"""
Module: io.codec

Purpose:
    Decode source images into RGBA tiles and encode sheets or frames into
    one of a fixed set of output formats. The format table is static; a tag
    that is not in it selects the bitmap format.

Key Functions:
    - supported_formats(): Names of the selectable output formats
    - parse_output_type(): Format tag -> ImageFormatInfo (Bmp fallback)
    - decode(): Bytes -> RGBA image
    - load_image(): Path -> RGBA image
    - encode(): Image -> bytes in a given format
    - save_image(): Image -> file object in a given format

Dependencies:
    - PIL: Decoding and encoding

Used By:
    - sheet.composer: load_tiles()
    - io.writer: Atomic image writes
    - config: Resolves the image_format tag
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Dict, List, Union

from PIL import Image, UnidentifiedImageError

from spritesheet_toolkit.core.errors import DecodeError, EncodeError
from spritesheet_toolkit.core.models import ImageFormatInfo

logger = logging.getLogger(__name__)

TILE_MODE = "RGBA"

# Selectable output formats, keyed by tag. Wmf needs a save handler
# registered with PIL (WmfImagePlugin.register_handler) to be writable.
IMAGE_FORMATS: Dict[str, ImageFormatInfo] = {
    "Bmp": ImageFormatInfo("Bmp", "BMP", "bmp"),
    "Gif": ImageFormatInfo("Gif", "GIF", "gif"),
    "Jpeg": ImageFormatInfo("Jpeg", "JPEG", "jpeg", save_mode="RGB"),
    "Png": ImageFormatInfo("Png", "PNG", "png"),
    "Tiff": ImageFormatInfo("Tiff", "TIFF", "tiff"),
    "Wmf": ImageFormatInfo("Wmf", "WMF", "wmf"),
}

DEFAULT_FORMAT = IMAGE_FORMATS["Bmp"]


def supported_formats() -> List[str]:
    """Names of the output formats, in table order."""
    return list(IMAGE_FORMATS)


def parse_output_type(tag: str) -> ImageFormatInfo:
    """
    Look up an output format by tag.

    Matching is exact and case-sensitive ("Png", not "png"). Any tag not
    in IMAGE_FORMATS selects the Bmp format.

    Example:
        >>> parse_output_type("Jpeg").extension
        'jpeg'
        >>> parse_output_type("webp").name
        'Bmp'
    """
    image_format = IMAGE_FORMATS.get(tag)
    if image_format is None:
        logger.debug(f"Unrecognised format tag {tag!r}, using {DEFAULT_FORMAT.name}")
        return DEFAULT_FORMAT
    return image_format


def _to_tile(image: Image.Image) -> Image.Image:
    image.load()
    if image.mode != TILE_MODE:
        return image.convert(TILE_MODE)
    return image


def decode(data: bytes) -> Image.Image:
    """
    Decode an encoded image into an RGBA tile.

    Raises:
        DecodeError: If data is not a readable image
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            return _to_tile(image).copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"Could not decode image data: {e}") from e


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Load an image file into an RGBA tile.

    The file is fully read and closed before returning.

    Raises:
        DecodeError: If the path is missing or not a readable image
    """
    try:
        with Image.open(path) as image:
            return _to_tile(image).copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"Could not read image {path}: {e}") from e


def save_image(image: Image.Image, fp: BinaryIO, image_format: ImageFormatInfo) -> None:
    """
    Write an image to an open binary file in the given format.

    Raises:
        EncodeError: If the codec cannot write the format
    """
    try:
        converted = image if image.mode == image_format.save_mode else image.convert(image_format.save_mode)
        converted.save(fp, format=image_format.pil_format)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Could not encode image as {image_format.name}: {e}") from e


def encode(image: Image.Image, image_format: ImageFormatInfo) -> bytes:
    """
    Encode an image into bytes of the given format.

    Raises:
        EncodeError: If the codec cannot write the format
    """
    buffer = io.BytesIO()
    save_image(image, buffer, image_format)
    return buffer.getvalue()
