"""
Module: io

Purpose:
    Collaborators around the core: image codec, named colours, output
    naming and file writing.
"""

from .codec import (
    IMAGE_FORMATS,
    decode,
    encode,
    load_image,
    parse_output_type,
    supported_formats,
)
from .colors import TRANSPARENT, color_names, resolve_color
from .naming import (
    FILE_NUMBER_TOKEN,
    build_file_name,
    frame_file_name,
    next_available_name,
    number_file_name,
    unique_image_name,
)
from .writer import ensure_directory, output_lock, write_image
from .write_queue import WriteQueue

__all__ = [
    # Codec
    "IMAGE_FORMATS",
    "decode",
    "encode",
    "load_image",
    "parse_output_type",
    "supported_formats",
    # Colours
    "TRANSPARENT",
    "color_names",
    "resolve_color",
    # Naming
    "FILE_NUMBER_TOKEN",
    "build_file_name",
    "frame_file_name",
    "next_available_name",
    "number_file_name",
    "unique_image_name",
    # Writing
    "ensure_directory",
    "output_lock",
    "write_image",
    "WriteQueue",
]
