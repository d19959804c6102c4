"""
Module: core.errors

Purpose:
    Exception hierarchy shared by every pipeline stage.

Key Classes:
    - SpriteSheetError: Base class for all toolkit failures
    - InvalidArgumentError: Bad input to a pure helper (also a ValueError)
    - DecodeError: Input does not contain a readable image
    - EncodeError: Codec failed to write the output format
    - OutputError: Directory creation or file write failed (also an OSError)

Used By:
    - layout.solver, sheet.*, io.*, controller
"""

from __future__ import annotations


class SpriteSheetError(Exception):
    """Base error for sprite sheet operations."""
    pass


class InvalidArgumentError(SpriteSheetError, ValueError):
    """Invalid argument passed to a solver, model or helper."""
    pass


class DecodeError(SpriteSheetError):
    """An input path or buffer does not contain a readable image."""
    pass


class EncodeError(SpriteSheetError):
    """The codec could not encode an image in the requested format."""
    pass


class OutputError(SpriteSheetError, OSError):
    """Output directory creation or file write failed."""
    pass
