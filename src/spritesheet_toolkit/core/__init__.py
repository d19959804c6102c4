"""Core models and errors for the sprite sheet toolkit."""

from .errors import (
    SpriteSheetError,
    InvalidArgumentError,
    DecodeError,
    EncodeError,
    OutputError,
)

__all__ = [
    "SpriteSheetError",
    "InvalidArgumentError",
    "DecodeError",
    "EncodeError",
    "OutputError",
]
