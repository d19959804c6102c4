"""
Core Models Package

Immutable, validated data models shared by every pipeline stage.

All models in this package are frozen dataclasses, so they can be passed
between worker threads and used as dict keys (the layout solver
deduplicates candidates by GridShape).

Tiles themselves are plain PIL images in RGBA mode; each stage returns
fresh images and never mutates its inputs.
"""

from .geometry import Point, GridShape, LayoutCandidate
from .sheet import RGBA, ImageFormatInfo, SheetSpec

__all__ = [
    "Point",
    "GridShape",
    "LayoutCandidate",
    "RGBA",
    "ImageFormatInfo",
    "SheetSpec",
]
