"""
Module: layout

Purpose:
    Grid layout solver for sprite sheets.

Key Functions:
    - solve(): Best (columns, rows) for an image count and tile size
    - layout_candidates(): All scored candidates
    - factor_pairs(): Divisor enumeration
"""

from .solver import SEARCH_HEADROOM, factor_pairs, layout_candidates, solve

__all__ = [
    "SEARCH_HEADROOM",
    "factor_pairs",
    "layout_candidates",
    "solve",
]
