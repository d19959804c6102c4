"""
Module: core.models.geometry

Purpose:
    Pixel coordinates and grid arrangements shared by the layout solver,
    composer and decomposer.

Key Classes:
    - Point: Integer pixel coordinate
    - GridShape: (columns, rows) arrangement of tiles on a sheet
    - LayoutCandidate: GridShape ranked by its imbalance score

Dependencies:
    - dataclasses (std)

Used By:
    - layout.solver: Produces LayoutCandidates and GridShapes
    - sheet.composer / sheet.decomposer: Cell placement order
    - sheet.cropper: Extraction corners
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """
    Integer pixel coordinate.

    Values may be negative or outside an image; consumers clamp them.
    """

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class GridShape:
    """
    Arrangement of tiles on a sheet (immutable).

    Attributes:
        columns: Number of cells per row (>= 1)
        rows: Number of cell rows (>= 1)

    Invariants:
        - columns >= 1
        - rows >= 1

    Example:
        >>> grid = GridShape(3, 4)
        >>> grid.cell_count
        12
        >>> grid.label
        '3x4'
    """

    columns: int
    rows: int

    def __post_init__(self) -> None:
        """Validate grid on construction."""
        if self.columns < 1:
            raise InvalidArgumentError(f"columns must be >= 1: {self.columns}")
        if self.rows < 1:
            raise InvalidArgumentError(f"rows must be >= 1: {self.rows}")

    @property
    def cell_count(self) -> int:
        """Total number of cells in the grid."""
        return self.columns * self.rows

    @property
    def label(self) -> str:
        return f"{self.columns}x{self.rows}"

    def sheet_size(self, cell_width: int, cell_height: int) -> Tuple[int, int]:
        """Pixel size of a sheet whose cells are cell_width x cell_height."""
        return (cell_width * self.columns, cell_height * self.rows)

    def cell_positions(self, count: int) -> Iterator[Tuple[int, int]]:
        """
        Yield (column, row) cell coordinates for `count` tiles.

        Row-major order: the column advances first and resets to 0 when it
        reaches `columns`, moving to the next row. The row wraps back to 0
        when it reaches `rows`, so a count larger than cell_count revisits
        cells from the top-left.

        Example:
            >>> list(GridShape(2, 2).cell_positions(5))
            [(0, 0), (1, 0), (0, 1), (1, 1), (0, 0)]
        """
        column, row = 0, 0
        for _ in range(count):
            yield column, row
            column += 1
            if column == self.columns:
                column = 0
                row += 1
            if row == self.rows:
                row = 0

    @classmethod
    def parse(cls, text: str) -> GridShape:
        """
        Parse a "CxR" string such as "3x4".

        Raises:
            InvalidArgumentError: If text is not two positive integers
                separated by 'x'.
        """
        parts = text.lower().split("x")
        if len(parts) != 2:
            raise InvalidArgumentError(f"Grid must look like 'CxR': {text!r}")
        try:
            columns, rows = int(parts[0]), int(parts[1])
        except ValueError as e:
            raise InvalidArgumentError(f"Grid must look like 'CxR': {text!r}") from e
        return cls(columns, rows)

    def __repr__(self) -> str:
        return f"GridShape({self.columns}, {self.rows})"


@dataclass(frozen=True, slots=True)
class LayoutCandidate:
    """
    A candidate grid paired with its imbalance score.

    The score is abs(sheet_width - sheet_height) in pixels for the tile
    size the candidate was scored against. Lower is better.
    """

    grid: GridShape
    score: int

    def __post_init__(self) -> None:
        if self.score < 0:
            raise InvalidArgumentError(f"score must be >= 0: {self.score}")
