"""
Unit tests for SheetSpec.
"""

import pytest

from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import GridShape, SheetSpec


class TestSheetSpec:

    def test_init_when_defaults_then_no_grid_no_colors(self):
        spec = SheetSpec()

        assert spec.grid is None
        assert spec.background_color is None
        assert spec.mask_color is None

    def test_init_when_valid_colors_then_keeps_them(self):
        spec = SheetSpec(grid=GridShape(2, 2), background_color=(1, 2, 3, 255), mask_color=(255, 0, 255, 255))

        assert spec.background_color == (1, 2, 3, 255)

    @pytest.mark.parametrize("color", [(1, 2, 3), (0, 0, 0, 256), (-1, 0, 0, 0)])
    def test_init_when_bad_color_then_raises(self, color):
        with pytest.raises(InvalidArgumentError):
            SheetSpec(mask_color=color)

    def test_is_immutable(self):
        spec = SheetSpec()

        with pytest.raises(Exception):
            spec.grid = GridShape(1, 1)
