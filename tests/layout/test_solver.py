"""
Tests for layout.solver

Test Coverage:
- factor_pairs(): divisor enumeration order
- layout_candidates(): dedup, scoring, search ceiling
- solve(): determinism, coverage bounds, tie-breaking, input validation
"""

import pytest

from spritesheet_toolkit.core.errors import InvalidArgumentError
from spritesheet_toolkit.core.models import GridShape
from spritesheet_toolkit.layout.solver import (
    SEARCH_HEADROOM,
    factor_pairs,
    layout_candidates,
    solve,
)


class TestFactorPairs:
    """Tests for factor_pairs()."""

    def test_factor_pairs_when_12_then_both_orientations(self):
        pairs = list(factor_pairs(12))

        assert pairs == [(1, 12), (12, 12), (2, 12), (6, 12), (3, 12), (4, 12), (4, 12)]

    def test_factor_pairs_when_perfect_square_then_root_once(self):
        assert list(factor_pairs(9)) == [(1, 9), (9, 9), (3, 9)]

    def test_factor_pairs_when_prime_then_one_and_self(self):
        assert list(factor_pairs(13)) == [(1, 13), (13, 13)]

    def test_factor_pairs_when_one_then_single_pair(self):
        assert list(factor_pairs(1)) == [(1, 1)]

    def test_factor_pairs_is_lazy_and_restartable(self):
        first = factor_pairs(30)
        assert next(first) == (1, 30)
        assert list(factor_pairs(30)) == list(factor_pairs(30))


class TestLayoutCandidates:
    """Tests for layout_candidates()."""

    def test_candidates_when_11_then_include_headroom_values(self):
        grids = [c.grid for c in layout_candidates(11, 1, 1)]

        # 11, 12 and 13 are searched (floor(11 * 1.2) == 13)
        assert GridShape(11, 1) in grids
        assert GridShape(3, 4) in grids
        assert GridShape(13, 1) in grids
        assert GridShape(7, 2) not in grids

    def test_candidates_are_unique(self):
        grids = [c.grid for c in layout_candidates(24, 3, 5)]

        assert len(grids) == len(set(grids))

    def test_candidates_when_scored_then_pixel_imbalance(self):
        scores = {c.grid: c.score for c in layout_candidates(4, 10, 20)}

        assert scores[GridShape(2, 2)] == 20  # |20 - 40|
        assert scores[GridShape(4, 1)] == 20  # |40 - 20|
        assert scores[GridShape(1, 4)] == 70  # |10 - 80|


class TestSolve:
    """Tests for solve()."""

    def test_solve_when_11_square_tiles_then_3x4(self):
        assert solve(11, 1, 1) == GridShape(3, 4)

    def test_solve_when_called_twice_then_identical(self):
        assert solve(37, 13, 29) == solve(37, 13, 29)

    @pytest.mark.parametrize("count", list(range(1, 120)))
    def test_solve_covers_count_within_ceiling(self, count):
        grid = solve(count, 16, 16)

        assert grid.cell_count >= count
        assert grid.cell_count <= int(count * SEARCH_HEADROOM)

    def test_solve_when_perfect_square_then_square_grid(self):
        assert solve(16, 32, 32) == GridShape(4, 4)

    def test_solve_when_tall_tiles_then_single_row(self):
        """50 tiles of 10x500 fill one 500x500 row exactly (score 0)."""
        assert solve(50, 10, 500) == GridShape(50, 1)

    def test_solve_when_wide_tiles_then_fewer_columns(self):
        # 2x3 of 20x10 is 40x30 (score 10), ahead of 3x2 and 1x6 (score 40)
        assert solve(6, 20, 10) == GridShape(2, 3)

    def test_solve_when_tie_then_first_discovered(self):
        # 2x1 and 1x2 tiles of 1x1 tie at score 1; (1, 2) is discovered first
        assert solve(2, 1, 1) == GridShape(1, 2)

    def test_solve_when_zero_tile_size_then_terminates(self):
        grid = solve(5, 0, 0)

        assert grid.cell_count >= 5

    @pytest.mark.parametrize("count", [0, -1])
    def test_solve_when_non_positive_count_then_raises(self, count):
        with pytest.raises(InvalidArgumentError):
            solve(count, 1, 1)

    def test_solve_when_negative_tile_then_raises(self):
        with pytest.raises(InvalidArgumentError):
            solve(4, -1, 1)
