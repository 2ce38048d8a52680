"""
Unit tests for grid sizing and the silhouette mask
"""
import numpy as np
import pytest
from periodt.layout import build_mask, ensure_capacity, mask_capacity, plan_dimensions
from periodt.types import GridDimensions


@pytest.mark.unit
class TestFractionSizing:
    """Tests for the default 'fraction' strategy"""

    @pytest.mark.parametrize("n", [0, 1, 3, 20, 49])
    def test_floors_applied(self, n):
        """Small inputs get the 10x3 minimum"""
        assert plan_dimensions(n) == GridDimensions(columns=10, rows=3)

    def test_large_input(self):
        assert plan_dimensions(100) == GridDimensions(columns=20, rows=7)
        assert plan_dimensions(260) == GridDimensions(columns=52, rows=20)

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            plan_dimensions(-1)

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError, match="Unknown sizing strategy"):
            plan_dimensions(10, "golden")


@pytest.mark.unit
class TestSqrtSizing:
    """Tests for the 'sqrt' strategy"""

    @pytest.mark.parametrize("n,expected", [
        (0, (1, 1)),
        (1, (2, 1)),
        (3, (4, 1)),
        (20, (10, 3)),
        (100, (22, 7)),
    ])
    def test_dimensions(self, n, expected):
        dims = plan_dimensions(n, "sqrt")
        assert (dims.columns, dims.rows) == expected

    def test_never_below_one(self):
        for n in range(0, 50):
            dims = plan_dimensions(n, "sqrt")
            assert dims.columns >= 1 and dims.rows >= 1


@pytest.mark.unit
class TestCapacity:
    """Tests for mask_capacity and ensure_capacity"""

    def test_capacity_matches_mask(self):
        for rows in range(0, 6):
            for columns in range(0, 14):
                assert mask_capacity(rows, columns) == int(build_mask(rows, columns).sum())

    def test_minimum_grid_capacity(self):
        """10x3 silhouette holds 4 + 6 + 10 items"""
        assert mask_capacity(3, 10) == 20

    def test_grows_rows_when_too_small(self):
        """21 items do not fit the 10x3 silhouette"""
        dims = ensure_capacity(plan_dimensions(21), 21)
        assert dims == GridDimensions(columns=10, rows=4)

    def test_untouched_when_large_enough(self):
        dims = plan_dimensions(3)
        assert ensure_capacity(dims, 3) is dims

    def test_always_fits(self):
        for strategy in ("fraction", "sqrt"):
            for n in range(0, 300, 7):
                dims = ensure_capacity(plan_dimensions(n, strategy), n)
                assert mask_capacity(dims.rows, dims.columns) >= n


@pytest.mark.unit
class TestBuildMask:
    """Tests for build_mask"""

    def test_shape_and_dtype(self):
        mask = build_mask(4, 12)
        assert mask.shape == (4, 12)
        assert mask.dtype == bool

    def test_wing_rows(self):
        """Rows 0-2 have 2+2, 2+4 and 5+5 active cells"""
        mask = build_mask(5, 18)
        assert mask[0].tolist() == [True] * 2 + [False] * 14 + [True] * 2
        assert mask[1].tolist() == [True] * 2 + [False] * 12 + [True] * 4
        assert mask[2].tolist() == [True] * 5 + [False] * 8 + [True] * 5
        assert mask[3:].all()

    @pytest.mark.parametrize("columns", range(3, 25))
    def test_wing_counts_clamped(self, columns):
        mask = build_mask(3, columns)
        expected = [
            min(2, columns) + min(2, max(0, columns - 2)),
            min(2, columns) + min(4, max(0, columns - 2)),
            min(5, columns) + min(5, max(0, columns - min(5, columns))),
        ]
        assert mask.sum(axis=1).tolist() == expected

    def test_narrow_grid_rows_fully_active(self):
        """Clamping can leave a step row fully active"""
        mask = build_mask(3, 4)
        assert mask[0].tolist() == [True, True, True, True]
        assert mask[2].all()

    @pytest.mark.parametrize("rows", [0, 1, 2])
    def test_fewer_than_three_rows_all_active(self, rows):
        mask = build_mask(rows, 7)
        assert mask.shape == (rows, 7)
        assert mask.all()

    def test_read_only(self):
        mask = build_mask(3, 10)
        with pytest.raises(ValueError):
            mask[0, 3] = True

    def test_deterministic(self):
        assert np.array_equal(build_mask(6, 15), build_mask(6, 15))

    def test_custom_steps(self):
        mask = build_mask(2, 6, steps=((1, 1),))
        assert mask[0].tolist() == [True, False, False, False, False, True]
        assert mask[1].all()
