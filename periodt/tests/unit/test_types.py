"""
Unit tests for Grid and layout result types
"""
import numpy as np
import pytest
from periodt.types import Grid, GridDimensions, LayoutResult


@pytest.mark.unit
class TestGrid:
    """Tests for Grid"""

    def test_starts_as_filler(self):
        grid = Grid(3, 2, lambda: ".")
        assert (grid.width, grid.height) == (3, 2)
        assert grid.occupied_count == 0
        assert grid.rows() == [[".", ".", "."], [".", ".", "."]]

    def test_set_and_get(self):
        grid = Grid(3, 2, lambda: ".")
        grid.set(2, 1, "X")
        assert grid.get(2, 1) == "X"
        assert grid.is_occupied(2, 1)
        assert grid.rows()[1] == [".", ".", "X"]

    def test_clear(self):
        grid = Grid(2, 2, lambda: ".")
        grid.set(0, 0, "X")
        grid.clear(0, 0)
        assert grid.get(0, 0) == "."
        assert not grid.is_occupied(0, 0)

    def test_filler_equal_to_content_still_counts(self):
        """Occupancy is tracked explicitly, not by comparing to the filler"""
        grid = Grid(2, 1, lambda: " ")
        grid.set(1, 0, " ")
        assert grid.occupied_count == 1

    def test_fresh_filler_per_cell(self):
        grid = Grid(2, 1, list)
        grid.get(0, 0).append(1)
        assert grid.get(1, 0) == []

    @pytest.mark.parametrize("col,row", [(-1, 0), (3, 0), (0, 2), (0, -1)])
    def test_out_of_range(self, col, row):
        grid = Grid(3, 2, lambda: ".")
        with pytest.raises(IndexError):
            grid.get(col, row)
        with pytest.raises(IndexError):
            grid.set(col, row, "X")

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Grid(-1, 2, lambda: ".")

    def test_truncate(self):
        grid = Grid(4, 2, lambda: ".")
        grid.set(1, 1, "B")
        grid.set(3, 0, "Z")

        kept = grid.truncate(2)

        assert (kept.width, kept.height) == (2, 2)
        assert kept.get(1, 1) == "B"
        assert kept.occupied_count == 1
        assert grid.width == 4

    def test_truncate_out_of_range(self):
        with pytest.raises(ValueError):
            Grid(2, 2, lambda: ".").truncate(3)

    def test_to_frame(self):
        grid = Grid(3, 2, lambda: " ")
        grid.set(0, 1, "A")
        frame = grid.to_frame()
        assert frame.shape == (2, 3)
        assert frame.iloc[1, 0] == "A"
        assert frame.iloc[0, 0] == " "

    def test_equality(self):
        a = Grid(2, 1, lambda: " ")
        b = Grid(2, 1, lambda: " ")
        assert a == b
        b.set(0, 0, " ")
        assert a != b


@pytest.mark.unit
def test_layout_result_properties():
    grid = Grid(2, 2, lambda: " ")
    grid.set(0, 0, "A")
    result = LayoutResult(
        grid=grid,
        mask=np.ones((2, 2), dtype=bool),
        dimensions=GridDimensions(columns=2, rows=2),
        n_items=1,
        group_keys=["A"],
        sizing="fraction",
        randomized=False,
    )
    assert result.n_groups == 1
    assert result.capacity == 4
    assert result.n_filler_slots == 3
    assert result.dimensions.cell_count == 4
