"""
Core types for Periodt

Grid storage and the data structures handed back by the layout engine.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, TypeVar
import numpy as np
import pandas as pd


T = TypeVar('T')


@dataclass(frozen=True)
class GridDimensions:
    """
    Grid size chosen by the dimension planner

    Attributes:
        columns: Number of columns (grid width)
        rows: Number of rows (grid height)
    """
    columns: int
    rows: int

    @property
    def cell_count(self) -> int:
        """Total number of cells, active or not"""
        return self.columns * self.rows


class Grid(Generic[T]):
    """
    Column x row addressable array of cells

    Cells live in a flat row-major list indexed by ``row * width + col``.
    Each cell carries an explicit occupied flag so filler never has to be
    told apart from content by value comparison.

    Example:
        >>> grid = Grid(3, 2, lambda: ' ')
        >>> grid.set(1, 0, 'A')
        >>> grid.get(1, 0), grid.is_occupied(0, 0)
        ('A', False)
    """

    def __init__(self, width: int, height: int, make_default: Callable[[], T]) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._make_default = make_default
        self._values: List[T] = [make_default() for _ in range(width * height)]
        self._occupied = np.zeros((height, width), dtype=bool)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def occupied_count(self) -> int:
        """Number of cells holding real content"""
        return int(self._occupied.sum())

    def _index(self, col: int, row: int) -> int:
        if not (0 <= col < self._width and 0 <= row < self._height):
            raise IndexError(
                f"Cell ({col}, {row}) outside {self._width}x{self._height} grid"
            )
        return row * self._width + col

    def get(self, col: int, row: int) -> T:
        return self._values[self._index(col, row)]

    def set(self, col: int, row: int, value: T) -> None:
        """Store real content at (col, row)"""
        self._values[self._index(col, row)] = value
        self._occupied[row, col] = True

    def clear(self, col: int, row: int) -> None:
        """Reset (col, row) to a fresh filler value"""
        self._values[self._index(col, row)] = self._make_default()
        self._occupied[row, col] = False

    def is_occupied(self, col: int, row: int) -> bool:
        self._index(col, row)
        return bool(self._occupied[row, col])

    def occupancy(self) -> np.ndarray:
        """Copy of the occupied flags, shape (height, width)"""
        return self._occupied.copy()

    def truncate(self, width: int) -> 'Grid[T]':
        """
        New grid keeping only the leading ``width`` columns

        Args:
            width: Number of columns to keep (0 <= width <= self.width)

        Returns:
            Grid with the same height and cell state for kept columns
        """
        if not 0 <= width <= self._width:
            raise ValueError(f"Cannot truncate {self._width}-column grid to {width} columns")
        result: Grid[T] = Grid(width, self._height, self._make_default)
        result._values = [value for row in self.rows() for value in row[:width]]
        result._occupied = self._occupied[:, :width].copy()
        return result

    def rows(self) -> List[List[T]]:
        """Plain row-major 2D list of cell values"""
        return [
            self._values[row * self._width:(row + 1) * self._width]
            for row in range(self._height)
        ]

    def to_frame(self) -> pd.DataFrame:
        """Row-major DataFrame view (rows = grid rows, columns = grid columns)"""
        return pd.DataFrame(self.rows(), columns=range(self._width), dtype=object)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._values == other._values
            and bool(np.array_equal(self._occupied, other._occupied))
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, occupied={self.occupied_count})"


@dataclass
class LayoutResult(Generic[T]):
    """
    Complete layout solution for one call

    This is the output of LayoutEngine and input to the renderers.

    Attributes:
        grid: Populated grid (filler where nothing was placed)
        mask: Active-cell mask, shape (rows, columns), same width as grid
        dimensions: Dimensions chosen before any trailing-column trim
        n_items: Number of input items
        group_keys: Group keys in placement order
        sizing: Name of the sizing strategy used
        randomized: Whether group order was shuffled
        trimmed_columns: Trailing filler columns removed by the trim
        layout_stats: Statistics about the layout
    """
    grid: Grid[T]
    mask: np.ndarray
    dimensions: GridDimensions
    n_items: int
    group_keys: List[str]
    sizing: str
    randomized: bool
    trimmed_columns: int = 0
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_groups(self) -> int:
        """Number of distinct keys"""
        return len(self.group_keys)

    @property
    def capacity(self) -> int:
        """Number of active cells in the mask"""
        return int(self.mask.sum())

    @property
    def n_filler_slots(self) -> int:
        """Active cells left as filler"""
        return self.capacity - self.grid.occupied_count
