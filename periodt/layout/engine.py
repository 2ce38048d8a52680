"""
Layout Engine for Periodt

Arranges items into a periodic-table shaped grid.

Pipeline:
1. Group items by key (ascending key order)
2. Flatten groups, optionally shuffling group order
3. Size the grid from the item count
4. Build the silhouette mask
5. Place items column-major into active cells
6. Compact each column's active runs, optionally trim empty trailing columns
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence, TypeVar
import numpy as np
import logging

from ..config import LayoutConfig
from ..types import Grid, GridDimensions, LayoutResult
from .grouping import PermutationSource, group_items, order_groups
from .mask import build_mask
from .sizing import ensure_capacity, plan_dimensions

logger = logging.getLogger(__name__)

T = TypeVar('T')


class LayoutEngine:
    """
    Periodic-table layout engine

    Holds configuration and the permutation source used for group
    shuffling; every call to calculate_layout builds a fresh grid.
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        rng: Optional[PermutationSource] = None
    ) -> None:
        """
        Initialize layout engine

        Args:
            config: Layout configuration (defaults if None)
            rng: Permutation source for group shuffling. If None, a numpy
                 Generator seeded from ``config.seed`` is created.
        """
        self.config: LayoutConfig = config or LayoutConfig()
        self.rng: PermutationSource = (
            rng if rng is not None else np.random.default_rng(self.config.seed)
        )
        logger.debug(f"LayoutEngine initialized (sizing={self.config.sizing})")

    def calculate_layout(
        self,
        items: Sequence[T],
        key_of: Callable[[T], str],
        make_default: Callable[[], T],
        randomize: Optional[bool] = None
    ) -> LayoutResult[T]:
        """
        Calculate layout for all items

        Args:
            items: Items to arrange
            key_of: Grouping key for an item
            make_default: Factory for filler values
            randomize: Shuffle group order (uses config default if None)

        Returns:
            LayoutResult with the populated grid and its mask
        """
        if randomize is None:
            randomize = self.config.randomize

        logger.info(f"Calculating layout for {len(items)} items")
        if len(items) == 0:
            logger.warning("No items to lay out, grid will be all filler")

        # Step 1-2: group and flatten
        groups = group_items(items, key_of)
        sequence = order_groups(groups, randomize=randomize, rng=self.rng)
        group_keys = _run_keys(sequence, key_of)

        # Step 3-4: size and shape
        dimensions = plan_dimensions(len(sequence), self.config.sizing)
        if self.config.ensure_capacity:
            dimensions = ensure_capacity(dimensions, len(sequence), self.config.wing_steps)
        mask = build_mask(dimensions.rows, dimensions.columns, self.config.wing_steps)
        logger.info(f"Grid {dimensions.columns}x{dimensions.rows}, "
                    f"{int(mask.sum())} active cells for {len(groups)} groups")

        # Step 5-6: place and compact
        grid = self.place(sequence, mask, make_default)
        self.compact(grid, mask)

        trimmed = 0
        if self.config.trim_trailing:
            grid = self.trim_trailing_filler(grid)
            trimmed = dimensions.columns - grid.width
            mask = mask[:, :grid.width]

        return LayoutResult(
            grid=grid,
            mask=mask,
            dimensions=dimensions,
            n_items=len(items),
            group_keys=group_keys,
            sizing=self.config.sizing,
            randomized=bool(randomize),
            trimmed_columns=trimmed,
            layout_stats={
                'capacity': int(mask.sum()),
                'occupied': grid.occupied_count,
                'group_sizes': {key_of(group[0]): len(group) for group in groups},
            }
        )

    @staticmethod
    def place(
        sequence: Sequence[T],
        mask: np.ndarray,
        make_default: Callable[[], T]
    ) -> Grid[T]:
        """
        Write items into active cells in column-major order

        Columns outer, rows inner. Active cells past the end of the
        sequence, and every inactive cell, stay filler.

        Args:
            sequence: Items in placement order
            mask: Active-cell mask, shape (rows, columns)
            make_default: Factory for filler values

        Returns:
            Populated grid
        """
        n_rows, n_cols = mask.shape
        grid: Grid[T] = Grid(n_cols, n_rows, make_default)

        pointer = 0
        for col in range(n_cols):
            for row in range(n_rows):
                if pointer >= len(sequence):
                    break
                if mask[row, col]:
                    grid.set(col, row, sequence[pointer])
                    pointer += 1

        if pointer < len(sequence):
            logger.warning(f"Mask holds only {pointer} of {len(sequence)} items")
        logger.debug(f"Placed {pointer} items")
        return grid

    @staticmethod
    def compact(grid: Grid[T], mask: np.ndarray) -> None:
        """
        Slide content to the top of each active run, column by column

        A run is a maximal span of consecutive active rows in one column;
        inactive rows separate runs, which never exchange content.
        Modifies ``grid`` in place. Idempotent.

        Args:
            grid: Grid to compact
            mask: Active-cell mask the grid was filled with
        """
        n_rows, n_cols = mask.shape
        for col in range(n_cols):
            row = 0
            while row < n_rows:
                if not mask[row, col]:
                    row += 1
                    continue

                run_start = row
                values: List[T] = []
                while row < n_rows and mask[row, col]:
                    if grid.is_occupied(col, row):
                        values.append(grid.get(col, row))
                    row += 1

                for offset, value in enumerate(values):
                    grid.set(col, run_start + offset, value)
                for r in range(run_start + len(values), row):
                    if grid.is_occupied(col, r):
                        grid.clear(col, r)

    @staticmethod
    def trim_trailing_filler(grid: Grid[T]) -> Grid[T]:
        """
        Drop trailing columns that are filler in every row

        Per row, count trailing filler cells; the smallest count over all
        rows is the number of columns removed. Never removes content.

        Args:
            grid: Grid to trim

        Returns:
            New grid (or ``grid`` itself when nothing is trimmed)
        """
        if grid.height == 0 or grid.width == 0:
            return grid

        occupied = grid.occupancy()
        trailing = []
        for row_flags in occupied:
            filled = np.flatnonzero(row_flags)
            trailing.append(grid.width - (int(filled[-1]) + 1) if filled.size else grid.width)

        drop = min(trailing)
        if drop == 0:
            return grid
        logger.debug(f"Trimming {drop} trailing filler columns")
        return grid.truncate(grid.width - drop)


def _run_keys(sequence: Sequence[T], key_of: Callable[[T], str]) -> List[str]:
    """Keys of consecutive same-key runs, in sequence order"""
    keys: List[str] = []
    for item in sequence:
        key = key_of(item)
        if not keys or keys[-1] != key:
            keys.append(key)
    return keys


def layout(
    items: Sequence[T],
    key_of: Callable[[T], str],
    make_default: Callable[[], T],
    randomize: Optional[bool] = None,
    *,
    config: Optional[LayoutConfig] = None,
    rng: Optional[PermutationSource] = None
) -> Grid[T]:
    """
    Arrange items into a periodic-table shaped grid

    Args:
        items: Items to arrange
        key_of: Grouping key for an item
        make_default: Factory for filler values
        randomize: Shuffle group order (uses config default if None)
        config: Layout configuration (defaults if None)
        rng: Permutation source for group shuffling

    Returns:
        Grid holding every item exactly once

    Example:
        >>> grid = layout(['A', 'A', 'B'], lambda c: c, lambda: ' ')
        >>> grid.width, grid.height, grid.occupied_count
        (10, 3, 3)
    """
    engine = LayoutEngine(config, rng)
    return engine.calculate_layout(items, key_of, make_default, randomize).grid


def periodt(chars: Sequence[str], randomize: bool = False) -> Grid[str]:
    """Lay out single characters with a blank filler"""
    return layout(list(chars), lambda c: c, lambda: ' ', randomize)
