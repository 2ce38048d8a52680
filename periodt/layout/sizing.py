"""
Grid sizing strategies

Each strategy maps an item count to grid dimensions. Strategies are
registered by name so the engine can pick one from configuration.
"""
from __future__ import annotations
from typing import Callable, Dict, Sequence, Tuple
import logging
from math import floor, sqrt

from ..types import GridDimensions

logger = logging.getLogger(__name__)

WING_STEPS: Tuple[Tuple[int, int], ...] = ((2, 2), (2, 4), (5, 5))

MIN_FRACTION_COLUMNS = 10
MIN_FRACTION_ROWS = 3


def _round_half_up(value: float) -> int:
    return int(floor(value + 0.5))


def fraction_dimensions(n_items: int) -> GridDimensions:
    """One column per 5 items and one row per 13, floored at 10x3"""
    columns = max(MIN_FRACTION_COLUMNS, n_items // 5)
    rows = max(MIN_FRACTION_ROWS, n_items // 13)
    return GridDimensions(columns=columns, rows=rows)


def sqrt_dimensions(n_items: int) -> GridDimensions:
    """Roughly 3:1 aspect ratio with about 5/3 cells per item"""
    columns = max(1, _round_half_up(sqrt(n_items * 5)))
    rows = max(1, _round_half_up(columns / 3))
    return GridDimensions(columns=columns, rows=rows)


SIZING_STRATEGIES: Dict[str, Callable[[int], GridDimensions]] = {
    'fraction': fraction_dimensions,
    'sqrt': sqrt_dimensions,
}


def plan_dimensions(n_items: int, strategy: str = 'fraction') -> GridDimensions:
    """
    Compute grid dimensions for ``n_items`` items

    Args:
        n_items: Flattened item count (>= 0)
        strategy: Name of a registered sizing strategy

    Returns:
        GridDimensions with columns and rows >= 1
    """
    if n_items < 0:
        raise ValueError(f"Item count must be non-negative, got {n_items}")
    try:
        planner = SIZING_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown sizing strategy {strategy!r}, expected one of {sorted(SIZING_STRATEGIES)}"
        ) from None

    dimensions = planner(n_items)
    logger.debug(f"Sizing '{strategy}' for {n_items} items: "
                 f"{dimensions.columns} columns x {dimensions.rows} rows")
    return dimensions


def step_span(columns: int, left_count: int, right_count: int) -> Tuple[int, int]:
    """
    Clamp a stepped row's (left, right) active counts to the row width

    The right span never overlaps the left one.
    """
    left = min(left_count, columns)
    right = min(right_count, max(0, columns - left))
    return left, right


def mask_capacity(
    rows: int,
    columns: int,
    steps: Sequence[Tuple[int, int]] = WING_STEPS
) -> int:
    """Number of active cells in the silhouette mask, without building it"""
    if rows < len(steps):
        return rows * columns
    stepped = sum(sum(step_span(columns, left, right)) for left, right in steps)
    return stepped + (rows - len(steps)) * columns


def ensure_capacity(
    dimensions: GridDimensions,
    n_items: int,
    steps: Sequence[Tuple[int, int]] = WING_STEPS
) -> GridDimensions:
    """
    Add rows until the mask can hold every item

    Columns are left alone so the silhouette keeps its width.

    Args:
        dimensions: Dimensions from a sizing strategy
        n_items: Number of items that must fit
        steps: Wing steps used by the mask

    Returns:
        Dimensions whose mask capacity is at least ``n_items``
    """
    rows = dimensions.rows
    while mask_capacity(rows, dimensions.columns, steps) < n_items:
        rows += 1

    if rows != dimensions.rows:
        logger.warning(f"Grid {dimensions.columns}x{dimensions.rows} too small for "
                       f"{n_items} items, growing to {rows} rows")
        return GridDimensions(columns=dimensions.columns, rows=rows)
    return dimensions
