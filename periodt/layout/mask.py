"""
Silhouette mask

Boolean (rows, columns) matrix marking which cells may receive items:
stepped "wings" on the first rows, a full rectangular body below.
"""
from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

from .sizing import WING_STEPS, step_span


def build_mask(
    rows: int,
    columns: int,
    steps: Sequence[Tuple[int, int]] = WING_STEPS
) -> np.ndarray:
    """
    Build the periodic-table silhouette mask

    Grids with fewer rows than steps are fully active. Otherwise each step
    row activates ``left`` leading and ``right`` trailing cells (clamped
    so the spans never overlap) and every later row is fully active.

    Args:
        rows: Grid height
        columns: Grid width
        steps: (left, right) active counts per stepped row

    Returns:
        Read-only boolean array of shape (rows, columns)

    Example:
        >>> build_mask(3, 10)[0].astype(int).tolist()
        [1, 1, 0, 0, 0, 0, 0, 0, 1, 1]
    """
    if rows < 0 or columns < 0:
        raise ValueError(f"Mask dimensions must be non-negative, got {rows}x{columns}")

    mask = np.ones((rows, columns), dtype=bool)
    if rows >= len(steps):
        for row, (left_count, right_count) in enumerate(steps):
            left, right = step_span(columns, left_count, right_count)
            mask[row, :] = False
            mask[row, :left] = True
            if right:
                mask[row, columns - right:] = True

    mask.flags.writeable = False
    return mask
