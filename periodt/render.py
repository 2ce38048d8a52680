"""
Grid rendering

Text and matplotlib renderings of a laid-out grid, plus the item
conservation check renderers rely on.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Union
from pathlib import Path
import logging
import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .config import RenderConfig
from .types import Grid

logger = logging.getLogger(__name__)


class LayoutInvariantError(RuntimeError):
    """Raised when a grid does not hold exactly the items it was built from"""


def count_occupied(grid: Grid) -> int:
    """Number of cells holding real content"""
    return grid.occupied_count


def check_conservation(grid: Grid, n_items: int) -> None:
    """
    Verify the grid holds exactly ``n_items`` items

    Raises:
        LayoutInvariantError: If the occupied cell count differs
    """
    occupied = count_occupied(grid)
    if occupied != n_items:
        raise LayoutInvariantError(
            f"Grid holds {occupied} items, expected {n_items}"
        )


def format_grid(grid: Grid, cell_width: int = 3) -> str:
    """
    Render the grid as text, one line per row

    Each cell is ``str(value)`` left-justified to ``cell_width``.
    """
    lines = [
        ''.join(str(value).ljust(cell_width) for value in row)
        for row in grid.rows()
    ]
    return '\n'.join(lines)


def plot_grid(
    grid: Grid,
    key_of: Callable[[Any], str],
    config: Optional[RenderConfig] = None,
    mask: Optional[np.ndarray] = None,
    output_file: Optional[Union[str, Path]] = None
) -> Figure:
    """
    Draw the grid as coloured tiles, one colour per key

    Args:
        grid: Laid-out grid
        key_of: Key function used for the layout (chooses tile colour)
        config: Render configuration (defaults if None)
        mask: Active-cell mask; with ``config.show_filler`` empty active
              cells are drawn as pale tiles
        output_file: Save the figure here when given

    Returns:
        The matplotlib Figure
    """
    config = config or RenderConfig()

    width = max(grid.width, 1)
    height = max(grid.height, 1)
    fig, ax = plt.subplots(figsize=(width * config.tile_size, height * config.tile_size))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.axis('off')

    keys = sorted({
        key_of(grid.get(col, row))
        for row in range(grid.height)
        for col in range(grid.width)
        if grid.is_occupied(col, row)
    })
    cmap = matplotlib.colormaps[config.colormap]
    colors: Dict[str, Any] = {key: cmap(i % cmap.N) for i, key in enumerate(keys)}

    gap = config.tile_gap
    for row in range(grid.height):
        for col in range(grid.width):
            if grid.is_occupied(col, row):
                value = grid.get(col, row)
                color = colors[key_of(value)]
                label = str(value)
            elif config.show_filler and mask is not None and mask[row, col]:
                color = config.filler_color
                label = ''
            else:
                continue

            ax.add_patch(plt.Rectangle(
                (col + gap / 2, row + gap / 2), 1 - gap, 1 - gap,
                facecolor=color, edgecolor='#333333', linewidth=0.6
            ))
            if label:
                ax.text(col + 0.5, row + 0.5, label, ha='center', va='center',
                        fontsize=config.label_fontsize)

    logger.debug(f"Plotted {grid.occupied_count} tiles in {len(keys)} colours")

    if output_file is not None:
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_file, dpi=config.dpi, bbox_inches='tight')
        logger.info(f"Figure saved to {output_file}")

    return fig
