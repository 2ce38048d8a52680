"""
I/O Writers

Writes laid-out grids as tab separated text.
"""

from __future__ import annotations
from typing import Union
from pathlib import Path
import logging

from ..types import Grid

logger = logging.getLogger(__name__)


def write_grid_tsv(grid: Grid, output_file: Union[str, Path]) -> None:
    """
    Write the grid row by row, one cell per tab-separated field

    Args:
        grid: Grid to write
        output_file: Destination path (parent directories are created)
    """
    Path(output_file).parent.mkdir(parents=True, exist_ok=True)
    grid.to_frame().to_csv(output_file, sep='\t', index=False, header=False)
    logger.info(f"Grid written to {output_file} ({grid.width}x{grid.height})")
