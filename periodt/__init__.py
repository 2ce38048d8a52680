"""Periodt: periodic-table shaped grid layouts"""

from .config import LayoutConfig, RenderConfig
from .types import Grid, GridDimensions, LayoutResult
from .layout import LayoutEngine, periodt
from .render import LayoutInvariantError, check_conservation, format_grid, plot_grid

__version__ = "0.1.0"
__all__ = [
    "LayoutConfig", "RenderConfig",
    "Grid", "GridDimensions", "LayoutResult",
    "LayoutEngine", "periodt",
    "LayoutInvariantError", "check_conservation", "format_grid", "plot_grid",
]
