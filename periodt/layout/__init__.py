"""
Layout Module for Periodt
Periodic-table shaped grid layout

Public API:
    - LayoutEngine: Main layout calculation engine
    - layout: One-call pipeline returning the grid
    - group_items / order_groups: Grouping and ordering stages
    - plan_dimensions / ensure_capacity: Grid sizing
    - build_mask: Silhouette mask
"""

from .engine import LayoutEngine, layout, periodt
from .grouping import group_items, order_groups
from .mask import build_mask
from .sizing import (
    SIZING_STRATEGIES,
    WING_STEPS,
    ensure_capacity,
    mask_capacity,
    plan_dimensions,
)

__all__ = [
    'LayoutEngine',
    'layout',
    'periodt',
    'group_items',
    'order_groups',
    'build_mask',
    'SIZING_STRATEGIES',
    'WING_STEPS',
    'ensure_capacity',
    'mask_capacity',
    'plan_dimensions',
]
