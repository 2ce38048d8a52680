"""I/O utilities for Periodt"""

from .readers import read_items
from .writers import write_grid_tsv

__all__ = ['read_items', 'write_grid_tsv']
