"""
I/O Readers

Reads items to lay out from text files.
"""

from __future__ import annotations
from typing import List, Literal
from pathlib import Path
import logging
import re

logger = logging.getLogger(__name__)

ReadMode = Literal['chars', 'tokens']


def split_items(text: str, mode: ReadMode = 'chars') -> List[str]:
    """
    Split text into items

    Args:
        text: Raw text
        mode: 'chars' for every non-whitespace character, 'tokens' for
              whitespace/comma separated words

    Returns:
        Items in text order
    """
    if mode == 'chars':
        return [c for c in text if not c.isspace()]
    if mode == 'tokens':
        return [token for token in re.split(r'[\s,]+', text) if token]
    raise ValueError(f"Unknown read mode: {mode!r}")


def read_items(input_file: str, mode: ReadMode = 'chars') -> List[str]:
    """
    Read items from a text file

    Args:
        input_file: Path to text file
        mode: See split_items

    Returns:
        Items in file order
    """
    path = Path(input_file)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    items = split_items(path.read_text(encoding='utf-8'), mode)
    logger.info(f"Read {len(items)} items from {input_file}")
    return items
