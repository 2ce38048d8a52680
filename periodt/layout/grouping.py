"""
Grouping and ordering

Partitions items into same-key clusters and flattens the clusters into
the placement sequence.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Protocol, Sequence, TypeVar
import logging
import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar('T')


class PermutationSource(Protocol):
    """Anything that can produce a permutation of range(n)"""

    def permutation(self, n: int) -> Sequence[int]: ...


def group_items(items: Sequence[T], key_of: Callable[[T], str]) -> List[List[T]]:
    """
    Split items into groups of equal key, in ascending key order

    Uses a stable sort so items keep their input order inside a group.

    Args:
        items: Items to group
        key_of: Key extraction function

    Returns:
        List of non-empty groups
    """
    keyed = sorted(((key_of(item), item) for item in items), key=lambda pair: pair[0])

    groups: List[List[T]] = []
    previous_key: Optional[str] = None
    for key, item in keyed:
        if not groups or key != previous_key:
            groups.append([])
            previous_key = key
        groups[-1].append(item)

    logger.debug(f"Grouped {len(items)} items into {len(groups)} groups")
    return groups


def order_groups(
    groups: Sequence[Sequence[T]],
    randomize: bool = False,
    rng: Optional[PermutationSource] = None
) -> List[T]:
    """
    Concatenate groups into one flat sequence

    With ``randomize`` the group order is permuted; items never move
    between groups and intra-group order is untouched. The input is not
    modified.

    Args:
        groups: Groups in their sorted order
        randomize: Shuffle group order before concatenating
        rng: Permutation source (numpy Generator or compatible); a fresh
             ``np.random.default_rng()`` is used when None

    Returns:
        Flat list of items
    """
    order: Sequence[int] = range(len(groups))
    if randomize and len(groups) > 1:
        source = rng if rng is not None else np.random.default_rng()
        order = [int(i) for i in source.permutation(len(groups))]
        if sorted(order) != list(range(len(groups))):
            raise ValueError(f"Permutation source returned an invalid permutation: {order}")
        logger.debug(f"Group order: {order}")

    return [item for index in order for item in groups[index]]
