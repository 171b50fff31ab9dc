"""Sequence helpers used to verify long lists of texts in scroll-sized groups."""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar


T = TypeVar("T")


def split_into_parts(items: Sequence[T], parts: int) -> List[List[T]]:
    """
    Split a sequence into ``parts`` contiguous chunks of ``ceil(len / parts)`` items.

    Chunks are not rebalanced: the last ones may be short or empty, and
    concatenating them gives back ``items``.

    Args:
        items: Ordered items to split
        parts: Number of chunks, at least 1

    Returns:
        Exactly ``parts`` lists

    Example:
        >>> [len(p) for p in split_into_parts(list(range(10)), 3)]
        [4, 4, 2]
    """
    if parts < 1:
        raise ValueError(f"parts must be a positive integer, got {parts}")

    items = list(items)
    chunk_size = math.ceil(len(items) / parts)
    return [items[i * chunk_size:(i + 1) * chunk_size] for i in range(parts)]


__all__ = ["split_into_parts"]
