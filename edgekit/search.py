"""Lookups in sorted range tables."""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T", int, float)


def binary_search_within_range(
    ranges: Sequence[Tuple[T, T]], value: T
) -> Optional[int]:
    """Return the index of the half-open range ``[start, end)`` holding ``value``.

    ``ranges`` must be sorted and non-overlapping. Returns ``None`` when no
    range contains the value.
    """
    index = bisect_right(ranges, value, key=lambda pair: pair[0]) - 1
    if index < 0:
        return None
    start, end = ranges[index]
    if start <= value < end:
        return index
    return None


def binary_search_end(ends: Sequence[T], value: T) -> Optional[int]:
    """Return the index of the first end strictly greater than ``value``.

    ``ends`` are the sorted exclusive ends of consecutive segments starting at
    zero. Returns ``None`` when ``value`` lies past the last end, or, for a
    single segment, before zero.
    """
    if not ends:
        return None
    if len(ends) == 1:
        return 0 if 0 <= value < ends[0] else None
    index = bisect_right(ends, value)
    if index == len(ends):
        return None
    return index