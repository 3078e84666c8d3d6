"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search_iterative(items: Sequence[Any], target: Any) -> int:
    """Return an index of *target* in sorted *items*, or -1 if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def _search_range(items: Sequence[Any], left: int, right: int, target: Any) -> int:
    if left > right:
        return -1
    mid = left + (right - left) // 2
    if items[mid] == target:
        return mid
    if items[mid] > target:
        return _search_range(items, left, mid - 1, target)
    return _search_range(items, mid + 1, right, target)


def binary_search_recursive(items: Sequence[Any], target: Any) -> int:
    """Recursive binary search; return an index of *target* or -1 if absent."""
    return _search_range(items, 0, len(items) - 1, target)