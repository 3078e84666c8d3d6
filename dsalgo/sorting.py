"""Bubble sort and merge sort, with a step trace of merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class MergeStep:
    """One split or merge of the range ``left..right`` at recursion ``depth``."""

    kind: Literal["split", "merge"]
    left: int
    right: int
    depth: int
    values: tuple[Any, ...]


_LABELS = {"split": "分割", "merge": "マージ"}


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using bubble sort, stopping early once no swaps occur."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using a stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    half = (len(values) + 1) // 2
    return _merge(merge_sort(values[:half]), merge_sort(values[half:]))


def _trace(work: list[Any], left: int, right: int, depth: int) -> Iterator[MergeStep]:
    if left >= right:
        return
    yield MergeStep("split", left, right, depth, tuple(work[left : right + 1]))
    mid = left + (right - left) // 2
    yield from _trace(work, left, mid, depth + 1)
    yield from _trace(work, mid + 1, right, depth + 1)
    work[left : right + 1] = _merge(work[left : mid + 1], work[mid + 1 : right + 1])
    yield MergeStep("merge", left, right, depth, tuple(work[left : right + 1]))


def merge_sort_steps(items: Iterable[Any]) -> Iterator[MergeStep]:
    """Yield every split and merge performed while merge-sorting *items*."""
    work = list(items)
    return _trace(work, 0, len(work) - 1, 0)


def format_merge_trace(items: Iterable[Any]) -> str:
    """Render the merge sort steps of *items* as indented lines."""
    lines = []
    for step in merge_sort_steps(items):
        values = " ".join(str(value) for value in step.values)
        lines.append(
            f"{'  ' * step.depth}{_LABELS[step.kind]}: "
            f"[{step.left}..{step.right}] {values}"
        )
    return "\n".join(lines)