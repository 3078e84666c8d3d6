"""A fixed-capacity binary max-heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

DEFAULT_CAPACITY = 100


class HeapFullError(Exception):
    """Raised when the heap cannot hold more values."""


class HeapEmptyError(Exception):
    """Raised when reading from an empty heap."""


def _parent(i: int) -> int:
    return (i - 1) // 2


class MaxHeap:
    """A max-heap stored in an array, holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._data: list[Any] = []

    @classmethod
    def from_iterable(
        cls, values: Iterable[Any], capacity: int = DEFAULT_CAPACITY
    ) -> MaxHeap:
        """Build a heap from *values* bottom-up, starting at the last inner node."""
        data = list(values)
        if len(data) > capacity:
            raise HeapFullError("配列のサイズが大きすぎます")
        heap = cls(capacity)
        heap._data = data
        for index in range(len(data) // 2 - 1, -1, -1):
            heap._sift_down(index)
        return heap

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0 and data[_parent(index)] < data[index]:
            parent = _parent(index)
            data[parent], data[index] = data[index], data[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and data[left] > data[largest]:
                largest = left
            if right < size and data[right] > data[largest]:
                largest = right
            if largest == index:
                return
            data[index], data[largest] = data[largest], data[index]
            index = largest

    def insert(self, value: Any) -> None:
        """Add *value*; raise HeapFullError when the heap is at capacity."""
        if len(self._data) >= self.capacity:
            raise HeapFullError("ヒープが満杯です")
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def extract_max(self) -> Any:
        """Remove and return the largest value."""
        if not self._data:
            raise HeapEmptyError("ヒープが空です")
        largest = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return largest

    def peek_max(self) -> Any:
        """Return the largest value without removing it."""
        if not self._data:
            raise HeapEmptyError("ヒープが空です")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in their array (level) order."""
        return iter(list(self._data))

    def __str__(self) -> str:
        return "ヒープ: " + " ".join(str(value) for value in self._data)

    def __repr__(self) -> str:
        return f"MaxHeap(capacity={self.capacity}, data={self._data!r})"