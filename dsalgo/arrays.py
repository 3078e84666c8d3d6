"""A fixed-capacity array together with basic array helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def format_array(items: Iterable[Any]) -> str:
    """Render the items separated by single spaces."""
    return " ".join(str(item) for item in items)


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Return the index of the first item equal to *target*, or -1 if absent."""
    return next((index for index, item in enumerate(items) if item == target), -1)


class BoundedArray:
    """An array that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int, items: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items = list(items)
        if len(self._items) > capacity:
            raise ValueError(
                f"{len(self._items)} initial items exceed capacity {capacity}"
            )

    def append(self, element: Any) -> None:
        """Add *element* at the end; raise OverflowError when the array is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("配列が満杯です")
        self._items.append(element)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __str__(self) -> str:
        return format_array(self._items)

    def __repr__(self) -> str:
        return f"BoundedArray(capacity={self.capacity}, items={self._items!r})"