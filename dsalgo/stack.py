"""A fixed-capacity LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 100


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, item: Any) -> None:
        """Push *item*; raise StackOverflowError if the stack is full."""
        if self.is_full():
            raise StackOverflowError("スタックオーバーフロー")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflowError if empty."""
        if self.is_empty():
            raise StackUnderflowError("スタックアンダーフロー")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("スタックが空です")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        if self.is_empty():
            return "スタックが空です"
        return "スタック: " + " ".join(str(item) for item in self)