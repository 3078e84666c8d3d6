"""A fixed-capacity FIFO queue backed by a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 100


class QueueOverflowError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueUnderflowError(Exception):
    """Raised when dequeuing or reading the front of an empty queue."""


class CircularQueue:
    """A queue holding at most ``capacity`` items in a circular buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def enqueue(self, item: Any) -> None:
        """Add *item* at the rear; raise QueueOverflowError if the queue is full."""
        if self.is_full():
            raise QueueOverflowError("キューオーバーフロー")
        rear = (self._front + self._count) % self.capacity
        self._slots[rear] = item
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueUnderflowError if empty."""
        if self.is_empty():
            raise QueueUnderflowError("キューアンダーフロー")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return item

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueUnderflowError("キューが空です")
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]

    def __str__(self) -> str:
        if self.is_empty():
            return "キューが空です"
        return "キュー: " + " ".join(str(item) for item in self)