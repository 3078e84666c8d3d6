"""A singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list supporting head/tail insertion and deletion by value."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert_at_tail(item)

    def insert_at_head(self, data: Any) -> None:
        """Insert *data* at the front of the list."""
        self._head = _Node(data, self._head)
        self._size += 1

    def insert_at_tail(self, data: Any) -> None:
        """Append *data* at the end of the list."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def delete(self, data: Any) -> bool:
        """Remove the first node holding *data*; return whether one was removed."""
        if self._head is None:
            return False
        if self._head.data == data:
            self._head = self._head.next
            self._size -= 1
            return True
        current = self._head
        while current.next is not None and current.next.data != data:
            current = current.next
        if current.next is None:
            return False
        current.next = current.next.next
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[Any]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{item} -> " for item in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"