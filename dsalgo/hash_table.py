"""A string-keyed hash table using separate chaining."""

from __future__ import annotations

from typing import Any

DEFAULT_TABLE_SIZE = 10


def hash_key(key: str, table_size: int = DEFAULT_TABLE_SIZE) -> int:
    """Sum of the key's UTF-8 byte values modulo *table_size*."""
    return sum(key.encode("utf-8")) % table_size


class HashTable:
    """A fixed number of buckets, each a chain with the newest entry first."""

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table_size must be positive")
        self.table_size = table_size
        self._buckets: list[list[list[Any]]] = [[] for _ in range(table_size)]

    def _chain(self, key: str) -> list[list[Any]]:
        return self._buckets[hash_key(key, self.table_size)]

    def insert(self, key: str, value: Any) -> None:
        """Set *key* to *value*, updating it in place if already present."""
        chain = self._chain(key)
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])

    def search(self, key: str) -> Any:
        """Return the value stored for *key*; raise KeyError if absent."""
        for stored_key, value in self._chain(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def delete(self, key: str) -> bool:
        """Remove *key*; return whether it was present."""
        chain = self._chain(key)
        for position, entry in enumerate(chain):
            if entry[0] == key:
                del chain[position]
                return True
        return False

    def buckets(self) -> list[list[tuple[str, Any]]]:
        """A snapshot of every bucket's chain as (key, value) pairs."""
        return [[(key, value) for key, value in chain] for chain in self._buckets]

    def load_factor(self) -> float:
        """Number of entries divided by the number of buckets."""
        return len(self) / self.table_size

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and any(
            stored_key == key for stored_key, _ in self._chain(key)
        )

    def __str__(self) -> str:
        lines = []
        for index, chain in enumerate(self._buckets):
            entries = "".join(f"({key}: {value}) -> " for key, value in chain)
            lines.append(f"バケット[{index}]: {entries}NULL")
        return "\n".join(lines)