"""Separate-chaining hash table with load-factor driven growth."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

_PRIME = 2654435761
_WORD = 1 << 64
_LOAD_FACTOR = 0.75
DEFAULT_CAPACITY = 16


def int_hash(key: int) -> int:
    """Multiplicative hash of an integer, wrapped to an unsigned 64-bit word."""
    return (key * _PRIME) % _WORD


def _default_hash(key: Hashable) -> int:
    if isinstance(key, int):
        return int_hash(key)
    return int_hash(hash(key))


class HashTable:
    """Hash table mapping keys to values, each bucket a chain of entries.

    The table doubles its capacity once the number of entries exceeds
    three quarters of the bucket count.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        default_factory: Callable[[], Any] | None = None,
        hash_func: Callable[[Hashable], int] | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._size = 0
        self._buckets: list[list[list[Any]]] = [[] for _ in range(capacity)]
        self._default_factory = default_factory
        self._hash = hash_func if hash_func is not None else _default_hash

    def _bucket(self, key: Hashable) -> list[list[Any]]:
        return self._buckets[self._hash(key) % self._capacity]

    def _find_entry(self, key: Hashable) -> list[Any] | None:
        return next((entry for entry in self._bucket(key) if entry[0] == key), None)

    def _rehash(self, new_capacity: int) -> None:
        buckets: list[list[list[Any]]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                buckets[self._hash(entry[0]) % new_capacity].insert(0, entry)
        self._buckets = buckets
        self._capacity = new_capacity

    def insert(self, key: Hashable, value: Any) -> None:
        """Store value under key, replacing any value already there."""
        entry = self._find_entry(key)
        if entry is not None:
            entry[1] = value
            return
        self._size += 1
        if self._size > _LOAD_FACTOR * self._capacity:
            self._rehash(self._capacity * 2)
        self._bucket(key).insert(0, [key, value])

    def value(self, key: Hashable) -> Any:
        """Return the value stored under key; raise KeyError if absent."""
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __getitem__(self, key: Hashable) -> Any:
        entry = self._find_entry(key)
        if entry is not None:
            return entry[1]
        if self._default_factory is None:
            raise KeyError(key)
        value = self._default_factory()
        self.insert(key, value)
        return value

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def remove(self, key: Hashable) -> None:
        """Remove key if present; do nothing otherwise."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return

    def __contains__(self, key: object) -> bool:
        return self._find_entry(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Number of buckets currently allocated."""
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0