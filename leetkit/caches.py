"""Fixed-capacity caches with least-recently and least-frequently used eviction."""

from __future__ import annotations

from collections import OrderedDict, defaultdict
from typing import DefaultDict, Dict, Tuple


class LRUCache:
    """Cache that evicts the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._data: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it used, or -1 if absent."""
        if key not in self._data:
            return -1
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting if the cache is full."""
        if key in self._data:
            self._data[key] = value
            self._data.move_to_end(key)
            return
        if len(self._data) == self._capacity:
            self._data.popitem(last=False)
        self._data[key] = value


class LFUCache:
    """Cache that evicts the least frequently used key, oldest use first on ties."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._entries: Dict[int, Tuple[int, int]] = {}
        self._by_count: DefaultDict[int, OrderedDict[int, None]] = defaultdict(
            OrderedDict
        )
        self._min_count = 0

    def _touch(self, key: int, value: int) -> None:
        _, count = self._entries[key]
        bucket = self._by_count[count]
        del bucket[key]
        if not bucket:
            del self._by_count[count]
            if self._min_count == count:
                self._min_count = count + 1
        self._by_count[count + 1][key] = None
        self._entries[key] = (value, count + 1)

    def get(self, key: int) -> int:
        """Return the value for ``key`` and count the use, or -1 if absent."""
        if key not in self._entries:
            return -1
        value, _ = self._entries[key]
        self._touch(key, value)
        return value

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``; a stored key counts as used."""
        if key in self._entries:
            self._touch(key, value)
            return
        if len(self._entries) >= self._capacity:
            bucket = self._by_count[self._min_count]
            evicted, _ = bucket.popitem(last=False)
            if not bucket:
                del self._by_count[self._min_count]
            del self._entries[evicted]
        self._entries[key] = (value, 1)
        self._by_count[1][key] = None
        self._min_count = 1