"""Bounded containers that keep the N largest keys seen so far.

Use case: track the fittest individuals of a population with
``TopNMultimap[fitness, population_index]``.

Entries live in a binary heap ordered by ``(key, insertion_sequence)``, so
the minimum is at the root and, among equal keys, the earliest inserted
entry is evicted first. The maximum is tracked on insertion: eviction only
ever removes the minimum and is always followed by an insertion of a larger
key, so the tracked maximum never goes stale.
"""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from typing import Any, Iterable, Iterator


class TopNMultimap:
    """Ordered multimap holding at most ``capacity`` (key, value) pairs.

    ``try_insert`` accepts a pair unconditionally while there is room. Once
    full, it accepts only keys strictly greater than the current minimum key,
    evicting that minimum first.
    """

    def __init__(self, capacity: int, items: Iterable[tuple[Any, Any]] = ()) -> None:
        if int(capacity) < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = int(capacity)
        self._heap: list[tuple[Any, int, Any]] = []
        self._seq = itertools.count()
        self._max: tuple[Any, int, Any] | None = None
        self._key_counts: Counter = Counter()
        for key, value in items:
            self.try_insert(key, value)

    # ---- size ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self._heap)

    def empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) == self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        self._heap.clear()
        self._key_counts.clear()
        self._max = None

    # ---- insertion ----------------------------------------------------

    def try_insert(self, key: Any, value: Any) -> bool:
        """Insert ``(key, value)`` if it belongs to the top N. Returns whether it was kept."""
        if len(self._heap) < self._capacity:
            self._push(key, value)
            return True
        if self._heap and self._heap[0][0] < key:
            evicted_key, _, _ = heapq.heappop(self._heap)
            self._release_key(evicted_key)
            self._push(key, value)
            return True
        return False

    def _push(self, key: Any, value: Any) -> None:
        entry = (key, next(self._seq), value)
        heapq.heappush(self._heap, entry)
        self._key_counts[key] += 1
        if self._max is None or not key < self._max[0]:
            self._max = entry

    def _release_key(self, key: Any) -> None:
        self._key_counts[key] -= 1
        if self._key_counts[key] <= 0:
            del self._key_counts[key]
        if not self._heap:
            self._max = None

    # ---- access -------------------------------------------------------

    def minimum(self) -> tuple[Any, Any]:
        """(key, value) pair with the smallest key."""
        if not self._heap:
            raise IndexError("minimum() on an empty container")
        key, _, value = self._heap[0]
        return key, value

    def minimum_key(self) -> Any:
        return self.minimum()[0]

    def maximum(self) -> tuple[Any, Any]:
        """(key, value) pair with the largest key (latest inserted among ties)."""
        if self._max is None:
            raise IndexError("maximum() on an empty container")
        key, _, value = self._max
        return key, value

    def maximum_key(self) -> Any:
        return self.maximum()[0]

    def count(self, key: Any) -> int:
        return self._key_counts.get(key, 0)

    def __contains__(self, key: Any) -> bool:
        return self.count(key) > 0

    def items(self) -> list[tuple[Any, Any]]:
        """Pairs from smallest to largest key."""
        return [(k, v) for k, _, v in sorted(self._heap)]

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(self.items())

    def __reversed__(self) -> Iterator[tuple[Any, Any]]:
        return reversed(self.items())

    def set_of_keys(self) -> set[Any]:
        return set(self._key_counts)

    def multiset_of_keys(self) -> Counter:
        return Counter(self._key_counts)

    def set_of_values(self) -> set[Any]:
        return {v for _, _, v in self._heap}

    def multiset_of_values(self) -> Counter:
        return Counter(v for _, _, v in self._heap)

    def __repr__(self) -> str:
        body = ", ".join(f"({k}, {v})" for k, v in self.items())
        return f"{{{body}}}"


class TopNMap(TopNMultimap):
    """Unique-key variant: a key already present is never inserted again."""

    def try_insert(self, key: Any, value: Any) -> bool:
        if key in self._key_counts:
            return False
        return super().try_insert(key, value)


class TopNMultiset:
    """Key-only view of a ``TopNMultimap``: keeps the ``capacity`` largest keys."""

    _container = TopNMultimap

    def __init__(self, capacity: int, keys: Iterable[Any] = ()) -> None:
        self._entries = self._container(capacity)
        for key in keys:
            self.try_insert(key)

    def try_insert(self, key: Any) -> bool:
        return self._entries.try_insert(key, None)

    def __len__(self) -> int:
        return len(self._entries)

    def empty(self) -> bool:
        return self._entries.empty()

    def is_full(self) -> bool:
        return self._entries.is_full()

    @property
    def capacity(self) -> int:
        return self._entries.capacity

    def clear(self) -> None:
        self._entries.clear()

    def minimum(self) -> Any:
        return self._entries.minimum_key()

    def maximum(self) -> Any:
        return self._entries.maximum_key()

    def count(self, key: Any) -> int:
        return self._entries.count(key)

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def keys(self) -> list[Any]:
        """Keys from smallest to largest."""
        return [k for k, _ in self._entries.items()]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self.keys())

    def __repr__(self) -> str:
        return "{" + ", ".join(str(k) for k in self.keys()) + "}"


class TopNSet(TopNMultiset):
    """Unique-key variant of ``TopNMultiset``."""

    _container = TopNMap


__all__ = ["TopNMultimap", "TopNMap", "TopNMultiset", "TopNSet"]
