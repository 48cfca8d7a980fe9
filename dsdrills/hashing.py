"""Hashing exercises: distinct counting and simple hash tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def count_distinct(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def count_distinct_union(first: Iterable[int], second: Iterable[int]) -> int:
    """Number of distinct values across both collections."""
    return len(set(first).union(second))


def linear_probing(keys: Sequence[int], table_size: int) -> list[int | None]:
    """Build an open-addressing table with linear probing.

    The table grows to ``len(keys)`` slots if it is smaller. Duplicate keys
    are stored once; empty slots hold ``None``.
    """
    if table_size <= 0:
        raise ValueError("table size must be positive")
    size = max(table_size, len(keys))
    table: list[int | None] = [None] * size
    for key in keys:
        slot = key % size
        probes = 0
        while table[slot] is not None and probes <= size:
            if table[slot] == key:
                break
            slot = (slot + 1) % size
            probes += 1
        if table[slot] is None:
            table[slot] = key
    return table


def separate_chaining(keys: Iterable[int], table_size: int) -> list[list[int]]:
    """Build a hash table whose buckets are lists, keys kept in insertion order."""
    if table_size <= 0:
        raise ValueError("table size must be positive")
    buckets: list[list[int]] = [[] for _ in range(table_size)]
    for key in keys:
        buckets[key % table_size].append(key)
    return buckets