"""Small array exercises: counting, insertion, statistics and rearrangement."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def shadow_counts(values: Sequence[int]) -> list[tuple[int, int]]:
    """Report the values in ``range(len(values))`` seen zero times or exactly twice.

    Returns ``(value, count)`` pairs in ascending order of value. Every input
    value must lie in ``range(len(values))``.
    """
    size = len(values)
    counts = [0] * size
    for value in values:
        if not 0 <= value < size:
            raise ValueError(f"value {value} outside range 0..{size - 1}")
        counts[value] += 1
    return [(value, count) for value, count in enumerate(counts) if count in (0, 2)]


def insert_at_index(values: Sequence[int], index: int, element: int) -> list[int]:
    """Insert ``element`` at ``index`` in a fixed-length copy of ``values``.

    Later elements shift one place right and the last one falls off the end.
    An index at or past the end leaves the values unchanged.
    """
    if index < 0:
        raise ValueError("index must not be negative")
    items = list(values)
    if index >= len(items):
        return items
    return items[:index] + [element] + items[index:-1]


def mean(values: Sequence[int]) -> int:
    """Integer mean, truncated toward zero."""
    if not values:
        raise ValueError("mean of an empty sequence")
    return _truncating_div(sum(values), len(values))


def median(values: Sequence[int]) -> int:
    """Integer median; with an even count the two middle values are averaged and truncated."""
    if not values:
        raise ValueError("median of an empty sequence")
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return _truncating_div(ordered[middle] + ordered[middle - 1], 2)


def move_zeros(values: Sequence[int]) -> list[int]:
    """Move every zero to the end, keeping the other values in order."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Collapse runs of equal neighbours; on sorted input this yields the unique values."""
    return [key for key, _ in groupby(values)]


def reverse(values: Sequence[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(values))


def rotate(values: Sequence[int], shift: int) -> list[int]:
    """Rotate left by ``shift`` places, where ``0 <= shift <= len(values)``."""
    if not 0 <= shift <= len(values):
        raise ValueError(f"shift must be between 0 and {len(values)}")
    items = list(values)
    return items[shift:] + items[:shift]