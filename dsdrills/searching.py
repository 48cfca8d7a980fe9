"""Searching exercises over sequences, mostly binary-search based."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _bsearch(values: Sequence[int], target: int, low: int, high: int) -> int | None:
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in sorted ``values``, or ``None`` if absent."""
    return _bsearch(values, target, 0, len(values) - 1)


def min_product(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Sum of ``a[i] * b[i]`` less the largest single-element adjustment by ``2 * k``.

    Elements whose product is zero offer no adjustment.
    """
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    total = 0
    best = 0
    for x, y in zip(a, b):
        product = x * y
        total += product
        if product < 0 and y < 0:
            candidate = (x + 2 * k) * y
        elif product < 0 and x < 0:
            candidate = (x - 2 * k) * y
        elif product > 0 and x < 0:
            candidate = x + 2 * k
        elif product > 0 and x > 0:
            candidate = x - 2 * k
        else:
            continue
        best = max(best, abs(product - candidate))
    return total - best


def fill_rows_with_ones(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row containing a 1 is set to all ones."""
    return [[1] * len(row) if 1 in row else list(row) for row in matrix]


def count_ones(values: Sequence[int]) -> int:
    """Count the non-zero entries of a sorted 0/1 sequence by binary search."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == 0:
            low = mid + 1
        elif mid == 0 or values[mid - 1] != values[mid]:
            return len(values) - mid
        else:
            high = mid - 1
    return 0


def count_occurrences(values: Iterable[int], target: int) -> int:
    """Number of entries equal to ``target``."""
    return sum(1 for value in values if value == target)


def first_occurrence(values: Sequence[int], target: int) -> int | None:
    """Index of the first ``target`` in sorted ``values``, or ``None``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < target:
            low = mid + 1
        elif values[mid] > target:
            high = mid - 1
        elif mid == 0 or values[mid - 1] != values[mid]:
            return mid
        else:
            high = mid - 1
    return None


def last_occurrence(values: Sequence[int], target: int) -> int | None:
    """Index of the last ``target`` in sorted ``values``, or ``None``."""
    last = len(values) - 1
    low, high = 0, last
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < target:
            low = mid + 1
        elif values[mid] > target:
            high = mid - 1
        elif mid == last or values[mid + 1] != values[mid]:
            return mid
        else:
            low = mid + 1
    return None


def majority_element(values: Sequence[int]) -> int | None:
    """The value filling more than half the sequence, or ``None``."""
    if not values:
        return None
    candidate = values[0]
    votes = 1
    for value in values[1:]:
        votes += 1 if value == candidate else -1
        if votes == 0:
            candidate, votes = value, 1
    if count_occurrences(values, candidate) > len(values) // 2:
        return candidate
    return None


def search_unbounded(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in sorted ``values`` by doubling the bound, then binary search."""
    size = len(values)
    if size == 0:
        return None
    if values[0] == target:
        return 0
    bound = 1
    while bound < size and values[bound] < target:
        bound *= 2
    if bound < size and values[bound] == target:
        return bound
    return _bsearch(values, target, bound // 2 + 1, min(bound - 1, size - 1))


def integer_sqrt(x: int) -> int:
    """Floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    low, high = 1, x
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square > x:
            high = mid - 1
        else:
            low = mid + 1
            answer = mid
    return answer