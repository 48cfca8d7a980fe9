"""Recursion exercises."""

from __future__ import annotations

from collections.abc import Iterator


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def count_down(n: int) -> Iterator[int]:
    """Yield ``n, n - 1, ..., 1``."""
    if n < 0:
        raise ValueError("cannot count down from a negative number")
    if n == 0:
        return
    yield n
    yield from count_down(n - 1)