import math

import pytest

from dsdrills.recursion import count_down, factorial


def test_factorial_of_zero():
    assert factorial(0) == 1


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_recurrence():
    assert factorial(8) == 8 * factorial(7)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_count_down_sequence():
    assert list(count_down(5)) == list(range(5, 0, -1))


def test_count_down_zero_is_empty():
    assert list(count_down(0)) == []


def test_count_down_negative():
    with pytest.raises(ValueError):
        list(count_down(-3))