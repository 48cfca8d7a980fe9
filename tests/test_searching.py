import math

import pytest

from dsdrills.searching import (
    binary_search,
    count_ones,
    count_occurrences,
    fill_rows_with_ones,
    first_occurrence,
    integer_sqrt,
    last_occurrence,
    majority_element,
    min_product,
    search_unbounded,
)

SORTED = [1, 3, 5, 7, 9, 11, 13]


@pytest.mark.parametrize("position", range(len(SORTED)))
def test_binary_search_finds_each(position):
    assert binary_search(SORTED, SORTED[position]) == position


@pytest.mark.parametrize("target", [0, 4, 14])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


def test_min_product_driver_example():
    assert min_product([2, 3, 4, 5, 4], [3, 4, 2, 3, 2], 3) == 33


def test_min_product_zero_products_unchanged():
    assert min_product([0, 0], [5, 6], 1) == 0


def test_min_product_never_exceeds_plain_sum():
    a, b = [1, -2, 3], [-4, 5, 6]
    assert min_product(a, b, 2) <= sum(x * y for x, y in zip(a, b))


def test_min_product_length_mismatch():
    with pytest.raises(ValueError):
        min_product([1, 2], [1], 1)


def test_fill_rows_with_ones():
    matrix = [[0, 0, 1], [0, 0, 0], [1, 0, 0]]
    result = fill_rows_with_ones(matrix)
    for original, row in zip(matrix, result):
        if 1 in original:
            assert row == [1] * len(original)
        else:
            assert row == original
    assert matrix[0] == [0, 0, 1]


def test_count_ones_driver_example():
    assert count_ones(sorted([1, 1, 1, 1, 1, 0, 0, 0, 0])) == 5


@pytest.mark.parametrize("values", [[], [0, 0, 0], [1, 1], [0, 1], [0, 0, 1, 1, 1]])
def test_count_ones_matches_sum(values):
    assert count_ones(values) == sum(values)


@pytest.mark.parametrize("target", [3, 4, 9])
def test_count_occurrences(target):
    values = [3, 4, 3, 3, 5]
    assert count_occurrences(values, target) == values.count(target)


DUPES = [1, 2, 2, 2, 3, 5, 5]


@pytest.mark.parametrize("target", [1, 2, 3, 5])
def test_first_and_last_occurrence(target):
    assert first_occurrence(DUPES, target) == DUPES.index(target)
    assert last_occurrence(DUPES, target) == len(DUPES) - 1 - DUPES[::-1].index(target)


@pytest.mark.parametrize("target", [0, 4, 6])
def test_occurrence_missing(target):
    assert first_occurrence(DUPES, target) is None
    assert last_occurrence(DUPES, target) is None


def test_occurrence_empty():
    assert first_occurrence([], 1) is None
    assert last_occurrence([], 1) is None


def test_majority_element_found():
    assert majority_element([3, 3, 4, 2, 3, 3]) == 3


@pytest.mark.parametrize("values", [[1, 2, 3], [1, 1, 2, 2], []])
def test_majority_element_absent(values):
    assert majority_element(values) is None


UNBOUNDED = list(range(1, 18))


@pytest.mark.parametrize("target", UNBOUNDED)
def test_search_unbounded_finds_each(target):
    assert search_unbounded(UNBOUNDED, target) == UNBOUNDED.index(target)


@pytest.mark.parametrize("target", [0, 18, 100])
def test_search_unbounded_missing(target):
    assert search_unbounded(UNBOUNDED, target) is None


def test_search_unbounded_empty():
    assert search_unbounded([], 3) is None


@pytest.mark.parametrize("x", range(0, 200))
def test_integer_sqrt_matches_isqrt(x):
    assert integer_sqrt(x) == math.isqrt(x)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-4)