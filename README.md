# dsdrills

Classic data-structure and algorithm exercises as plain Python functions.
Each function takes ordinary Python values and returns a result. None of
them print anything or read from standard input. The package has no
dependencies outside the standard library.

## Installation

```
pip install dsdrills
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "dsdrills[test]"
pytest
```

## Modules

### `dsdrills.arrays`

- `shadow_counts(values)`: looks at each number in `range(len(values))` and
  returns `(value, count)` pairs, in ascending order, for the numbers that
  appear zero times or exactly twice. Raises `ValueError` if an input value
  falls outside that range.
- `insert_at_index(values, index, element)`: returns a copy of the same
  length with `element` at `index`. Later elements move one place right and
  the last element is dropped. An index at or past the end returns an
  unchanged copy. A negative index raises `ValueError`.
- `mean(values)`: the integer mean, truncated toward zero.
- `median(values)`: the integer median. With an even count, the two middle
  values are averaged and the result is truncated toward zero. Both `mean`
  and `median` raise `ValueError` on an empty sequence.
- `move_zeros(values)`: moves every zero to the end and keeps the order of
  the other values.
- `remove_duplicates(values)`: collapses runs of equal neighbours. On
  sorted input this gives the unique values.
- `reverse(values)`: the values in reverse order.
- `rotate(values, shift)`: rotates left by `shift` places. Raises
  `ValueError` unless `0 <= shift <= len(values)`.

### `dsdrills.hashing`

- `count_distinct(values)`: the number of distinct values.
- `count_distinct_union(first, second)`: the number of distinct values
  across both collections.
- `linear_probing(keys, table_size)`: builds an open-addressing table with
  linear probing and returns it as a list. If `table_size` is smaller than
  `len(keys)`, the table grows to `len(keys)` slots. A duplicate key is
  stored only once, and empty slots hold `None`.
- `separate_chaining(keys, table_size)`: returns one bucket list for each
  slot. Each bucket keeps its keys in insertion order.

Both table builders raise `ValueError` when `table_size` is not positive.

### `dsdrills.recursion`

- `factorial(n)`: returns `n!`. Raises `ValueError` for a negative `n`.
- `count_down(n)`: a generator that yields `n, n - 1, ..., 1`. Raises
  `ValueError` for a negative `n`.

### `dsdrills.searching`

The search functions return `None` when the target is absent.

- `binary_search(values, target)`: the index of `target` in sorted `values`.
- `first_occurrence(values, target)` and `last_occurrence(values, target)`:
  the index of the first or last `target` in sorted `values`.
- `search_unbounded(values, target)`: doubles a bound until it passes
  `target`, then runs a binary search inside that bound.
- `count_ones(values)`: counts the ones in an ascending list of zeros and
  ones, using binary search.
- `count_occurrences(values, target)`: the number of entries equal to
  `target`.
- `majority_element(values)`: the value that fills more than half of the
  sequence, or `None` if there is no such value.
- `integer_sqrt(x)`: the floor of the square root. Raises `ValueError` for a
  negative `x`.
- `min_product(a, b, k)`: the sum of `a[i] * b[i]`, minus the largest
  single-element adjustment by `2 * k`. Raises `ValueError` if the sequences
  have different lengths.
- `fill_rows_with_ones(matrix)`: returns a copy of the matrix in which every
  row that contains a 1 is set to all ones.

### `dsdrills.tree`

`Node` is a dataclass with the fields `value`, `left` and `right`.
`build_tree(values)` reads a tree in pre-order, where `-1` marks a missing
child. It takes only as many values as the tree needs, so one iterator can
describe several trees one after another. It raises `ValueError` if the
values run out before the tree is complete. In every function below, an
empty tree is `None`.

- `is_identical(first, second)`: `True` if both trees have the same shape
  and the same values.
- `height(root)`: the number of levels. An empty tree has height 0.
- `inorder(root)`, `preorder(root)`, `postorder(root)`: the values in the
  named depth-first order, produced without recursion.
- `level_order(root)`: the values level by level, left to right.
- `spiral(root)`: a breadth-first walk in which the order of enqueued
  children alternates from one dequeued node to the next. The first node
  adds its left child first, the next node adds its right child first, and
  so on.
- `max_sum_level(root)`: the zero-based index of the first level with the
  largest sum. Only sums above zero count, and the result is 0 if there are
  none.
- `max_width(root)`: the largest number of nodes on any one level, or 0 for
  an empty tree.
- `max_value(root)`: the largest value in the tree. It is never less than 0.
- `search(root, value)`: the first node in pre-order that holds `value`, or
  `None`.

## Example

```python
from dsdrills.tree import build_tree, inorder, height
from dsdrills.searching import binary_search

root = build_tree([1, 2, -1, -1, 3, -1, -1])
print(inorder(root))   # [2, 1, 3]
print(height(root))    # 2

print(binary_search([1, 3, 5, 7], 5))  # 2
```

## What it does not do

This is a library of functions only. It has no command-line program and no
interactive prompts. To use a function on your own data, import it and pass
the data in.