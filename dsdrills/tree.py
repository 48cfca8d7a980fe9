"""Binary tree exercises: building, comparing, traversing and measuring trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass
class Node:
    """A binary tree node."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def build_tree(values: Iterable[int]) -> Node | None:
    """Build a tree from a preorder description where ``-1`` marks a missing child.

    Only as many values as the tree needs are consumed, so several trees can
    be read one after another from the same iterator. Raises ``ValueError``
    if the description ends before the tree is complete.
    """
    stream = iter(values)

    def take() -> Node | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("tree description ended early") from None
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = take()
        node.right = take()
        return node

    return take()


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def _levels(root: Node | None) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in _children(node)]


def is_identical(first: Node | None, second: Node | None) -> bool:
    """True if both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    pending = deque([(first, second)])
    while pending:
        a, b = pending.popleft()
        if a.value != b.value:
            return False
        for child_a, child_b in ((a.left, b.left), (a.right, b.right)):
            if child_a is not None and child_b is not None:
                pending.append((child_a, child_b))
            elif child_a is not None or child_b is not None:
                return False
    return True


def height(root: Node | None) -> int:
    """Number of levels in the tree; an empty tree has height 0."""
    return sum(1 for _ in _levels(root))


def spiral(root: Node | None) -> list[int]:
    """Breadth-first values where the order of enqueued children alternates per node.

    The first node dequeued adds its left child before its right, the next
    one right before left, and so on.
    """
    if root is None:
        return []
    result: list[int] = []
    queue = deque([root])
    left_first = True
    while queue:
        node = queue.popleft()
        result.append(node.value)
        pair = (node.left, node.right) if left_first else (node.right, node.left)
        queue.extend(child for child in pair if child is not None)
        left_first = not left_first
    return result


def inorder(root: Node | None) -> list[int]:
    """Values in left-root-right order."""
    result: list[int] = []
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def preorder(root: Node | None) -> list[int]:
    """Values in root-left-right order."""
    result: list[int] = []
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            result.append(node.value)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def postorder(root: Node | None) -> list[int]:
    """Values in left-right-root order."""
    result: list[int] = []
    stack: list[Node] = []
    last_visited: Node | None = None
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not last_visited:
            node = top.right
        else:
            result.append(top.value)
            last_visited = stack.pop()
    return result


def level_order(root: Node | None) -> list[int]:
    """Values level by level, left to right."""
    return [node.value for level in _levels(root) for node in level]


def max_sum_level(root: Node | None) -> int:
    """Zero-based index of the first level whose sum is largest.

    Only sums above zero count; if none is, level 0 is reported.
    """
    best_level = 0
    best_sum = 0
    for index, level in enumerate(_levels(root)):
        level_sum = sum(node.value for node in level)
        if level_sum > best_sum:
            best_sum = level_sum
            best_level = index
    return best_level


def max_width(root: Node | None) -> int:
    """Largest number of nodes on any one level; 0 for an empty tree."""
    return max((len(level) for level in _levels(root)), default=0)


def max_value(root: Node | None) -> int:
    """Largest value in the tree, never less than 0."""
    return max(preorder(root), default=0) if root is not None and max(preorder(root)) > 0 else 0


def search(root: Node | None, value: int) -> Node | None:
    """First node in preorder holding ``value``, or ``None``."""
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            if node.value == value:
                return node
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return None