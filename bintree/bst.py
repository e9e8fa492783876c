"""Binary search tree operations on Node trees.

Values greater than a node go to its right; equal or smaller values go left.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from bintree.node import Node


def insert(root: Optional[Node], value: int) -> Node:
    """Insert a value and return the root of the tree."""
    new_node = Node(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value > node.data:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left


def build_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting the values in the given order."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value)
    return root


def min_node(root: Optional[Node]) -> Optional[Node]:
    """Return the leftmost node, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.left is not None:
        node = node.left
    return node


def max_node(root: Optional[Node]) -> Optional[Node]:
    """Return the rightmost node, or None for an empty tree."""
    if root is None:
        return None
    node = root
    while node.right is not None:
        node = node.right
    return node


def search(root: Optional[Node], target: int) -> bool:
    """Tell whether the target value is in the tree."""
    node = root
    while node is not None:
        if node.data == target:
            return True
        node = node.right if target > node.data else node.left
    return False


def delete(root: Optional[Node], target: int) -> Optional[Node]:
    """Remove one occurrence of the target and return the new root.

    A node with two children takes the largest value of its left subtree.
    A missing target leaves the tree unchanged.
    """
    if root is None:
        return None
    if root.data == target:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        predecessor = max_node(root.left)
        assert predecessor is not None
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
        return root
    if root.data > target:
        root.left = delete(root.left, target)
    else:
        root.right = delete(root.right, target)
    return root


def from_sorted(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced search tree from values already in sorted order."""

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = Node(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)