"""Binary tree nodes, construction from a pre-order value list, and traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

NULL_MARKER = -1
"""Value that marks an absent child in a pre-order value list."""


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def create_tree(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values given in pre-order, with -1 for a missing child.

    Values left over once the tree is complete are ignored. Raises
    ValueError if the values run out before every child has been given.
    """
    stream = iter(values)

    def build() -> Optional[Node]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("values ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: Optional[Node]) -> List[int]:
    """Return the values in node-left-right order."""
    result: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Optional[Node]) -> List[int]:
    """Return the values in left-node-right order."""
    result: List[int] = []
    stack: List[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(root: Optional[Node]) -> List[int]:
    """Return the values in left-right-node order."""
    reversed_order: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    reversed_order.reverse()
    return reversed_order


def level_order(root: Optional[Node]) -> List[List[int]]:
    """Return the values level by level, each level from left to right."""
    levels: List[List[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def left_view(root: Optional[Node]) -> List[int]:
    """Return the first value seen at each level when looking from the left."""
    return [level[0] for level in level_order(root)]


def right_view(root: Optional[Node]) -> List[int]:
    """Return the first value seen at each level when looking from the right."""
    return [level[-1] for level in level_order(root)]