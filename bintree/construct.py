"""Rebuild a binary tree from its pre-order and in-order traversals."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Sequence

from bintree.node import Node


def from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[Node]:
    """Rebuild the tree whose pre-order and in-order traversals are given.

    Each value is placed at its first position in the in-order sequence.
    Raises ValueError if the sequences differ in length or a pre-order
    value does not appear in the in-order sequence.
    """
    if len(preorder) != len(inorder):
        raise ValueError(
            f"traversals differ in length: {len(preorder)} and {len(inorder)}"
        )

    positions: Dict[int, int] = {}
    for index, value in enumerate(inorder):
        positions.setdefault(value, index)

    remaining: Iterator[int] = iter(preorder)
    consumed = 0
    total = len(preorder)

    def build(start: int, end: int) -> Optional[Node]:
        nonlocal consumed
        if consumed >= total or start > end:
            return None
        value = next(remaining)
        consumed += 1
        try:
            position = positions[value]
        except KeyError:
            raise ValueError(
                f"value {value} is missing from the in-order traversal"
            ) from None
        node = Node(value)
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(inorder) - 1)