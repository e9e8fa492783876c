"""Command-line front end: build trees from integers read on standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from bintree.bst import build_bst, delete, max_node, min_node, search
from bintree.node import Node, create_tree, inorder, level_order, postorder, preorder

END_OF_VALUES = -1
"""Value that ends a list of values or of deletion targets."""

END_OF_SEARCH = 1
"""Value that ends the list of search targets."""


def _read_ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"not an integer: {token!r}") from None


def _take_until(tokens: Iterator[int], stop: int) -> Iterator[int]:
    for value in tokens:
        if value == stop:
            return
        yield value


def _join(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def _print_levels(root: Optional[Node]) -> None:
    for level in level_order(root):
        print(_join(level))


def _print_summary(root: Optional[Node]) -> None:
    _print_levels(root)
    print()
    print(f"Inorder: {_join(inorder(root))}")
    print(f"Preorder: {_join(preorder(root))}")
    print(f"PostOrder: {_join(postorder(root))}")
    print()
    smallest = min_node(root)
    if smallest is None:
        print("NO Min Value")
        print("There is no node in tree so no min value")
    else:
        print(f"Min Value: {smallest.data}")
    print()
    largest = max_node(root)
    if largest is None:
        print("There is no node in tree so no max value")
    else:
        print(f"Max Value: {largest.data}")


def _build_from_input(tokens: Iterator[int]) -> Optional[Node]:
    print("Enter data: ")
    return build_bst(_take_until(tokens, END_OF_VALUES))


def _run_search(tokens: Iterator[int]) -> None:
    root = _build_from_input(tokens)
    _print_summary(root)
    print("Enter the target: ")
    for target in _take_until(tokens, END_OF_SEARCH):
        print("Target found" if search(root, target) else "Target not found")
        print("Enter the target: ")


def _run_delete(tokens: Iterator[int]) -> None:
    root = _build_from_input(tokens)
    _print_summary(root)
    print("Enter the value of target to delete: ")
    for target in _take_until(tokens, END_OF_VALUES):
        root = delete(root, target)
        print()
        print("Printing level order traversal: ")
        _print_levels(root)
        print("Enter the value of target to delete: ")


def _run_traverse(tokens: Iterator[int]) -> None:
    print("Enter the node values in pre-order, -1 for no node: ")
    root = create_tree(tokens)
    print(f"Printing Preorder : {_join(preorder(root))}")
    print(f"Printing Inorder : {_join(inorder(root))}")
    print(f"Printing Postorder: {_join(postorder(root))}")
    print("Levelorder Traversal : ")
    _print_levels(root)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bintree",
        description="Build binary trees from integers read on standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "search",
        help="build a search tree from values ended by -1, "
        "then look up targets until 1",
    )
    commands.add_parser(
        "delete",
        help="build a search tree from values ended by -1, "
        "then delete targets until -1",
    )
    commands.add_parser(
        "traverse",
        help="build a tree from pre-order values with -1 for no node "
        "and print its traversals",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command named in argv and return the exit status."""
    args = _parser().parse_args(argv)
    handlers = {
        "search": _run_search,
        "delete": _run_delete,
        "traverse": _run_traverse,
    }
    tokens = _read_ints(sys.stdin)
    try:
        handlers[args.command](tokens)
    except ValueError as exc:
        print(f"bintree: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())