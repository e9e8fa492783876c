# bintree

Small building blocks for binary trees of integers. The package needs nothing
outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Binary trees

`bintree.node` holds the `Node` dataclass (`data`, `left`, `right`) and
functions that work on any binary tree. Traversals return plain lists. An
empty tree is `None`.

```python
from bintree.node import create_tree, preorder, inorder, postorder, level_order, left_view, right_view

# Values in pre-order, with -1 marking an absent child.
root = create_tree([1, 2, -1, -1, 3, -1, -1])

preorder(root)     # [1, 2, 3]
inorder(root)      # [2, 1, 3]
postorder(root)    # [2, 3, 1]
level_order(root)  # [[1], [2, 3]]
left_view(root)    # [1, 2]   first value of each level
right_view(root)   # [1, 3]   last value of each level
```

`create_tree` ignores values left over once the tree is complete, and raises
`ValueError` if the values run out before every child has been given.

## Binary search trees

`bintree.bst` works on trees kept in search order: larger values go right,
equal or smaller values go left.

```python
from bintree.bst import build_bst, insert, search, delete, min_node, max_node, from_sorted

root = build_bst([50, 30, 70, 20, 40])
root = insert(root, 60)

search(root, 40)        # True
min_node(root).data     # 20
max_node(root).data     # 70

root = delete(root, 50) # a node with two children takes the largest value of its left subtree

balanced = from_sorted([10, 20, 30, 40, 50, 60, 70])
# level_order(balanced) == [[40], [20, 60], [10, 30, 50, 70]]
```

`min_node` and `max_node` return `None` for an empty tree. `delete` removes one
occurrence of the target and returns the new root; a missing target leaves the
tree unchanged. `from_sorted` expects its input already sorted.

## Rebuilding a tree from traversals

```python
from bintree.construct import from_preorder_inorder
from bintree.node import level_order

root = from_preorder_inorder([2, 8, 10, 6, 4, 12], [10, 8, 6, 2, 4, 12])
level_order(root)  # [[2], [8, 4], [10, 6, 12]]
```

A `ValueError` is raised when the two sequences differ in length or a pre-order
value is missing from the in-order sequence. Repeated values are placed at their
first in-order position.

## Command line

The `bintree` command reads whitespace-separated integers from standard input
and takes one of three subcommands:

```
bintree search
bintree delete
bintree traverse
```

- `search`: builds a search tree from values ended by `-1`, prints it level by
  level, its in-order, pre-order and post-order traversals and its smallest and
  largest values, then reports "Target found" or "Target not found" for each
  following target until the value `1`.
- `delete`: builds and prints the tree the same way, then deletes each
  following target until `-1`, printing the tree level by level after each one.
- `traverse`: builds a general binary tree from pre-order values with `-1` for
  an absent child and prints its pre-order, in-order, post-order and level-order
  traversals.

For example:

```
echo "50 30 70 20 40 -1 40 99 1" | bintree search
```

Input that is not an integer, or a `traverse` tree that ends too early, prints
an error to standard error and exits with status 1.