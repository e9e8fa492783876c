import pytest

from bintree.node import (
    Node,
    create_tree,
    inorder,
    left_view,
    level_order,
    postorder,
    preorder,
    right_view,
)

SERIALISED = [
    [1, -1, -1],
    [1, 2, -1, -1, 3, -1, -1],
    [10, 20, 40, -1, -1, 50, -1, -1, 30, -1, 60, 70, -1, -1, -1],
    [5, 4, 3, 2, -1, -1, -1, -1, -1],
    [5, -1, 6, -1, 7, -1, 8, -1, -1],
]


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_small_tree_structure():
    root = create_tree([1, 2, -1, -1, 3, -1, -1])
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left is None and root.right.right is None


def test_small_tree_orders():
    root = create_tree([1, 2, -1, -1, 3, -1, -1])
    assert preorder(root) == [1, 2, 3]
    assert inorder(root) == [2, 1, 3]
    assert postorder(root) == [2, 3, 1]


def test_marker_alone_gives_empty_tree():
    assert create_tree([-1]) is None


def test_empty_tree_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []
    assert left_view(None) == []
    assert right_view(None) == []


def test_values_running_out_raises():
    with pytest.raises(ValueError):
        create_tree([1, 2])


def test_no_values_raises():
    with pytest.raises(ValueError):
        create_tree([])


def test_extra_values_are_ignored():
    root = create_tree([7, -1, -1, 99, 100])
    assert preorder(root) == [7]


@pytest.mark.parametrize("values", SERIALISED)
def test_preorder_matches_input(values):
    root = create_tree(values)
    assert preorder(root) == [v for v in values if v != -1]


@pytest.mark.parametrize("values", SERIALISED)
def test_all_orders_hold_same_values(values):
    root = create_tree(values)
    expected = sorted(v for v in values if v != -1)
    assert sorted(inorder(root)) == expected
    assert sorted(postorder(root)) == expected
    assert sorted(v for level in level_order(root) for v in level) == expected


@pytest.mark.parametrize("values", SERIALISED)
def test_postorder_ends_with_root(values):
    root = create_tree(values)
    assert postorder(root)[-1] == root.data
    assert level_order(root)[0] == [root.data]


@pytest.mark.parametrize("values", SERIALISED)
def test_level_count_is_height(values):
    root = create_tree(values)
    assert len(level_order(root)) == _height(root)


@pytest.mark.parametrize("values", SERIALISED)
def test_views_take_level_ends(values):
    root = create_tree(values)
    levels = level_order(root)
    assert left_view(root) == [level[0] for level in levels]
    assert right_view(root) == [level[-1] for level in levels]


def test_views_on_lopsided_tree():
    root = create_tree([1, 2, 4, -1, -1, -1, 3, -1, -1])
    assert left_view(root) == [1, 2, 4]
    assert right_view(root) == [1, 3, 4]


def test_level_order_on_hand_built_tree():
    root = Node(1, Node(2, None, Node(5)), Node(3))
    assert level_order(root) == [[1], [2, 3], [5]]