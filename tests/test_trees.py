import pytest

from dsalab.errors import InvalidPositionError
from dsalab.trees import (
    ArrayBinaryTree,
    TreeNode,
    inorder,
    level_order,
    postorder,
    preorder,
)


def sample_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(5)
    return root


def bst_from(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
    return root


def test_array_tree_starts_empty():
    tree = ArrayBinaryTree()
    assert tree.nodes(3) == [-1, -1, -1]


def test_array_tree_insert_round_trip():
    tree = ArrayBinaryTree(capacity=10)
    values = [7, 8, 9, 10]
    for index, value in enumerate(values):
        tree.insert(index, value)
    assert tree.nodes(len(values)) == values


def test_array_tree_insert_out_of_range():
    tree = ArrayBinaryTree(capacity=5)
    with pytest.raises(InvalidPositionError):
        tree.insert(5, 1)
    with pytest.raises(IndexError):
        tree.insert(-1, 1)


def test_array_tree_nodes_beyond_capacity():
    tree = ArrayBinaryTree(capacity=4)
    with pytest.raises(InvalidPositionError):
        tree.nodes(5)


def test_array_tree_negative_capacity():
    with pytest.raises(ValueError):
        ArrayBinaryTree(capacity=-1)


def test_preorder_of_sample_tree():
    assert list(preorder(sample_tree())) == [1, 2, 4, 5, 3]


def test_inorder_of_sample_tree():
    assert list(inorder(sample_tree())) == [4, 2, 5, 1, 3]


def test_postorder_of_sample_tree():
    assert list(postorder(sample_tree())) == [4, 5, 2, 3, 1]


def test_level_order_follows_levels_of_complete_tree():
    assert list(level_order(sample_tree())) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("traversal", [preorder, inorder, postorder, level_order])
def test_traversals_of_empty_tree(traversal):
    assert list(traversal(None)) == []


@pytest.mark.parametrize("traversal", [preorder, inorder, postorder, level_order])
def test_traversals_visit_every_node_once(traversal):
    values = [50, 30, 70, 20, 40, 60, 80, 35]
    assert sorted(traversal(bst_from(values))) == sorted(values)


def test_inorder_of_search_tree_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 35, 65]
    assert list(inorder(bst_from(values))) == sorted(values)


def test_root_is_first_in_preorder_and_last_in_postorder():
    root = bst_from([5, 2, 8, 1, 9])
    assert next(preorder(root)) == 5
    assert list(postorder(root))[-1] == 5
    assert next(level_order(root)) == 5