import random

import pytest

from algoworks.binary_tree import BinaryTree, max_depth

BALANCED = [4, 2, 6, 1, 3, 5, 7]


def _tree(values):
    tree = BinaryTree()
    for value in values:
        tree.add(value)
    return tree


def test_inorder_of_ascending_chain():
    values = [1, 2, 3, 4, 5, 6]
    tree = _tree(values)
    assert tree.inorder() == values
    assert tree.max_depth() == len(values)


def test_duplicates_are_ignored():
    values = [5, 3, 8, 1, 4, 7, 9, 3, 8, 5]
    tree = _tree(values)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))


def test_postorder_of_balanced_tree():
    tree = _tree(BALANCED)
    assert tree.postorder() == [1, 3, 2, 5, 7, 6, 4]
    assert tree.postorder()[-1] == tree.root.value


def test_module_max_depth_matches_method():
    tree = _tree(BALANCED)
    assert max_depth(tree.root) == tree.max_depth()
    assert max_depth(tree.root.left) == tree.max_depth() - 1


def test_empty_tree():
    tree = BinaryTree()
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert len(tree) == 0
    assert tree.max_depth() == 0


def test_search_found_and_missing():
    tree = _tree(BALANCED)
    for value in BALANCED:
        assert tree.search(value).value == value
    assert tree.search(100) is None
    assert BinaryTree().search(1) is None


@pytest.mark.parametrize("value", BALANCED)
def test_remove_each_value(value):
    tree = _tree(BALANCED)
    tree.remove(value)
    expected = sorted(set(BALANCED) - {value})
    assert tree.inorder() == expected
    assert len(tree) == len(expected)
    assert tree.search(value) is None


def test_remove_node_with_only_left_child():
    tree = _tree([5, 3, 2])
    tree.remove(5)
    assert tree.inorder() == [2, 3]
    assert tree.root.value == 3


def test_remove_missing_raises():
    tree = _tree(BALANCED)
    with pytest.raises(KeyError):
        tree.remove(42)
    assert len(tree) == len(BALANCED)


def test_remove_last_value_empties_tree():
    tree = _tree([9])
    tree.remove(9)
    assert tree.root is None
    assert len(tree) == 0


def test_random_insert_and_remove_keeps_order():
    rng = random.Random(1234)
    values = [rng.randrange(200) for _ in range(120)]
    tree = _tree(values)
    remaining = set(values)
    assert tree.inorder() == sorted(remaining)
    for value in rng.sample(sorted(remaining), len(remaining) // 2):
        tree.remove(value)
        remaining.discard(value)
        assert tree.inorder() == sorted(remaining)
    assert len(tree) == len(remaining)
    assert sorted(tree.preorder()) == sorted(remaining)
    assert sorted(tree.postorder()) == sorted(remaining)