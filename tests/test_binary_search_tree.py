import pytest

from algokit.binary_search_tree import BinarySearchTree

VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def test_inorder_is_sorted():
    tree = BinarySearchTree(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_level_order_of_full_levels_follows_insertion():
    tree = BinarySearchTree([50, 30, 70, 20, 40])
    assert tree.level_order() == [50, 30, 70, 20, 40]


def test_preorder_and_postorder():
    tree = BinarySearchTree([50, 30, 70, 20, 40])
    assert tree.preorder() == [50, 30, 20, 40, 70]
    assert tree.postorder() == [20, 40, 30, 70, 50]


def test_traversals_share_elements():
    tree = BinarySearchTree(VALUES)
    for order in (tree.preorder(), tree.postorder(), tree.level_order()):
        assert sorted(order) == sorted(VALUES)
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]


def test_min_and_max():
    tree = BinarySearchTree(VALUES)
    assert tree.min() == min(VALUES)
    assert tree.max() == max(VALUES)


def test_min_max_empty_raise():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.min()
    with pytest.raises(ValueError):
        tree.max()


@pytest.mark.parametrize("victim", [20, 30, 50, 70, 45, 65])
def test_remove_keeps_order(victim):
    tree = BinarySearchTree(VALUES)
    assert tree.remove(victim) is True
    expected = sorted(VALUES)
    expected.remove(victim)
    assert tree.inorder() == expected
    assert len(tree) == len(VALUES) - 1


def test_remove_missing_returns_false():
    tree = BinarySearchTree([1, 2, 3])
    assert tree.remove(9) is False
    assert len(tree) == 3
    assert tree.inorder() == [1, 2, 3]


def test_remove_all_empties_tree():
    tree = BinarySearchTree(VALUES)
    for value in VALUES:
        assert tree.remove(value)
    assert len(tree) == 0
    assert tree.inorder() == []
    assert tree.level_order() == []


def test_duplicates_kept():
    tree = BinarySearchTree([5, 5, 3, 5])
    assert tree.inorder() == [3, 5, 5, 5]
    tree.remove(5)
    assert tree.inorder() == [3, 5, 5]