from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoritma.bst import BinarySearchTree

SAMPLE = [50, 30, 70, 20, 40, 60, 80]


def test_inorder_of_sample_is_sorted():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree.inorder()) == sorted(SAMPLE)
    assert list(tree) == sorted(SAMPLE)


def test_breadth_first_of_balanced_insert_order():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree.breadth_first()) == SAMPLE


def test_preorder_of_sample():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree.preorder()) == [50, 30, 20, 40, 70, 60, 80]


def test_postorder_of_sample():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree.postorder()) == [20, 40, 30, 60, 80, 70, 50]


def test_empty_tree():
    tree = BinarySearchTree()
    assert len(tree) == 0
    assert list(tree.breadth_first()) == []
    assert list(tree.preorder()) == []
    assert list(tree.postorder()) == []
    assert 5 not in tree


def test_remove_missing_raises_key_error():
    tree = BinarySearchTree(SAMPLE)
    with pytest.raises(KeyError):
        tree.remove(99)
    assert len(tree) == len(SAMPLE)


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().remove(1)


def test_remove_root_with_two_children():
    tree = BinarySearchTree(SAMPLE)
    tree.remove(50)
    assert 50 not in tree
    assert list(tree) == sorted(v for v in SAMPLE if v != 50)
    assert len(tree) == len(SAMPLE) - 1


def test_remove_leaf_and_single_child():
    tree = BinarySearchTree(SAMPLE)
    tree.remove(20)
    tree.remove(30)
    assert list(tree) == [40, 50, 60, 70, 80]


def test_duplicates_are_kept_and_removed_one_at_a_time():
    tree = BinarySearchTree([5, 5, 5])
    assert list(tree) == [5, 5, 5]
    tree.remove(5)
    assert list(tree) == [5, 5]
    assert 5 in tree


@given(st.lists(st.integers(-1000, 1000)))
def test_inorder_is_sorted(values):
    tree = BinarySearchTree(values)
    assert list(tree.inorder()) == sorted(values)
    assert len(tree) == len(values)


@given(st.lists(st.integers(-100, 100), min_size=1))
def test_traversals_visit_every_value(values):
    tree = BinarySearchTree(values)
    expected = Counter(values)
    assert Counter(tree.preorder()) == expected
    assert Counter(tree.postorder()) == expected
    assert Counter(tree.breadth_first()) == expected
    assert next(tree.preorder()) == values[0]
    assert list(tree.postorder())[-1] == values[0]
    assert next(tree.breadth_first()) == values[0]


@given(st.lists(st.integers(-50, 50), min_size=1), st.data())
def test_remove_keeps_order_and_contents(values, data):
    tree = BinarySearchTree(values)
    target = data.draw(st.sampled_from(values))
    tree.remove(target)
    remaining = list(values)
    remaining.remove(target)
    assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)
    assert (target in tree) == (target in remaining)


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_contains_matches_membership(values, probe):
    tree = BinarySearchTree(values)
    assert (probe in tree) == (probe in values)