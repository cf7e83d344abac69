import math

from hypothesis import given
from hypothesis import strategies as st

from dsalgo.avl_tree import AVLTree

SOURCE_KEYS = [10, 20, 30, 40, 50, 25, 60]


def test_source_example_preorder():
    tree = AVLTree(SOURCE_KEYS)
    assert list(tree.preorder()) == [30, 20, 10, 25, 50, 40, 60]


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.height() == 0
    assert list(tree) == []
    assert list(tree.preorder()) == []
    assert 5 not in tree


def test_duplicate_insert_is_ignored():
    tree = AVLTree([1, 2])
    assert tree.insert(2) is False
    assert tree.insert(3) is True
    assert len(tree) == 3


def test_ascending_inserts_stay_balanced():
    tree = AVLTree(range(1, 8))
    assert tree.height() == 3
    assert list(tree) == list(range(1, 8))


@given(st.lists(st.integers(min_value=-500, max_value=500)))
def test_iteration_is_sorted_unique(keys):
    tree = AVLTree(keys)
    assert list(tree) == sorted(set(keys))
    assert len(tree) == len(set(keys))


@given(st.lists(st.integers(min_value=-500, max_value=500)))
def test_preorder_holds_same_keys(keys):
    tree = AVLTree(keys)
    assert sorted(tree.preorder()) == sorted(set(keys))


@given(st.lists(st.integers(min_value=-500, max_value=500), min_size=1))
def test_height_is_logarithmic(keys):
    tree = AVLTree(keys)
    n = len(tree)
    assert tree.height() <= 1.4405 * math.log2(n + 2) - 0.3277 + 1e-9
    assert tree.height() >= math.ceil(math.log2(n + 1))


@given(
    st.lists(st.integers(min_value=0, max_value=100)),
    st.integers(min_value=0, max_value=100),
)
def test_contains(keys, probe):
    tree = AVLTree(keys)
    assert (probe in tree) == (probe in keys)