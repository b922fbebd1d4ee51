import pytest

from treeguide.bst import BinarySearchTree, EmptyTreeError


def _tree_of(*keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key)
    return tree


@pytest.fixture
def sample():
    return _tree_of(4, 1, 2, 5, 3)


def test_new_tree():
    tree = BinarySearchTree()
    assert tree.size() == 0
    assert tree.root is None


@pytest.mark.parametrize("finder", ["find_min", "find_max"])
def test_find_on_empty_tree_raises(finder):
    with pytest.raises(EmptyTreeError, match="árbol vacío"):
        getattr(BinarySearchTree(), finder)()


def test_insert_one_element_sets_root():
    tree = _tree_of(4)
    assert tree.size() == 1
    assert tree.root.data == 4


@pytest.mark.parametrize("key, expected", [(2, True), (4, True), (6, False)])
def test_search(sample, key, expected):
    assert sample.search(key) is expected


def test_find_min_max(sample):
    assert (sample.find_min(), sample.find_max()) == (1, 5)


def test_remove_root(sample):
    sample.remove(4)
    assert not sample.search(4)
    assert sample.size() == 4


def test_remove_all_one_by_one(sample):
    for expected_size, value in zip(range(4, -1, -1), (1, 2, 3, 5, 4)):
        sample.remove(value)
        assert not sample.search(value)
        assert sample.size() == expected_size


@pytest.mark.parametrize(
    "keys, removed, remaining",
    [((), 1, 0), ((4,), 4, 0), ((4, 3), 4, 1)],
)
def test_remove_small_trees(keys, removed, remaining):
    tree = _tree_of(*keys)
    tree.remove(removed)
    assert not tree.search(removed)
    assert tree.size() == remaining


def test_clear():
    tree = _tree_of(4)
    tree.clear()
    assert tree.size() == 0
    assert tree.root is None


def test_is_empty():
    tree = BinarySearchTree()
    assert tree.is_empty() is True
    tree.insert(4)
    assert tree.is_empty() is False


def test_duplicates_ignored():
    assert _tree_of(4, 4).size() == 1


def test_len_and_contains(sample):
    assert len(sample) == 5
    assert 3 in sample
    assert 9 not in sample


def test_remove_two_children_uses_predecessor(sample):
    sample.remove(4)
    assert sample.root.data == 3
    assert (sample.find_min(), sample.find_max()) == (1, 5)


def test_string_keys():
    tree = _tree_of("m", "c", "x", "a")
    assert (tree.find_min(), tree.find_max()) == ("a", "x")
    assert "c" in tree