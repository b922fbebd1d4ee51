# treeguide

Small, readable data structures built around binary trees:

- `treeguide.stack`: `Stack`, a last-in, first-out stack with `push`, `pop`,
  `top`, `is_empty` and `len()`; `EmptyStackError` when reading an empty stack.
- `treeguide.node`: `BinaryNode` (fields `data`, `left`, `right`, with `size()`
  and `height()`), plus `node_size(node)` and `node_height(node)`, which also
  accept `None` (size 0, height -1).
- `treeguide.binarytree`: `BinaryTree`, a binary tree assembled by hand with
  `insert_left` and `insert_right`; also `clear`, `is_empty`, `size`, `height`.
- `treeguide.bst`: `BinarySearchTree`, an ordered tree that ignores duplicate
  keys, with `insert`, `search`, `remove`, `find_min`, `find_max`, `clear`,
  `is_empty`, `size`, `len()` and `in`; `EmptyTreeError` for queries on an
  empty tree.
- `treeguide.treeset`: `TreeSet`, a sorted set backed by a binary search tree,
  with `add`, `remove`, `contains`, `size`, `values`, `len()`, `in` and
  ascending iteration.
- `treeguide.iterators`: `BSTInOrderIterator`, `BSTPreOrderIterator`,
  `BSTPostOrderIterator` and `BSTLevelOrderIterator` over a binary search tree.
- `treeguide.exercises`: `second_largest_element`, `inorder_predecessor` and
  `is_bst`, with the exceptions `NoValuesError` and `NoPredecessorError`.

## Installation

```
pip install .
```

## Usage

```python
from treeguide.bst import BinarySearchTree
from treeguide.iterators import BSTInOrderIterator, BSTLevelOrderIterator
from treeguide.treeset import TreeSet

tree = BinarySearchTree()
for key in (15, 10, 20, 8, 12, 16, 25):
    tree.insert(key)

print(len(tree))                         # 7
print(12 in tree)                        # True
print(tree.find_min(), tree.find_max())  # 8 25

print(list(BSTInOrderIterator(tree)))     # [8, 10, 12, 15, 16, 20, 25]
print(list(BSTLevelOrderIterator(tree)))  # [15, 10, 20, 8, 12, 16, 25]

numbers = TreeSet(3, 1, 2, 1)
print(numbers)           # Set: {1 2 3}
print(numbers.values())  # [1, 2, 3]
```

Order statistics on a search tree:

```python
from treeguide.exercises import inorder_predecessor, second_largest_element

print(second_largest_element(tree))   # 20
print(inorder_predecessor(tree, 15))  # 12
```

Assembling a tree by hand and checking the search-tree property:

```python
from treeguide.binarytree import BinaryTree
from treeguide.exercises import is_bst

root = BinaryTree(4)
root.insert_left(BinaryTree(2))
root.insert_right(BinaryTree(5))
print(root.size(), root.height())  # 3 1
print(is_bst(root))                # True
```

## Errors

Operations that have no answer raise an exception instead of returning a
placeholder value:

- `find_min` and `find_max` on an empty `BinarySearchTree` raise `EmptyTreeError`.
- `pop` and `top` on an empty `Stack` raise `EmptyStackError`.
- `second_largest_element` on a tree with fewer than two keys raises `NoValuesError`.
- `inorder_predecessor` raises `NoPredecessorError` when the tree is empty or no
  key is smaller than the one given.

The iterators stop normally when used in a `for` loop or with `list()`. Their
`has_next()` method reports whether values remain, and `next()`, called
directly past the end, raises `EmptyTreeError`.

## Running the tests

```
pip install .[test]
pytest
```