"""Traversal iterators over a binary search tree."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

from treeguide.bst import BinarySearchTree, EmptyTreeError
from treeguide.node import BinaryNode
from treeguide.stack import Stack


class BSTInOrderIterator:
    """Yields keys in ascending (in-order) order."""

    def __init__(self, tree: BinarySearchTree) -> None:
        self._pending: Stack = Stack()
        self._push_left(tree.root)

    def _push_left(self, node: Optional[BinaryNode]) -> None:
        while node is not None:
            self._pending.push(node)
            node = node.left

    def _advance(self) -> Any:
        node = self._pending.pop()
        self._push_left(node.right)
        return node.data

    def has_next(self) -> bool:
        """Return True while values remain."""
        return len(self._pending) > 0

    def next(self) -> Any:
        """Return the next value; raises EmptyTreeError when none is left."""
        if not self.has_next():
            raise EmptyTreeError()
        return self._advance()

    def __iter__(self) -> BSTInOrderIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self._advance()


class BSTPreOrderIterator:
    """Yields each node before its left and then right subtree."""

    def __init__(self, tree: BinarySearchTree) -> None:
        self._pending: Stack = Stack()
        if tree.root is not None:
            self._pending.push(tree.root)

    def _advance(self) -> Any:
        node = self._pending.pop()
        for child in (node.right, node.left):
            if child is not None:
                self._pending.push(child)
        return node.data

    def has_next(self) -> bool:
        """Return True while values remain."""
        return len(self._pending) > 0

    def next(self) -> Any:
        """Return the next value; raises EmptyTreeError when none is left."""
        if not self.has_next():
            raise EmptyTreeError()
        return self._advance()

    def __iter__(self) -> BSTPreOrderIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self._advance()


class BSTPostOrderIterator:
    """Yields each node after its left and right subtrees."""

    def __init__(self, tree: BinarySearchTree) -> None:
        self._pending: Stack = Stack()
        self._push_leftmost_leaf_path(tree.root)

    def _push_leftmost_leaf_path(self, node: Optional[BinaryNode]) -> None:
        while node is not None:
            self._pending.push(node)
            node = node.left if node.left is not None else node.right

    def _advance(self) -> Any:
        node = self._pending.pop()
        if not self._pending.is_empty():
            parent = self._pending.top()
            if parent.left is node:
                self._push_leftmost_leaf_path(parent.right)
        return node.data

    def has_next(self) -> bool:
        """Return True while values remain."""
        return len(self._pending) > 0

    def next(self) -> Any:
        """Return the next value; raises EmptyTreeError when none is left."""
        if not self.has_next():
            raise EmptyTreeError()
        return self._advance()

    def __iter__(self) -> BSTPostOrderIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self._advance()


class BSTLevelOrderIterator:
    """Yields keys level by level, left to right."""

    def __init__(self, tree: BinarySearchTree) -> None:
        self._pending: deque = deque()
        if tree.root is not None:
            self._pending.append(tree.root)

    def _advance(self) -> Any:
        node = self._pending.popleft()
        self._pending.extend(
            child for child in (node.left, node.right) if child is not None
        )
        return node.data

    def has_next(self) -> bool:
        """Return True while values remain."""
        return len(self._pending) > 0

    def next(self) -> Any:
        """Return the next value; raises EmptyTreeError when none is left."""
        if not self.has_next():
            raise EmptyTreeError()
        return self._advance()

    def __iter__(self) -> BSTLevelOrderIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self._advance()