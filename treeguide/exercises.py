"""Exercises on binary search trees: order statistics and validation."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from treeguide.binarytree import BinaryTree
from treeguide.bst import BinarySearchTree
from treeguide.node import BinaryNode


class NoValuesError(ValueError):
    """Raised when a tree has too few values to answer a query."""


class NoPredecessorError(LookupError):
    """Raised when no smaller key exists in the tree."""


def _rightmost(node: BinaryNode) -> Tuple[Optional[BinaryNode], BinaryNode]:
    """Follow right links from ``node``; return the last node and its parent."""
    parent: Optional[BinaryNode] = None
    while node.right is not None:
        parent, node = node, node.right
    return parent, node


def second_largest_element(tree: BinarySearchTree) -> Any:
    """Return the second largest key; raises NoValuesError with fewer than two."""
    if tree.size() < 2 or tree.root is None:
        raise NoValuesError("No hay valores")
    parent, largest = _rightmost(tree.root)
    if largest.left is None:
        return parent.data
    return _rightmost(largest.left)[1].data


def inorder_predecessor(tree: BinarySearchTree, key: Any) -> Any:
    """Return the largest key strictly smaller than ``key``."""
    if tree.size() == 0:
        raise NoPredecessorError("No hay predecesores")
    predecessor: Optional[BinaryNode] = None
    node = tree.root
    while node is not None:
        if key > node.data:
            predecessor, node = node, node.right
        else:
            node = node.left
    if predecessor is None:
        raise NoPredecessorError("No hay predecesores menores que el mínimo")
    return predecessor.data


def _is_bst_node(node: Optional[BinaryNode], low: Any, high: Any) -> bool:
    if node is None:
        return True
    if (low is not None and not node.data > low) or (
        high is not None and not node.data < high
    ):
        return False
    return _is_bst_node(node.left, low, node.data) and _is_bst_node(
        node.right, node.data, high
    )


def is_bst(tree: BinaryTree) -> bool:
    """Return True when every node respects the search-tree ordering."""
    return _is_bst_node(tree.root, None, None)