"""A general binary tree assembled by attaching subtrees."""

from __future__ import annotations

from typing import Any, Optional

from treeguide.node import BinaryNode, node_height, node_size


class BinaryTree:
    """Binary tree with no ordering rule, built from smaller trees."""

    def __init__(self, data: Any) -> None:
        self.root: Optional[BinaryNode] = BinaryNode(data)

    def insert_left(self, tree: "BinaryTree") -> None:
        """Attach ``tree`` as the left subtree, or make it the root if empty."""
        if self.root is None:
            self.root = tree.root
        else:
            self.root.left = tree.root

    def insert_right(self, tree: "BinaryTree") -> None:
        """Attach ``tree`` as the right subtree, or make it the root if empty."""
        if self.root is None:
            self.root = tree.root
        else:
            self.root.right = tree.root

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def is_empty(self) -> bool:
        """Return True when the tree has no root."""
        return self.root is None

    def size(self) -> int:
        """Number of nodes in the tree."""
        return node_size(self.root)

    def height(self) -> int:
        """Distance from the root to the deepest node; -1 when empty."""
        return node_height(self.root)