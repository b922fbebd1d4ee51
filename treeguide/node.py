"""Binary tree nodes and size/height helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BinaryNode:
    """A node holding ``data`` and optional left and right children."""

    data: Any
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None

    def size(self) -> int:
        """Number of nodes in the subtree rooted here."""
        return 1 + node_size(self.left) + node_size(self.right)

    def height(self) -> int:
        """Length of the longest path from this node down to a leaf."""
        return 1 + max(node_height(self.left), node_height(self.right))


def node_size(node: Optional[BinaryNode]) -> int:
    """Size of the subtree at ``node``; 0 for no node."""
    return 0 if node is None else node.size()


def node_height(node: Optional[BinaryNode]) -> int:
    """Height of the subtree at ``node``; -1 for no node."""
    return -1 if node is None else node.height()