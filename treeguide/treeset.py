"""An ordered set backed by a binary search tree."""

from __future__ import annotations

from typing import Any, Iterator

from treeguide.bst import BinarySearchTree
from treeguide.node import BinaryNode


class TreeSet:
    """Set of ordered elements, iterated in ascending order."""

    def __init__(self, *args: Any) -> None:
        self._tree = BinarySearchTree()
        self.add(*args)

    def add(self, *args: Any) -> None:
        """Add every given element; existing ones are ignored."""
        for element in args:
            self._tree.insert(element)

    def size(self) -> int:
        """Number of elements in the set."""
        return self._tree.size()

    def contains(self, element: Any) -> bool:
        """Return True when ``element`` is in the set."""
        return self._tree.search(element)

    def remove(self, element: Any) -> None:
        """Remove ``element`` if present."""
        self._tree.remove(element)

    def values(self) -> list[Any]:
        """Elements in ascending order."""
        return list(self)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[Any]:
        stack: list[BinaryNode] = []
        node = self._tree.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __str__(self) -> str:
        return "Set: {" + " ".join(str(v) for v in self) + "}"

    def __repr__(self) -> str:
        return f"TreeSet({', '.join(repr(v) for v in self)})"