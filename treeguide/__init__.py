"""Binary trees, binary search trees, a tree-backed set, traversal iterators and a stack."""

__version__ = "0.1.0"