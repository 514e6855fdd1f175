"""
Unbalanced binary search tree over any totally-ordered key type.

This package provides a minimal ordered-key container with:
- insert(value) - O(h), equal keys routed to the right subtree
- find(value) - O(h), returns the shallowest matching node or None
- Read-only inspection accessors for tests (value, go_left, go_right)
"""

from bstree.models.exceptions import OperationInvalid
from bstree.models.sortedcontainers import BinarySearchTree, Node

__all__ = ["BinarySearchTree", "Node", "OperationInvalid"]
