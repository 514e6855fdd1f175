"""
Ordered container implementations.
"""

from bstree.models.sortedcontainers.binary_search_tree import BinarySearchTree, Node

__all__ = ["BinarySearchTree", "Node"]
