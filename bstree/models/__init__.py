"""
Data models for ordered containers.
"""

from bstree.models.exceptions import OperationInvalid
from bstree.models.sortedcontainers import BinarySearchTree, Node

__all__ = [
    "OperationInvalid",
    "BinarySearchTree",
    "Node",
]
