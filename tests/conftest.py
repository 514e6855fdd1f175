"""
Shared pytest fixtures for binary search tree tests.
"""

import pytest

from bstree.models.sortedcontainers import BinarySearchTree


@pytest.fixture
def tree():
    """Provide a fresh, empty BinarySearchTree."""
    return BinarySearchTree()


@pytest.fixture
def reference_tree():
    """Tree built from 10, 5, 15, 20, 12, 7, 2."""
    bst = BinarySearchTree()
    for value in (10, 5, 15, 20, 12, 7, 2):
        bst.insert(value)
    return bst


@pytest.fixture
def lookup_tree():
    """Tree built from 10, 5, 20, 25, 15, 1, 7."""
    bst = BinarySearchTree()
    for value in (10, 5, 20, 25, 15, 1, 7):
        bst.insert(value)
    return bst
