"""
Binary Search Tree implementation for ordered key storage.

Unbalanced: the shape is fixed entirely by insertion order. Equal keys are
routed to the right subtree.
"""

import logging
from dataclasses import dataclass
from typing import Generic

from bstree.interfaces.comparable import K
from bstree.interfaces.ordered_container import OrderedContainer
from bstree.models.exceptions import OperationInvalid

logger = logging.getLogger(__name__)


@dataclass(eq=False, repr=False, slots=True)
class Node(Generic[K]):
    """
    Node in the Binary Search Tree.

    Exposed to callers as a read-only view. Children are attached only by
    the owning tree during insert.
    """

    _value: K
    _left: "Node[K] | None" = None
    _right: "Node[K] | None" = None

    @property
    def value(self) -> K:
        return self._value

    @property
    def left(self) -> "Node[K] | None":
        return self._left

    @property
    def right(self) -> "Node[K] | None":
        return self._right

    def go_left(self) -> "Node[K]":
        """Return the left child. Raises OperationInvalid if there is none."""
        if self._left is None:
            raise OperationInvalid("go_left", f"node {self._value!r} has no left child")
        return self._left

    def go_right(self) -> "Node[K]":
        """Return the right child. Raises OperationInvalid if there is none."""
        if self._right is None:
            raise OperationInvalid("go_right", f"node {self._value!r} has no right child")
        return self._right

    def __repr__(self) -> str:
        left = self._left._value if self._left is not None else None
        right = self._right._value if self._right is not None else None
        return f"Node(value={self._value!r}, left={left!r}, right={right!r})"


class BinarySearchTree(OrderedContainer[K]):
    """
    Binary Search Tree implementation of OrderedContainer.

    Properties maintained:
    1. Every key in a node's left subtree is strictly less than the node's key
    2. Every key in a node's right subtree is greater than or equal to it
    3. Duplicates are kept; find() returns the one nearest the root

    No rebalancing is done. Inserting sorted keys produces a chain of depth N.
    Not safe for concurrent mutation; callers must serialize insert() against
    every other call.
    """

    def __init__(self) -> None:
        self._root: Node[K] | None = None
        self._size: int = 0

    @property
    def root(self) -> Node[K] | None:
        return self._root

    @property
    def value(self) -> K:
        """Key stored at the root. Raises OperationInvalid if the tree is empty."""
        return self._require_root("value").value

    def go_left(self) -> Node[K]:
        """Left child of the root. Raises OperationInvalid if absent."""
        return self._require_root("go_left").go_left()

    def go_right(self) -> Node[K]:
        """Right child of the root. Raises OperationInvalid if absent."""
        return self._require_root("go_right").go_right()

    def insert(self, value: K) -> Node[K]:
        """Insert a key and return its new node. O(h)"""
        new_node: Node[K] = Node(value)

        if self._root is None:
            self._root = new_node
            self._size += 1
            logger.debug("Inserted %r as root", value)
            return new_node

        # Descend until the first empty child slot
        current = self._root
        depth = 1
        while True:
            depth += 1
            if value < current._value:
                if current._left is None:
                    current._left = new_node
                    break
                current = current._left
            else:
                # Ties go right
                if current._right is None:
                    current._right = new_node
                    break
                current = current._right

        self._size += 1
        logger.debug("Inserted %r at depth %d", value, depth)
        return new_node

    def find(self, value: K) -> Node[K] | None:
        """Find the shallowest node equal to value. O(h)"""
        current = self._root
        while current is not None:
            if value == current._value:
                return current
            if value < current._value:
                current = current._left
            else:
                current = current._right

        logger.debug("Key %r not found", value)
        return None

    def has(self, value: K) -> bool:
        return self.find(value) is not None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path. O(N)"""
        if self._root is None:
            return 0

        best = 0
        stack: list[tuple[Node[K], int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node._left is not None:
                stack.append((node._left, depth + 1))
            if node._right is not None:
                stack.append((node._right, depth + 1))
        return best

    def _require_root(self, operation: str) -> Node[K]:
        if self._root is None:
            raise OperationInvalid(operation, "tree is empty")
        return self._root

    def __repr__(self) -> str:
        root = self._root.value if self._root is not None else None
        return f"BinarySearchTree(root={root!r}, size={self._size})"
