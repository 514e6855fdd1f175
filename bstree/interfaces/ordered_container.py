"""
OrderedContainer abstract base class for insert-and-lookup key containers.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic

from bstree.interfaces.comparable import K


class OrderedContainer(ABC, Generic[K]):
    """
    Abstract base class for ordered key containers.

    Keys are kept in an order determined by their comparisons. Duplicate
    keys are allowed. There is no removal operation.

    Implementations:
    - BinarySearchTree: unbalanced, shape fixed by insertion order
    """

    @abstractmethod
    def insert(self, value: K) -> Any:
        """
        Insert a key.

        Args:
            value: The key to insert. Equal keys are kept, not merged.

        Returns:
            Implementation-defined handle for the stored key.
        """
        pass

    @abstractmethod
    def find(self, value: K) -> Any | None:
        """
        Look up a key.

        Args:
            value: The key to search for.

        Returns:
            A read-only handle for a matching key, None if absent.
        """
        pass

    @abstractmethod
    def has(self, value: K) -> bool:
        """
        Check if a key exists.

        Args:
            value: The key to check.

        Returns:
            True if an equal key is stored, False otherwise.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys, duplicates included.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __contains__(self, value: object) -> bool:
        return self.has(value)

    def __len__(self) -> int:
        return self.size()
