"""
Abstract base classes and protocols for ordered containers.
"""

from bstree.interfaces.comparable import Comparable
from bstree.interfaces.ordered_container import OrderedContainer

__all__ = ["Comparable", "OrderedContainer"]
