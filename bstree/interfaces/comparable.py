"""
Comparable protocol for keys stored in ordered containers.
"""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """
    Structural type for keys that support a total order.

    Containers only ever use ``<`` and ``==``. A type whose comparisons are
    not a valid total order can be stored, but the container's ordering
    guarantees no longer hold.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __eq__(self, other: object, /) -> bool: ...


K = TypeVar("K", bound=Comparable)
