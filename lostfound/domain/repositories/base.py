"""
Base Repository Interface.
Defines the read contract shared by the reference tables.
"""

from typing import TypeVar, List, Protocol

T = TypeVar("T")


class ReferenceRepository(Protocol[T]):
    """Interface for small lookup tables listed whole."""

    def list_all(self) -> List[T]:
        """List every entity as a full snapshot, ordered by display name."""
        ...
