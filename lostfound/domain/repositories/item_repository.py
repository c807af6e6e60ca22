"""
Item Repository Interface.
Defines specific data access operations for lost/found reports.
"""

from typing import Any, Dict, List, Protocol

from lostfound.domain.models.item import Item, ItemType
from lostfound.domain.schemas.item import ItemCreate


class ItemRepository(Protocol):
    """Interface for Item-specific operations."""

    def submit(self, item_type: ItemType, data: ItemCreate) -> Item:
        """Insert an Active report of the given type."""
        ...

    def list_active(self, item_type: ItemType, limit: int) -> List[Dict[str, Any]]:
        """Active reports joined with location and category names, newest first."""
        ...

    def count_active(self, item_type: ItemType) -> int:
        """Count Active reports of the given type."""
        ...

    def count_active_by_reporter(self, account_id: str) -> int:
        """Count Active reports of any type filed by an account."""
        ...
