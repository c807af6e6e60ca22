"""
SQLAlchemy Implementation of Item Repository.
"""

from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from lostfound.domain.models.item import Item, ItemStatus, ItemType
from lostfound.domain.models.reference import Category, Location
from lostfound.domain.repositories.item_repository import ItemRepository
from lostfound.domain.schemas.item import ItemCreate
from lostfound.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyItemRepository(SQLAlchemyRepository[Item], ItemRepository):
    """Item repository implementation using SQLAlchemy."""

    def submit(self, item_type: ItemType, data: ItemCreate) -> Item:
        item = Item(
            title=data.title,
            description=data.description,
            item_type=item_type.value,
            date_lost_found=data.date_lost_found,
            reported_by_user_id=data.reported_by_user_id,
            location_id=data.location_id,
            category_id=data.category_id,
            current_status=ItemStatus.ACTIVE.value,
            image_url=data.image_url or None,
        )
        try:
            self.db.add(item)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(item)
        return item

    def list_active(self, item_type: ItemType, limit: int) -> List[Dict[str, Any]]:
        results = (
            self.db.query(
                Item.id.label("item_id"),
                Item.title.label("title"),
                Item.description.label("description"),
                Item.date_lost_found.label("date_lost_found"),
                Location.name.label("location_name"),
                Category.name.label("category_name"),
            )
            .join(Location, Item.location_id == Location.id)
            .join(Category, Item.category_id == Category.id)
            .filter(
                Item.item_type == item_type.value,
                Item.current_status == ItemStatus.ACTIVE.value,
            )
            # DateReported has one-second resolution; ItemID orders same-second reports
            .order_by(Item.date_reported.desc(), Item.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(r._mapping) for r in results]

    def count_active(self, item_type: ItemType) -> int:
        return self.db.query(func.count(Item.id)).filter(
            Item.item_type == item_type.value,
            Item.current_status == ItemStatus.ACTIVE.value,
        ).scalar() or 0

    def count_active_by_reporter(self, account_id: str) -> int:
        return self.db.query(func.count(Item.id)).filter(
            Item.reported_by_user_id == account_id,
            Item.current_status == ItemStatus.ACTIVE.value,
        ).scalar() or 0
