"""Item report domain model: maps to the 'items' table."""

import enum

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.sql import func

from lostfound.infrastructure.database import Base


class ItemType(str, enum.Enum):
    LOST = "Lost"
    FOUND = "Found"


class ItemStatus(str, enum.Enum):
    # Nothing moves an item out of Active yet; claiming/resolving is not built.
    ACTIVE = "Active"


class Item(Base):
    __tablename__ = "items"

    id = Column("ItemID", Integer, primary_key=True, autoincrement=True)
    title = Column("Title", String(200), nullable=False)
    description = Column("Description", Text, nullable=False)
    item_type = Column("ItemType", String(10), nullable=False, index=True)
    date_lost_found = Column("DateLostFound", Date, nullable=False)
    reported_by_user_id = Column(
        "ReportedByUserID", String(50), ForeignKey("student_staff.UserID"), nullable=False, index=True
    )
    location_id = Column("LocationID", Integer, ForeignKey("locations.LocationID"), nullable=False)
    category_id = Column("CategoryID", Integer, ForeignKey("categories.CategoryID"), nullable=False)
    current_status = Column("CurrentStatus", String(20), nullable=False, default=ItemStatus.ACTIVE.value)
    image_url = Column("ImageURL", String(500), nullable=True)
    date_reported = Column("DateReported", DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Item {self.id} - {self.item_type} {self.title}>"
