"""Item service: lost/found report submission, listings and counts."""

from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from lostfound.config import get_settings
from lostfound.core.exceptions import InternalException, ValidationException
from lostfound.domain.models.item import ItemType
from lostfound.domain.repositories.item_repository import ItemRepository
from lostfound.domain.schemas.item import ItemCreate, ItemSummary

settings = get_settings()
logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = (
    "title",
    "description",
    "date_lost_found",
    "reported_by_user_id",
    "location_id",
    "category_id",
)

MAX_LIST_LIMIT = 2**31 - 1


def resolve_limit(raw: Optional[str]) -> int:
    """Parse the ``limit`` query value, falling back to the default row count.

    Values past a signed 32-bit integer are clamped so the driver can bind them.
    """
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return settings.DEFAULT_LIST_LIMIT
    if limit <= 0:
        return settings.DEFAULT_LIST_LIMIT
    return min(limit, MAX_LIST_LIMIT)


def submit_item(repo: ItemRepository, item_type: ItemType, data: ItemCreate) -> int:
    """Store a new Active report and return its id."""
    missing = [name for name in REQUIRED_FIELDS if not getattr(data, name)]
    if missing:
        raise ValidationException("Missing required fields.", {"fields": missing})

    label = item_type.value.lower()
    try:
        item = repo.submit(item_type, data)
    except SQLAlchemyError as e:
        logger.error(f"DB error adding {label} item", error=str(e))
        raise InternalException(f"Error adding {label} item.")

    logger.info("Item reported", item_id=item.id, item_type=item_type.value, user_id=data.reported_by_user_id)
    return item.id


def list_items(repo: ItemRepository, item_type: ItemType, limit: Optional[str] = None) -> List[ItemSummary]:
    """Newest Active reports of one type, joined with location and category names."""
    label = item_type.value.lower()
    try:
        rows = repo.list_active(item_type, resolve_limit(limit))
    except SQLAlchemyError as e:
        logger.error(f"DB error fetching {label} items", error=str(e))
        raise InternalException(f"Error fetching {label} items.")
    return [ItemSummary(**row) for row in rows]


def count_items(repo: ItemRepository, item_type: ItemType) -> int:
    label = item_type.value.lower()
    try:
        return repo.count_active(item_type)
    except SQLAlchemyError as e:
        logger.error(f"DB error fetching {label} stats", error=str(e))
        raise InternalException(f"Error fetching {label} stats.")


def count_reported_by(repo: ItemRepository, user_id: str) -> int:
    try:
        return repo.count_active_by_reporter(user_id)
    except SQLAlchemyError as e:
        logger.error("DB error fetching myreported stats", user_id=user_id, error=str(e))
        raise InternalException("Error fetching my reported stats.")
