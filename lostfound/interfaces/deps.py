"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from lostfound.infrastructure.database import get_db
from lostfound.domain.models.account import Account
from lostfound.domain.models.item import Item
from lostfound.domain.models.reference import Category, Location
from lostfound.domain.repositories.account_repository import AccountRepository
from lostfound.domain.repositories.base import ReferenceRepository
from lostfound.domain.repositories.item_repository import ItemRepository
from lostfound.infrastructure.repositories.account_repository import SQLAlchemyAccountRepository
from lostfound.infrastructure.repositories.base_repository import SQLAlchemyReferenceRepository
from lostfound.infrastructure.repositories.item_repository import SQLAlchemyItemRepository


def get_account_repository(db: Session = Depends(get_db)) -> AccountRepository:
    """Get account repository instance."""
    return SQLAlchemyAccountRepository(db, Account)


def get_item_repository(db: Session = Depends(get_db)) -> ItemRepository:
    """Get item repository instance."""
    return SQLAlchemyItemRepository(db, Item)


def get_category_repository(db: Session = Depends(get_db)) -> ReferenceRepository[Category]:
    return SQLAlchemyReferenceRepository(db, Category)


def get_location_repository(db: Session = Depends(get_db)) -> ReferenceRepository[Location]:
    return SQLAlchemyReferenceRepository(db, Location)
