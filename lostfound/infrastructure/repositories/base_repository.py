"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Generic, List, Type, TypeVar

from sqlalchemy.orm import Session
from lostfound.domain.repositories.base import ReferenceRepository
from lostfound.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(Generic[ModelType]):
    """Holds the session and mapped model every repository works against."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model


class SQLAlchemyReferenceRepository(SQLAlchemyRepository[ModelType], ReferenceRepository[ModelType]):
    """Categories and locations: small tables listed whole, by name."""

    def list_all(self) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.name).all()
