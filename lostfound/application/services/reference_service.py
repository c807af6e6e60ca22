"""Reference service: category and location listings."""

from typing import List

import structlog
from sqlalchemy.exc import SQLAlchemyError

from lostfound.core.exceptions import InternalException
from lostfound.domain.repositories.base import ReferenceRepository
from lostfound.domain.schemas.item import ReferenceRead

logger = structlog.get_logger(__name__)


def list_reference(repo: ReferenceRepository, label: str) -> List[ReferenceRead]:
    """Every row of a reference table, alphabetical by name."""
    try:
        rows = repo.list_all()
    except SQLAlchemyError as e:
        logger.error(f"DB error fetching {label}", error=str(e))
        raise InternalException(f"Error fetching {label}.")
    return [ReferenceRead.model_validate(r) for r in rows]
