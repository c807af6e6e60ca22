"""Reference API routes: categories and locations for report forms."""

from typing import List

from fastapi import APIRouter, Depends

from lostfound.interfaces.deps import get_category_repository, get_location_repository
from lostfound.domain.repositories.base import ReferenceRepository
from lostfound.domain.schemas.item import ReferenceRead
from lostfound.application.services.reference_service import list_reference

router = APIRouter(tags=["Reference"])


@router.get("/categories", response_model=List[ReferenceRead])
def list_categories(repo: ReferenceRepository = Depends(get_category_repository)):
    return list_reference(repo, "categories")


@router.get("/locations", response_model=List[ReferenceRead])
def list_locations(repo: ReferenceRepository = Depends(get_location_repository)):
    return list_reference(repo, "locations")
