"""Stats API: counts of active reports for the dashboard tiles."""

from fastapi import APIRouter, Depends

from lostfound.interfaces.deps import get_item_repository
from lostfound.domain.models.item import ItemType
from lostfound.domain.repositories.item_repository import ItemRepository
from lostfound.domain.schemas.item import CountResponse
from lostfound.application.services.item_service import count_items, count_reported_by

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/lost", response_model=CountResponse)
def lost_stats(repo: ItemRepository = Depends(get_item_repository)):
    return CountResponse(count=count_items(repo, ItemType.LOST))


@router.get("/found", response_model=CountResponse)
def found_stats(repo: ItemRepository = Depends(get_item_repository)):
    return CountResponse(count=count_items(repo, ItemType.FOUND))


@router.get("/myreported/{user_id}", response_model=CountResponse)
def my_reported_stats(user_id: str, repo: ItemRepository = Depends(get_item_repository)):
    return CountResponse(count=count_reported_by(repo, user_id))
