"""Item API routes: report and browse lost and found items."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from lostfound.interfaces.deps import get_item_repository
from lostfound.domain.models.item import ItemType
from lostfound.domain.repositories.item_repository import ItemRepository
from lostfound.domain.schemas.item import ItemCreate, ItemSummary
from lostfound.application.services.item_service import list_items, submit_item

router = APIRouter(tags=["Items"])


@router.post("/lost", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def report_lost(body: ItemCreate, repo: ItemRepository = Depends(get_item_repository)):
    submit_item(repo, ItemType.LOST, body)
    return "Lost item reported successfully!"


@router.post("/found", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def report_found(body: ItemCreate, repo: ItemRepository = Depends(get_item_repository)):
    submit_item(repo, ItemType.FOUND, body)
    return "Found item reported successfully!"


# ``limit`` stays a raw string: junk or non-positive values mean "use the default"
@router.get("/lost", response_model=List[ItemSummary])
def get_lost(limit: Optional[str] = None, repo: ItemRepository = Depends(get_item_repository)):
    return list_items(repo, ItemType.LOST, limit)


@router.get("/found", response_model=List[ItemSummary])
def get_found(limit: Optional[str] = None, repo: ItemRepository = Depends(get_item_repository)):
    return list_items(repo, ItemType.FOUND, limit)
