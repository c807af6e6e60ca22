"""Pydantic schemas for Item reports, reference data and stats."""

from pydantic import BaseModel
from datetime import date
from typing import Optional


class ItemCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date_lost_found: Optional[date] = None
    reported_by_user_id: Optional[str] = None
    location_id: Optional[int] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class ItemSummary(BaseModel):
    item_id: int
    title: str
    description: str
    date_lost_found: date
    location_name: str
    category_name: str


class ReferenceRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class CountResponse(BaseModel):
    count: int
