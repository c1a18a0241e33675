import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ScheduleRequest(BaseModel):
    spot_ids: list[uuid.UUID]


class CreateItineraryRequest(BaseModel):
    categories: list[str] = Field(min_length=1)
    spot_ids: list[uuid.UUID]
    name: str | None = Field(default=None, max_length=255)


class AddItemRequest(BaseModel):
    item_id: uuid.UUID
    item_type: Literal["spot", "accommodation", "restaurant"] = "spot"


class ScheduleEntry(BaseModel):
    spotId: str | None
    spotName: str | None
    description: str | None = None
    location: str | None = None
    day: int
    startTime: str
    endTime: str


class ScheduleResponse(BaseModel):
    schedule: list[ScheduleEntry]
    total_days: int


class ItineraryResponse(BaseModel):
    id: uuid.UUID
    name: str
    selected_categories: list[str] | None = None
    spots: list[dict] | None = None
    route: dict | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AddItemResponse(BaseModel):
    added: bool
    itinerary: ItineraryResponse


class AutoAddResponse(BaseModel):
    added: list[str]
    itinerary: ItineraryResponse | None = None
