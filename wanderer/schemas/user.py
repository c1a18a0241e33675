import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(default=None, min_length=1, max_length=200)
    bio: str | None = Field(default=None, max_length=1000)
    avatar_url: str | None = None


class PreferencesRequest(BaseModel):
    """Onboarding answers."""

    categories: list[str] = []
    subcategories: list[str] = []
    districts: list[str] = []
    travel_style: str | None = None
    travel_pace: str | None = None


class PreferencesResponse(PreferencesRequest):
    onboarding_complete: bool


class FavoriteRequest(BaseModel):
    item_id: uuid.UUID
    item_type: Literal["spot", "accommodation", "restaurant"] = "spot"


class FavoriteResponse(BaseModel):
    id: uuid.UUID
    item_id: uuid.UUID
    item_type: str
    kind: str
    created_at: datetime

    model_config = {"from_attributes": True}


class FavoriteToggleResponse(BaseModel):
    item_id: uuid.UUID
    kind: str
    active: bool
