import uuid

from pydantic import BaseModel, Field, field_validator


def _reject_null(value):
    # Partial updates may omit a field, but not clear a required column
    if value is None:
        raise ValueError("may not be null")
    return value


class SpotBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    location: str = Field(min_length=1, max_length=255)
    municipality: str | None = None
    category: list[str] = []
    spot_type: list[str] | None = None
    contact_number: str | None = None
    image_url: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    rating: float | None = Field(default=None, ge=0, le=5)
    is_hidden_gem: bool = False


class SpotCreate(SpotBase):
    pass


class SpotUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    municipality: str | None = None
    category: list[str] | None = None
    spot_type: list[str] | None = None
    contact_number: str | None = None
    image_url: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    rating: float | None = Field(default=None, ge=0, le=5)
    is_hidden_gem: bool | None = None

    check_not_null = field_validator("name", "location", "category", "is_hidden_gem")(_reject_null)


class SpotResponse(SpotBase):
    id: uuid.UUID

    model_config = {"from_attributes": True}


class ScoredSpotResponse(SpotResponse):
    score: float


class AccommodationBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    location: str = Field(min_length=1, max_length=255)
    municipality: str | None = None
    category: list[str] = []
    amenities: list[str] | None = None
    price_range: str | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    contact_number: str | None = None
    email: str | None = None
    image_url: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class AccommodationCreate(AccommodationBase):
    pass


class AccommodationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    municipality: str | None = None
    category: list[str] | None = None
    amenities: list[str] | None = None
    price_range: str | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    contact_number: str | None = None
    email: str | None = None
    image_url: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    check_not_null = field_validator("name", "location", "category")(_reject_null)


class AccommodationResponse(AccommodationBase):
    id: uuid.UUID

    model_config = {"from_attributes": True}


class RestaurantBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    location: str = Field(min_length=1, max_length=255)
    municipality: str | None = None
    food_type: str | None = None
    image_url: str | None = None


class RestaurantCreate(RestaurantBase):
    pass


class RestaurantUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    municipality: str | None = None
    food_type: str | None = None
    image_url: str | None = None

    check_not_null = field_validator("name", "location")(_reject_null)


class RestaurantResponse(RestaurantBase):
    id: uuid.UUID

    model_config = {"from_attributes": True}


class SubcategoryResponse(BaseModel):
    id: uuid.UUID
    category_id: uuid.UUID | None
    name: str
    description: str | None = None

    model_config = {"from_attributes": True}


class CategoryResponse(BaseModel):
    id: uuid.UUID
    name: str
    icon: str | None = None

    model_config = {"from_attributes": True}


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    icon: str | None = None


class SubcategoryCreate(BaseModel):
    category_id: uuid.UUID
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
