"""Recommendations router — spotlight ranking, personalised feed and nearby food."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.database import get_db
from wanderer.dependencies import get_current_user
from wanderer.models.catalog import TouristSpot
from wanderer.models.user import User
from wanderer.schemas.catalog import (
    AccommodationResponse,
    RestaurantResponse,
    ScoredSpotResponse,
    SpotResponse,
)
from wanderer.schemas.itinerary import AutoAddResponse, ItineraryResponse
from wanderer.services.itinerary_service import itinerary_service
from wanderer.services.recommendation_service import preferences_for, recommendation_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _scored(ranked: list[tuple[TouristSpot, float]]) -> list[ScoredSpotResponse]:
    return [
        ScoredSpotResponse(**SpotResponse.model_validate(spot).model_dump(), score=round(score, 2))
        for spot, score in ranked
    ]


@router.get("/spots", response_model=list[ScoredSpotResponse])
async def recommended_spots(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Top spots for the home page, ranked against the user's interests."""
    ranked = await recommendation_service.spotlight(db, preferences_for(user))
    return _scored(ranked)


@router.get("/feed")
async def personalized_feed(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    feed = await recommendation_service.feed(db, preferences_for(user))
    return {
        "spots": _scored(feed["spots"]),
        "accommodations": [AccommodationResponse.model_validate(a) for a in feed["accommodations"]],
        "restaurants": [RestaurantResponse.model_validate(r) for r in feed["restaurants"]],
    }


@router.get("/restaurants", response_model=list[RestaurantResponse])
async def nearby_restaurants(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Restaurants in the user's preferred districts."""
    prefs = preferences_for(user)
    restaurants = await recommendation_service.nearby_restaurants(db, prefs.districts)
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.post("/feed/auto-add", response_model=AutoAddResponse)
async def auto_add_feed_spots(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Add the top feed spots to the user's latest itinerary."""
    added = await itinerary_service.auto_add_top_spots(db, user)
    await db.commit()
    logger.info(f"Auto-added {len(added)} feed spots for user {user.id}")

    itinerary = await itinerary_service.latest_for_user(db, user)
    if itinerary is None:
        return AutoAddResponse(added=added)
    await db.refresh(itinerary)
    return AutoAddResponse(added=added, itinerary=ItineraryResponse.model_validate(itinerary))
