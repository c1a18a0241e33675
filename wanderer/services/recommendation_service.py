"""Recommendation service — loads catalog rows and applies the scoring engine."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.models.catalog import Accommodation, Restaurant, TouristSpot
from wanderer.models.user import User
from wanderer.services.scoring_engine import (
    FEED_LIMIT,
    FEED_WEIGHTS,
    SPOTLIGHT_LIMIT,
    SPOTLIGHT_WEIGHTS,
    Preferences,
    filter_by_districts,
    rank_spots,
)

logger = logging.getLogger(__name__)

FEED_SIDE_LIMIT = 3          # accommodations / restaurants shown in the feed
NEARBY_RESTAURANT_LIMIT = 6


def preferences_for(user: User) -> Preferences:
    return Preferences.from_dict(user.user_preferences)


class RecommendationService:
    async def _all(self, db: AsyncSession, model) -> list:
        result = await db.execute(select(model).order_by(model.name))
        return list(result.scalars().all())

    async def spotlight(self, db: AsyncSession, prefs: Preferences) -> list[tuple[TouristSpot, float]]:
        """Top spots for the home-page panel; every spot is eligible."""
        spots = await self._all(db, TouristSpot)
        return rank_spots(spots, prefs, SPOTLIGHT_WEIGHTS, limit=SPOTLIGHT_LIMIT)

    async def feed_spots(self, db: AsyncSession, prefs: Preferences) -> list[tuple[TouristSpot, float]]:
        """Spots that match at least one preference, best first."""
        spots = await self._all(db, TouristSpot)
        return rank_spots(spots, prefs, FEED_WEIGHTS, limit=FEED_LIMIT, positive_only=True)

    async def feed(self, db: AsyncSession, prefs: Preferences) -> dict:
        spots = await self.feed_spots(db, prefs)
        accommodations = filter_by_districts(await self._all(db, Accommodation), prefs.districts)
        restaurants = filter_by_districts(await self._all(db, Restaurant), prefs.districts)
        logger.debug(
            f"Feed: {len(spots)} spots, {len(accommodations)} accommodations, "
            f"{len(restaurants)} restaurants for districts={prefs.districts}"
        )
        return {
            "spots": spots,
            "accommodations": accommodations[:FEED_SIDE_LIMIT],
            "restaurants": restaurants[:FEED_SIDE_LIMIT],
        }

    async def nearby_restaurants(self, db: AsyncSession, districts: list[str]) -> list[Restaurant]:
        """Restaurants inside the preferred districts; nothing when no district is chosen."""
        if not districts:
            return []
        restaurants = filter_by_districts(await self._all(db, Restaurant), districts)
        return restaurants[:NEARBY_RESTAURANT_LIMIT]


recommendation_service = RecommendationService()
