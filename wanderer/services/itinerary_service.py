"""Itinerary service — candidate selection, scheduling and persistence of itineraries."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.models.catalog import TouristSpot
from wanderer.models.itinerary import Itinerary
from wanderer.models.user import User
from wanderer.services.itinerary_scheduler import schedule_spots, schedule_to_route
from wanderer.services.recommendation_service import preferences_for, recommendation_service

logger = logging.getLogger(__name__)

DEFAULT_ITINERARY_NAME = "My Personalized Itinerary"
AUTO_ADD_LIMIT = 5


class ItineraryNotFound(ValueError):
    pass


def itinerary_name(categories: list[str]) -> str:
    """e.g. ['Nature', 'Food'] -> 'Nature & Food Adventure'."""
    return f"{' & '.join(categories)} Adventure"


def item_snapshot(item, item_type: str) -> dict:
    """Denormalised copy of a catalog row stored inside itineraries.spots."""
    snapshot = {
        "id": str(item.id),
        "name": item.name,
        "location": item.location,
        "description": item.description,
        "type": item_type,
    }
    # Restaurants carry no coordinates; other rows keep theirs even when unset
    if hasattr(item, "latitude"):
        snapshot["latitude"] = item.latitude
        snapshot["longitude"] = item.longitude
    return snapshot


class ItineraryService:
    async def find_candidates(self, db: AsyncSession, categories: list[str]) -> list[TouristSpot]:
        """Spots tagged with at least one of the categories (exact tag match)."""
        if not categories:
            raise ValueError("Please select at least one interest")
        wanted = set(categories)
        result = await db.execute(select(TouristSpot).order_by(TouristSpot.name))
        return [s for s in result.scalars().all() if wanted.intersection(s.category or [])]

    async def load_spots(self, db: AsyncSession, spot_ids: list[uuid.UUID]) -> list[TouristSpot]:
        """Fetch spots preserving the requested order."""
        result = await db.execute(select(TouristSpot).where(TouristSpot.id.in_(spot_ids)))
        by_id = {s.id: s for s in result.scalars().all()}
        missing = [str(sid) for sid in spot_ids if sid not in by_id]
        if missing:
            raise ItineraryNotFound(f"Spot not found: {', '.join(missing)}")
        return [by_id[sid] for sid in dict.fromkeys(spot_ids)]

    async def preview(self, db: AsyncSession, spot_ids: list[uuid.UUID]) -> dict:
        spots = await self.load_spots(db, spot_ids)
        return schedule_to_route(schedule_spots(spots))

    async def build_itinerary(
        self,
        db: AsyncSession,
        user: User,
        categories: list[str],
        spot_ids: list[uuid.UUID],
        name: str | None = None,
    ) -> Itinerary:
        """Schedule the selected spots and save them as a new itinerary."""
        spots = await self.load_spots(db, spot_ids)
        schedule = schedule_spots(spots)

        itinerary = Itinerary(
            user_id=user.id,
            name=name or itinerary_name(categories),
            selected_categories=categories,
            spots=[item_snapshot(s, "spot") for s in spots],
            route=schedule_to_route(schedule),
        )
        db.add(itinerary)
        await db.flush()
        logger.info(f"Itinerary {itinerary.id} saved for user {user.id} ({len(spots)} spots)")
        return itinerary

    async def list_for_user(self, db: AsyncSession, user: User) -> list[Itinerary]:
        result = await db.execute(
            select(Itinerary)
            .where(Itinerary.user_id == user.id)
            .order_by(Itinerary.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_for_user(self, db: AsyncSession, user: User, itinerary_id: uuid.UUID) -> Itinerary:
        result = await db.execute(
            select(Itinerary).where(Itinerary.id == itinerary_id, Itinerary.user_id == user.id)
        )
        itinerary = result.scalar_one_or_none()
        if not itinerary:
            raise ItineraryNotFound("Itinerary not found")
        return itinerary

    async def delete_for_user(self, db: AsyncSession, user: User, itinerary_id: uuid.UUID) -> None:
        itinerary = await self.get_for_user(db, user, itinerary_id)
        await db.delete(itinerary)
        await db.flush()
        logger.info(f"Itinerary {itinerary_id} deleted by user {user.id}")

    async def latest_for_user(self, db: AsyncSession, user: User) -> Itinerary | None:
        result = await db.execute(
            select(Itinerary)
            .where(Itinerary.user_id == user.id)
            .order_by(Itinerary.created_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def add_item(self, db: AsyncSession, user: User, item, item_type: str) -> tuple[Itinerary, bool]:
        """
        Append an item to the user's most recent itinerary.

        Creates a new itinerary when the user has none. Returns the itinerary and
        whether the item was actually added (False when it was already present).
        """
        itinerary = await self.latest_for_user(db, user)
        snapshot = item_snapshot(item, item_type)

        if itinerary is None:
            prefs = user.user_preferences or {}
            itinerary = Itinerary(
                user_id=user.id,
                name=DEFAULT_ITINERARY_NAME,
                spots=[snapshot],
                selected_categories=list(prefs.get("categories") or []),
            )
            db.add(itinerary)
            await db.flush()
            return itinerary, True

        current = list(itinerary.spots or [])
        if any(s.get("id") == snapshot["id"] for s in current):
            return itinerary, False

        # Reassign so the JSON column is flagged dirty
        itinerary.spots = current + [snapshot]
        await db.flush()
        return itinerary, True

    async def auto_add_top_spots(self, db: AsyncSession, user: User, limit: int = AUTO_ADD_LIMIT) -> list[str]:
        """Add the best feed spots to the user's itinerary. Returns ids that were added."""
        ranked = await recommendation_service.feed_spots(db, preferences_for(user))
        added: list[str] = []
        for spot, _score in ranked[:limit]:
            _, was_added = await self.add_item(db, user, spot, "spot")
            if was_added:
                added.append(str(spot.id))
        return added


itinerary_service = ItineraryService()
