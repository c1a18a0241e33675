"""Catalog service — search and admin maintenance of spots, stays and restaurants."""

import logging
import uuid
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.data.albay import in_districts
from wanderer.database import Base
from wanderer.models.catalog import Accommodation, Category, Restaurant, Subcategory, TouristSpot

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

ITEM_MODELS: dict[str, type[Base]] = {
    "spot": TouristSpot,
    "accommodation": Accommodation,
    "restaurant": Restaurant,
}


class CatalogNotFound(ValueError):
    pass


def _matches_query(item, q: str | None) -> bool:
    if not q:
        return True
    needle = q.strip().lower()
    return needle in (item.name or "").lower() or needle in (item.municipality or "").lower()


class CatalogService:
    async def _all(self, db: AsyncSession, model: type[ModelT]) -> list[ModelT]:
        result = await db.execute(select(model).order_by(model.name))
        return list(result.scalars().all())

    # Category lists live in JSON columns, so tag filters run in Python and
    # behave the same on PostgreSQL and SQLite.

    async def search_spots(
        self, db: AsyncSession, q: str | None = None, category: str | None = None
    ) -> list[TouristSpot]:
        """Name/municipality search plus an optional exact category tag."""
        spots = await self._all(db, TouristSpot)
        return [
            s for s in spots
            if _matches_query(s, q) and (not category or category in (s.category or []))
        ]

    async def search_accommodations(
        self, db: AsyncSession, q: str | None = None, categories: list[str] | None = None
    ) -> list[Accommodation]:
        """Every requested category must be present on the accommodation."""
        wanted = set(categories or [])
        stays = await self._all(db, Accommodation)
        return [
            a for a in stays
            if _matches_query(a, q) and wanted.issubset(a.category or [])
        ]

    async def list_restaurants(self, db: AsyncSession, district: str | None = None) -> list[Restaurant]:
        restaurants = await self._all(db, Restaurant)
        if district:
            restaurants = [r for r in restaurants if in_districts(r.municipality, [district])]
        return restaurants

    async def get(self, db: AsyncSession, model: type[ModelT], item_id: uuid.UUID) -> ModelT:
        item = await db.get(model, item_id)
        if not item:
            raise CatalogNotFound(f"{model.__name__} not found")
        return item

    async def load_item(self, db: AsyncSession, item_type: str, item_id: uuid.UUID):
        model = ITEM_MODELS.get(item_type)
        if model is None:
            raise ValueError(f"Unknown item type: {item_type}")
        item = await db.get(model, item_id)
        if not item:
            raise CatalogNotFound(f"{item_type.capitalize()} not found")
        return item

    async def create(self, db: AsyncSession, model: type[ModelT], data: dict) -> ModelT:
        item = model(**data)
        db.add(item)
        await db.flush()
        logger.info(f"{model.__name__} created: {item.id} ({data.get('name')})")
        return item

    async def update(self, db: AsyncSession, item, data: dict):
        """Apply only the fields that were sent."""
        for field, value in data.items():
            setattr(item, field, value)
        await db.flush()
        logger.info(f"{type(item).__name__} updated: {item.id} ({', '.join(data) or 'no changes'})")
        return item

    async def delete(self, db: AsyncSession, item) -> None:
        await db.delete(item)
        await db.flush()
        logger.info(f"{type(item).__name__} deleted: {item.id}")

    async def list_categories(self, db: AsyncSession) -> list[Category]:
        return await self._all(db, Category)

    async def list_subcategories(
        self, db: AsyncSession, category_names: list[str] | None = None
    ) -> list[Subcategory]:
        """Subcategories, optionally limited to the named parent categories."""
        stmt = select(Subcategory).order_by(Subcategory.name)
        if category_names:
            stmt = stmt.join(Category, Subcategory.category_id == Category.id).where(
                Category.name.in_(category_names)
            )
        result = await db.execute(stmt)
        return list(result.scalars().all())


catalog_service = CatalogService()
