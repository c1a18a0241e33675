"""Tourist spots router — public browsing and admin maintenance."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.database import get_db
from wanderer.dependencies import require_admin
from wanderer.models.catalog import TouristSpot
from wanderer.models.user import User
from wanderer.schemas.catalog import SpotCreate, SpotResponse, SpotUpdate
from wanderer.services.catalog_service import CatalogNotFound, catalog_service

router = APIRouter()


async def _get_spot(db: AsyncSession, spot_id: uuid.UUID) -> TouristSpot:
    try:
        return await catalog_service.get(db, TouristSpot, spot_id)
    except CatalogNotFound:
        raise HTTPException(status_code=404, detail="Spot not found")


@router.get("", response_model=list[SpotResponse])
async def list_spots(
    q: str | None = Query(None, description="Matches name or municipality"),
    category: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    spots = await catalog_service.search_spots(db, q=q, category=category)
    return [SpotResponse.model_validate(s) for s in spots]


@router.get("/{spot_id}", response_model=SpotResponse)
async def get_spot(spot_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return SpotResponse.model_validate(await _get_spot(db, spot_id))


@router.post("", status_code=201, response_model=SpotResponse)
async def create_spot(
    req: SpotCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    spot = await catalog_service.create(db, TouristSpot, req.model_dump())
    await db.commit()
    await db.refresh(spot)
    return SpotResponse.model_validate(spot)


@router.patch("/{spot_id}", response_model=SpotResponse)
async def update_spot(
    spot_id: uuid.UUID,
    req: SpotUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    spot = await _get_spot(db, spot_id)
    await catalog_service.update(db, spot, req.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(spot)
    return SpotResponse.model_validate(spot)


@router.delete("/{spot_id}", status_code=204)
async def delete_spot(
    spot_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    spot = await _get_spot(db, spot_id)
    await catalog_service.delete(db, spot)
    await db.commit()
