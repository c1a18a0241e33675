import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.database import get_db
from wanderer.dependencies import require_admin
from wanderer.models.catalog import Accommodation
from wanderer.models.user import User
from wanderer.schemas.catalog import AccommodationCreate, AccommodationResponse, AccommodationUpdate
from wanderer.services.catalog_service import CatalogNotFound, catalog_service

router = APIRouter()


async def _get_accommodation(db: AsyncSession, accommodation_id: uuid.UUID) -> Accommodation:
    try:
        return await catalog_service.get(db, Accommodation, accommodation_id)
    except CatalogNotFound:
        raise HTTPException(status_code=404, detail="Accommodation not found")


@router.get("", response_model=list[AccommodationResponse])
async def list_accommodations(
    q: str | None = Query(None),
    category: list[str] = Query([], description="Repeatable; every category must match"),
    db: AsyncSession = Depends(get_db),
):
    stays = await catalog_service.search_accommodations(db, q=q, categories=category)
    return [AccommodationResponse.model_validate(a) for a in stays]


@router.get("/{accommodation_id}", response_model=AccommodationResponse)
async def get_accommodation(accommodation_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return AccommodationResponse.model_validate(await _get_accommodation(db, accommodation_id))


@router.post("", status_code=201, response_model=AccommodationResponse)
async def create_accommodation(
    req: AccommodationCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    stay = await catalog_service.create(db, Accommodation, req.model_dump())
    await db.commit()
    await db.refresh(stay)
    return AccommodationResponse.model_validate(stay)


@router.patch("/{accommodation_id}", response_model=AccommodationResponse)
async def update_accommodation(
    accommodation_id: uuid.UUID,
    req: AccommodationUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    stay = await _get_accommodation(db, accommodation_id)
    await catalog_service.update(db, stay, req.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(stay)
    return AccommodationResponse.model_validate(stay)


@router.delete("/{accommodation_id}", status_code=204)
async def delete_accommodation(
    accommodation_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    stay = await _get_accommodation(db, accommodation_id)
    await catalog_service.delete(db, stay)
    await db.commit()
