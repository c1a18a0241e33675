import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.database import get_db
from wanderer.dependencies import require_admin
from wanderer.models.catalog import Restaurant
from wanderer.models.user import User
from wanderer.schemas.catalog import RestaurantCreate, RestaurantResponse, RestaurantUpdate
from wanderer.services.catalog_service import CatalogNotFound, catalog_service

router = APIRouter()


async def _get_restaurant(db: AsyncSession, restaurant_id: uuid.UUID) -> Restaurant:
    try:
        return await catalog_service.get(db, Restaurant, restaurant_id)
    except CatalogNotFound:
        raise HTTPException(status_code=404, detail="Restaurant not found")


@router.get("", response_model=list[RestaurantResponse])
async def list_restaurants(
    district: str | None = Query(None, description="e.g. 'District 2'"),
    db: AsyncSession = Depends(get_db),
):
    restaurants = await catalog_service.list_restaurants(db, district=district)
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(restaurant_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return RestaurantResponse.model_validate(await _get_restaurant(db, restaurant_id))


@router.post("", status_code=201, response_model=RestaurantResponse)
async def create_restaurant(
    req: RestaurantCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    restaurant = await catalog_service.create(db, Restaurant, req.model_dump())
    await db.commit()
    await db.refresh(restaurant)
    return RestaurantResponse.model_validate(restaurant)


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    restaurant_id: uuid.UUID,
    req: RestaurantUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    restaurant = await _get_restaurant(db, restaurant_id)
    await catalog_service.update(db, restaurant, req.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(restaurant)
    return RestaurantResponse.model_validate(restaurant)


@router.delete("/{restaurant_id}", status_code=204)
async def delete_restaurant(
    restaurant_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    restaurant = await _get_restaurant(db, restaurant_id)
    await catalog_service.delete(db, restaurant)
    await db.commit()
