"""Itineraries router — build, schedule, save and export trip plans."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.data.albay import ITINERARY_CATEGORIES
from wanderer.database import get_db
from wanderer.dependencies import get_current_user
from wanderer.models.itinerary import Itinerary
from wanderer.models.user import User
from wanderer.schemas.catalog import SpotResponse
from wanderer.schemas.itinerary import (
    AddItemRequest,
    AddItemResponse,
    CreateItineraryRequest,
    ItineraryResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from wanderer.services.catalog_service import CatalogNotFound, catalog_service
from wanderer.services.export_service import export_service
from wanderer.services.itinerary_service import ItineraryNotFound, itinerary_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_user_itinerary(db: AsyncSession, user: User, itinerary_id: uuid.UUID) -> Itinerary:
    try:
        return await itinerary_service.get_for_user(db, user, itinerary_id)
    except ItineraryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/categories")
async def itinerary_categories():
    return ITINERARY_CATEGORIES


@router.get("/candidates", response_model=list[SpotResponse])
async def candidate_spots(
    category: list[str] = Query([], description="Selected interests; repeatable"),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Spots tagged with any of the selected interests."""
    try:
        spots = await itinerary_service.find_candidates(db, category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [SpotResponse.model_validate(s) for s in spots]


@router.post("/schedule", response_model=ScheduleResponse)
async def preview_schedule(
    req: ScheduleRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Lay out the selected spots over days without saving."""
    try:
        return await itinerary_service.preview(db, req.spot_ids)
    except ItineraryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("", status_code=201, response_model=ItineraryResponse)
async def create_itinerary(
    req: CreateItineraryRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        itinerary = await itinerary_service.build_itinerary(
            db, user, req.categories, req.spot_ids, name=req.name
        )
    except ItineraryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    await db.commit()
    await db.refresh(itinerary)
    return ItineraryResponse.model_validate(itinerary)


@router.get("", response_model=list[ItineraryResponse])
async def list_itineraries(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    itineraries = await itinerary_service.list_for_user(db, user)
    return [ItineraryResponse.model_validate(i) for i in itineraries]


@router.post("/items", response_model=AddItemResponse)
async def add_item(
    req: AddItemRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Add a spot, stay or restaurant to the latest itinerary (created if missing)."""
    try:
        item = await catalog_service.load_item(db, req.item_type, req.item_id)
    except CatalogNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    itinerary, added = await itinerary_service.add_item(db, user, item, req.item_type)
    await db.commit()
    await db.refresh(itinerary)
    return AddItemResponse(added=added, itinerary=ItineraryResponse.model_validate(itinerary))


@router.get("/{itinerary_id}", response_model=ItineraryResponse)
async def get_itinerary(
    itinerary_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return ItineraryResponse.model_validate(await _get_user_itinerary(db, user, itinerary_id))


@router.delete("/{itinerary_id}", status_code=204)
async def delete_itinerary(
    itinerary_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        await itinerary_service.delete_for_user(db, user, itinerary_id)
    except ItineraryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    await db.commit()


@router.get("/{itinerary_id}/export/pdf")
async def export_pdf(
    itinerary_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Download the itinerary as PDF."""
    itinerary = await _get_user_itinerary(db, user, itinerary_id)
    pdf_bytes = export_service.generate_itinerary_pdf(itinerary, traveler_name=user.full_name)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=itinerary_{itinerary_id}.pdf"},
    )


@router.get("/{itinerary_id}/export/csv")
async def export_csv(
    itinerary_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Download the itinerary as CSV."""
    itinerary = await _get_user_itinerary(db, user, itinerary_id)
    return Response(
        content=export_service.generate_itinerary_csv(itinerary),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=itinerary_{itinerary_id}.csv"},
    )
