from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.database import get_db
from wanderer.dependencies import get_current_user
from wanderer.models.review import Favorite
from wanderer.models.user import User
from wanderer.schemas.auth import UserResponse
from wanderer.schemas.user import (
    FavoriteRequest,
    FavoriteResponse,
    FavoriteToggleResponse,
    PreferencesRequest,
    PreferencesResponse,
    ProfileUpdate,
)
from wanderer.services.catalog_service import CatalogNotFound, catalog_service

router = APIRouter()


def _preferences_response(user: User) -> PreferencesResponse:
    prefs = user.user_preferences or {}
    return PreferencesResponse(
        categories=prefs.get("categories", []),
        subcategories=prefs.get("subcategories", []),
        districts=prefs.get("districts", []),
        travel_style=prefs.get("travel_style"),
        travel_pace=prefs.get("travel_pace"),
        onboarding_complete=user.onboarding_complete,
    )


async def _find_mark(db: AsyncSession, user: User, item_id, kind: str) -> Favorite | None:
    result = await db.execute(
        select(Favorite).where(
            Favorite.user_id == user.id,
            Favorite.item_id == item_id,
            Favorite.kind == kind,
        )
    )
    return result.scalar_one_or_none()


async def _ensure_item(db: AsyncSession, req: FavoriteRequest):
    try:
        await catalog_service.load_item(db, req.item_type, req.item_id)
    except CatalogNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)


@router.patch("/me", response_model=UserResponse)
async def update_profile(
    req: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    for field, value in req.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    await db.commit()
    await db.refresh(user)
    return UserResponse.model_validate(user)


@router.get("/me/preferences", response_model=PreferencesResponse)
async def get_preferences(user: User = Depends(get_current_user)):
    """Get the current user's onboarding answers."""
    return _preferences_response(user)


@router.put("/me/preferences", response_model=PreferencesResponse)
async def update_preferences(
    req: PreferencesRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Store onboarding answers; they drive recommendations and the feed."""
    answers = req.model_dump()
    user.onboarding_answers = answers
    user.user_preferences = {
        "categories": req.categories,
        "subcategories": req.subcategories,
        "districts": req.districts,
        "travel_style": req.travel_style,
        "travel_pace": req.travel_pace,
    }
    user.onboarding_complete = True
    await db.commit()
    await db.refresh(user)
    return _preferences_response(user)


@router.get("/me/favorites", response_model=list[FavoriteResponse])
async def list_favorites(
    kind: Literal["favorite", "visited"] = Query("favorite"),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    result = await db.execute(
        select(Favorite)
        .where(Favorite.user_id == user.id, Favorite.kind == kind)
        .order_by(Favorite.created_at.desc())
    )
    return [FavoriteResponse.model_validate(f) for f in result.scalars().all()]


@router.post("/me/favorites", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    req: FavoriteRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Add the item to favorites, or remove it when already there."""
    existing = await _find_mark(db, user, req.item_id, "favorite")
    if existing:
        await db.delete(existing)
        await db.commit()
        return FavoriteToggleResponse(item_id=req.item_id, kind="favorite", active=False)

    await _ensure_item(db, req)
    db.add(Favorite(user_id=user.id, item_id=req.item_id, item_type=req.item_type, kind="favorite"))
    await db.commit()
    return FavoriteToggleResponse(item_id=req.item_id, kind="favorite", active=True)


@router.post("/me/visited", response_model=FavoriteToggleResponse)
async def mark_visited(
    req: FavoriteRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if not await _find_mark(db, user, req.item_id, "visited"):
        await _ensure_item(db, req)
        db.add(Favorite(user_id=user.id, item_id=req.item_id, item_type=req.item_type, kind="visited"))
        await db.commit()
    return FavoriteToggleResponse(item_id=req.item_id, kind="visited", active=True)
