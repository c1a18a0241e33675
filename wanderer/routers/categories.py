"""Categories router — onboarding categories/subcategories and catalog vocabularies."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.data.albay import (
    ACCOMMODATION_CATEGORIES,
    DISTRICT_MUNICIPALITIES,
    DISTRICT_SUBTITLES,
    SPOT_CATEGORIES,
)
from wanderer.database import get_db
from wanderer.dependencies import require_admin
from wanderer.models.catalog import Category, Subcategory
from wanderer.models.user import User
from wanderer.schemas.catalog import (
    CategoryCreate,
    CategoryResponse,
    SubcategoryCreate,
    SubcategoryResponse,
)
from wanderer.services.catalog_service import catalog_service

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    categories = await catalog_service.list_categories(db)
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get("/subcategories", response_model=list[SubcategoryResponse])
async def list_subcategories(
    category: list[str] = Query([], description="Parent category names; repeatable"),
    db: AsyncSession = Depends(get_db),
):
    subcategories = await catalog_service.list_subcategories(db, category)
    return [SubcategoryResponse.model_validate(s) for s in subcategories]


@router.get("/vocabulary")
async def get_vocabulary():
    """Fixed tag lists and district layout used by admin forms and onboarding."""
    return {
        "spot_categories": SPOT_CATEGORIES,
        "accommodation_categories": ACCOMMODATION_CATEGORIES,
        "districts": [
            {
                "name": name,
                "subtitle": DISTRICT_SUBTITLES.get(name),
                "municipalities": municipalities,
            }
            for name, municipalities in DISTRICT_MUNICIPALITIES.items()
        ],
    }


@router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(
    req: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    existing = await db.execute(select(Category).where(Category.name == req.name))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="Category already exists")

    category = await catalog_service.create(db, Category, req.model_dump())
    await db.commit()
    await db.refresh(category)
    return CategoryResponse.model_validate(category)


@router.post("/subcategories", status_code=201, response_model=SubcategoryResponse)
async def create_subcategory(
    req: SubcategoryCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    if not await db.get(Category, req.category_id):
        raise HTTPException(status_code=404, detail="Category not found")

    subcategory = await catalog_service.create(db, Subcategory, req.model_dump())
    await db.commit()
    await db.refresh(subcategory)
    return SubcategoryResponse.model_validate(subcategory)
