import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wanderer.database import get_db
from wanderer.dependencies import get_current_user
from wanderer.models.catalog import TouristSpot
from wanderer.models.review import Review
from wanderer.models.user import User
from wanderer.schemas.review import ReviewCreate, ReviewResponse

router = APIRouter()

ANONYMOUS_REVIEWER = "Anonymous"


def _review_response(review: Review, reviewer_name: str | None) -> ReviewResponse:
    resp = ReviewResponse.model_validate(review)
    resp.reviewer_name = reviewer_name or ANONYMOUS_REVIEWER
    return resp


@router.get("/{spot_id}/reviews", response_model=list[ReviewResponse])
async def list_reviews(spot_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Reviews for a spot, newest first, with the reviewer's display name."""
    if not await db.get(TouristSpot, spot_id):
        raise HTTPException(status_code=404, detail="Spot not found")

    result = await db.execute(
        select(Review, User.full_name)
        .outerjoin(User, Review.user_id == User.id)
        .where(Review.spot_id == spot_id)
        .order_by(Review.created_at.desc())
    )
    return [_review_response(review, name) for review, name in result.all()]


@router.post("/{spot_id}/reviews", status_code=201, response_model=ReviewResponse)
async def create_review(
    spot_id: uuid.UUID,
    req: ReviewCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    if not await db.get(TouristSpot, spot_id):
        raise HTTPException(status_code=404, detail="Spot not found")

    review = Review(spot_id=spot_id, user_id=user.id, rating=req.rating, comment=req.comment)
    db.add(review)
    await db.commit()
    await db.refresh(review)
    return _review_response(review, user.full_name)
