from fastapi import APIRouter, Depends, Path, Query, status
from typing import List, Literal, Optional
from core.dependencies import get_store
from db.repository import Store
from models.review import ReviewCreate, ReviewOut, ReviewSummary
from services.review_service import create_review, list_reviews, summarize_reviews
from utils.logger import get_logger

logger = get_logger("Review_Route")
router = APIRouter(tags=["Reviews"])

@router.get("/restaurants/{restaurant_id}/reviews", response_model=List[ReviewOut])
async def api_list_reviews(
    restaurant_id: int = Path(...),
    sort: Optional[Literal["newest", "oldest", "highest", "lowest"]] = Query(None),
    store: Store = Depends(get_store),
):
    return await list_reviews(store, restaurant_id, sort=sort)

@router.get("/restaurants/{restaurant_id}/reviews/summary", response_model=ReviewSummary)
async def api_review_summary(restaurant_id: int = Path(...), store: Store = Depends(get_store)):
    reviews = await list_reviews(store, restaurant_id)
    return summarize_reviews(reviews)

@router.post("/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
async def api_create_review(payload: ReviewCreate, store: Store = Depends(get_store)):
    return await create_review(store, payload)
