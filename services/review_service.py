from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from db.repository import Store
from utils.logger import get_logger

logger = get_logger("Review_Service")

SORT_KEYS = {
    "newest": (lambda r: r["created_at"], True),
    "oldest": (lambda r: r["created_at"], False),
    "highest": (lambda r: r["rating"], True),
    "lowest": (lambda r: r["rating"], False),
}

async def list_reviews(store: Store, restaurant_id: int, sort: str | None = None):
    reviews = await store.reviews.find(restaurant_id=restaurant_id)
    if sort:
        key, reverse = SORT_KEYS[sort]
        reviews.sort(key=key, reverse=reverse)
    return reviews

async def create_review(store: Store, payload):
    """Append a review. Rating and comment length are checked by the request schema."""
    doc = {
        "restaurant_id": payload.restaurant_id,
        "rating": payload.rating,
        "comment": payload.comment,
        "created_at": datetime.now(timezone.utc),
    }
    review = await store.reviews.insert(doc)
    logger.info("Review created", extra={"review_id": review["id"], "restaurant_id": payload.restaurant_id})
    return review

def summarize_reviews(reviews: list) -> dict:
    distribution = {star: 0 for star in range(1, 6)}
    for r in reviews:
        distribution[r["rating"]] += 1
    average = 0
    if reviews:
        # half-up to one decimal: 4.25 -> 4.3
        exact = Decimal(sum(r["rating"] for r in reviews)) / Decimal(len(reviews))
        average = float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return {"count": len(reviews), "average_rating": average, "distribution": distribution}
