from pydantic import Field
from typing import Dict
from datetime import datetime
from models.base import CamelModel

class ReviewCreate(CamelModel):
    restaurant_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=10, max_length=500)

class ReviewOut(CamelModel):
    id: int
    restaurant_id: int
    rating: int
    comment: str
    created_at: datetime

class ReviewSummary(CamelModel):
    count: int
    average_rating: float
    distribution: Dict[int, int]
