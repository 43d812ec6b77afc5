from pydantic import Field
from datetime import datetime
from models.base import CamelModel
from settings.config import settings

class GiftCardCreate(CamelModel):
    amount: int = Field(..., ge=settings.GIFT_CARD_MIN_AMOUNT, le=settings.GIFT_CARD_MAX_AMOUNT)

class GiftCardRedeem(CamelModel):
    amount: int = Field(..., ge=0)

class GiftCardOut(CamelModel):
    id: int
    code: str
    amount: int
    balance: int
    created_at: datetime
    expires_at: datetime
    is_active: int
