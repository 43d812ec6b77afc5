from fastapi import APIRouter, Depends, HTTPException, Path, status
from core.dependencies import get_store
from core.exceptions import AppException, DomainError, NotFoundError
from db.repository import Store
from models.gift_card import GiftCardCreate, GiftCardOut, GiftCardRedeem
from services.gift_card_service import get_gift_card, issue_gift_card, redeem_gift_card
from utils.logger import get_logger

logger = get_logger("Gift_Card_Route")
router = APIRouter(prefix="/gift-cards", tags=["Gift Cards"])

@router.post("", response_model=GiftCardOut, status_code=status.HTTP_201_CREATED)
async def api_issue_gift_card(payload: GiftCardCreate, store: Store = Depends(get_store)):
    return await issue_gift_card(store, payload.amount)

@router.get("/{code}", response_model=GiftCardOut)
async def api_get_gift_card(code: str = Path(...), store: Store = Depends(get_store)):
    try:
        return await get_gift_card(store, code)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.post("/{code}/redeem", response_model=GiftCardOut)
async def api_redeem_gift_card(payload: GiftCardRedeem, code: str = Path(...), store: Store = Depends(get_store)):
    # every redemption failure, unknown code included, is a 400; the code field tells them apart
    try:
        return await redeem_gift_card(store, code, payload.amount)
    except DomainError as e:
        logger.warning(f"Redemption rejected for {code}: {e.code}")
        raise AppException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message, code=e.code)
