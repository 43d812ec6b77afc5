"""
Gift card ledger.

A card starts active with balance == amount. Redemptions only ever lower the
balance; the redemption that brings it to zero also deactivates the card, and
nothing reactivates it.
"""
import secrets
import string
from datetime import datetime, timedelta, timezone
from core.exceptions import (
    CodeGenerationError,
    ExpiredCardError,
    InactiveCardError,
    InsufficientBalanceError,
    NotFoundError,
)
from db.repository import Store
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("Gift_Card_Service")

CODE_ALPHABET = string.ascii_uppercase + string.digits

def generate_code(length: int | None = None) -> str:
    length = length or settings.GIFT_CARD_CODE_LENGTH
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))

def _normalize(code: str) -> str:
    return (code or "").strip().upper()

def _utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

async def issue_gift_card(store: Store, amount: int, now: datetime | None = None):
    """
    Issue a card worth `amount`. The amount range is enforced by the request
    schema. Codes are regenerated on collision, up to
    GIFT_CARD_CODE_MAX_ATTEMPTS times.
    """
    created_at = _utc(now or datetime.now(timezone.utc))
    async with store.gift_cards.lock:
        for attempt in range(1, settings.GIFT_CARD_CODE_MAX_ATTEMPTS + 1):
            code = generate_code()
            if await store.gift_cards.find_one(code=code) is None:
                break
            logger.warning(f"Gift card code collision on attempt {attempt}")
        else:
            raise CodeGenerationError("Could not generate a unique gift card code")
        card = await store.gift_cards.insert({
            "code": code,
            "amount": amount,
            "balance": amount,
            "created_at": created_at,
            "expires_at": created_at + timedelta(days=settings.GIFT_CARD_VALIDITY_DAYS),
            "is_active": 1,
        })
    logger.info("Gift card issued", extra={"gift_card_id": card["id"], "amount": amount})
    return card

async def get_gift_card(store: Store, code: str):
    card = await store.gift_cards.find_one(code=_normalize(code))
    if card is None:
        raise NotFoundError("Gift card not found")
    return card

async def redeem_gift_card(store: Store, code: str, amount: int, now: datetime | None = None):
    """
    Spend `amount` from a card. Checks run in a fixed order and the first
    failing one is reported: unknown code, inactive, expired, insufficient
    balance.
    """
    now = _utc(now or datetime.now(timezone.utc))
    async with store.gift_cards.lock:
        card = await store.gift_cards.find_one(code=_normalize(code))
        if card is None:
            raise NotFoundError("Gift card not found")
        if not card["is_active"]:
            raise InactiveCardError("Gift card is no longer active")
        if now > _utc(card["expires_at"]):
            raise ExpiredCardError("Gift card has expired")
        if card["balance"] < amount:
            raise InsufficientBalanceError(
                f"Insufficient balance: {card['balance']} available, {amount} requested"
            )
        balance = card["balance"] - amount
        changes = {"balance": balance}
        if balance == 0:
            changes["is_active"] = 0
        card = await store.gift_cards.update(card["id"], changes)
    logger.info("Gift card redeemed", extra={"gift_card_id": card["id"], "amount": amount, "balance": balance})
    return card
