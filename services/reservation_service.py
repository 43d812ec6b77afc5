from datetime import date, datetime, timezone
from core.exceptions import NotFoundError, ReservationStateError
from db.repository import Store
from utils.logger import get_logger

logger = get_logger("Reservation_Service")

# allowed transitions; "confirmed" is the only entry state
ALLOWED_TRANSITIONS = {
    "confirmed": ["cancelled", "completed"],
    "cancelled": ["cancelled"],
    "completed": [],
}

def _utc_day(value: datetime) -> date:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).date()

async def create_reservation(store: Store, payload):
    """
    Book a table. Future date and party size against the restaurant's limit
    are enforced before this is called; there is no capacity check per slot.
    """
    doc = {
        "restaurant_id": payload.restaurant_id,
        "date": payload.date,
        "party_size": payload.party_size,
        "name": payload.name,
        "email": str(payload.email),
        "phone": payload.phone,
        "status": "confirmed",
        "created_at": datetime.now(timezone.utc),
    }
    reservation = await store.reservations.insert(doc)
    logger.info("Reservation created", extra={"reservation_id": reservation["id"], "restaurant_id": payload.restaurant_id})
    return reservation

async def list_reservations(store: Store, restaurant_id: int, day: date):
    if isinstance(day, datetime):
        day = _utc_day(day)
    docs = await store.reservations.find(restaurant_id=restaurant_id)
    return [d for d in docs if _utc_day(d["date"]) == day]

async def _transition(store: Store, reservation_id: int, new_status: str):
    async with store.reservations.lock:
        doc = await store.reservations.get(reservation_id)
        if doc is None:
            raise NotFoundError("Reservation not found")
        current = doc["status"]
        if new_status not in ALLOWED_TRANSITIONS.get(current, []):
            raise ReservationStateError(f"Cannot move reservation from {current} to {new_status}")
        updated = await store.reservations.update(reservation_id, {"status": new_status})
    logger.info(f"Reservation {reservation_id}: {current} -> {new_status}")
    return updated

async def cancel_reservation(store: Store, reservation_id: int):
    # cancelling twice is allowed and leaves the reservation cancelled
    return await _transition(store, reservation_id, "cancelled")

async def complete_reservation(store: Store, reservation_id: int):
    return await _transition(store, reservation_id, "completed")
