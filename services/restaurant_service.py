# services/restaurant_service.py
from datetime import datetime, timedelta
from core.exceptions import NotFoundError
from db.repository import Store
from utils.logger import get_logger

logger = get_logger("Restaurant_Service")

SLOT_WINDOW_START = "11:00"
SLOT_WINDOW_END = "22:00"

def _restaurant_doc(payload) -> dict:
    return payload.model_dump(by_alias=False)

async def list_restaurants(store: Store):
    return await store.restaurants.list()

async def get_restaurant(store: Store, restaurant_id: int):
    doc = await store.restaurants.get(restaurant_id)
    if doc is None:
        raise NotFoundError("Restaurant not found")
    return doc

async def search_restaurants(store: Store, query: str):
    """
    Case-insensitive substring match over name and description.
    A blank query matches everything.
    """
    needle = (query or "").strip().lower()
    docs = await store.restaurants.list()
    if not needle:
        return docs
    return [
        d for d in docs
        if needle in d["name"].lower() or needle in d["description"].lower()
    ]

async def create_restaurant(store: Store, payload, actor: str | None = None):
    doc = await store.restaurants.insert(_restaurant_doc(payload))
    logger.info("Restaurant created", extra={"actor": actor, "restaurant_id": doc["id"]})
    return doc

async def update_restaurant(store: Store, restaurant_id: int, payload, actor: str | None = None):
    async with store.restaurants.lock:
        doc = await store.restaurants.replace(restaurant_id, _restaurant_doc(payload))
    if doc is None:
        raise NotFoundError("Restaurant not found")
    logger.info("Restaurant updated", extra={"actor": actor, "restaurant_id": restaurant_id})
    return doc

async def delete_restaurant(store: Store, restaurant_id: int, actor: str | None = None):
    # reviews and reservations are left in place
    deleted = await store.restaurants.delete(restaurant_id)
    if not deleted:
        raise NotFoundError("Restaurant not found")
    logger.info("Restaurant deleted", extra={"actor": actor, "restaurant_id": restaurant_id})
    return {"message": "deleted", "restaurant_id": restaurant_id}

def generate_time_slots(interval_minutes: int) -> list[str]:
    """
    Candidate reservation times between 11:00 and 22:00 inclusive.
    Not an availability check: nothing blocks a slot once booked.
    """
    if interval_minutes <= 0:
        raise ValueError("Slot interval must be positive")
    current = datetime.strptime(SLOT_WINDOW_START, "%H:%M")
    end = datetime.strptime(SLOT_WINDOW_END, "%H:%M")
    step = timedelta(minutes=interval_minutes)
    slots = []
    while current <= end:
        slots.append(current.strftime("%H:%M"))
        current += step
    return slots
