# scripts/seed_data.py
import asyncio
from db.repository import Store
from services.admin_service import ensure_admin
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("SEED")

SAMPLE_RESTAURANTS = [
    {
        "name": "Green Earth Kitchen",
        "description": "Farm-to-table vegan cuisine with sustainable practices",
        "address": "123 Eco Street, Green City",
        "hours": "Mon-Sun: 11:00-22:00",
        "image_url": "https://images.unsplash.com/photo-1494331789569-f98601f1934f",
        "latitude": 40.7128,
        "longitude": -74.006,
        "sustainability_info": "Solar powered, zero-waste policy, composting program",
        "menu": "Quinoa Buddha Bowl, Beyond Burger, Garden Fresh Salad",
        "type": "Restaurant",
        "max_party_size": 10,
        "time_slot_interval": 30,
    },
    {
        "name": "Plant Power Cart",
        "description": "Mobile vegan street food with global flavors",
        "address": "456 Food Cart Way, Green City",
        "hours": "Mon-Sat: 12:00-20:00",
        "image_url": "https://images.unsplash.com/photo-1512621776951-a57141f2eefd",
        "latitude": 40.7129,
        "longitude": -74.007,
        "sustainability_info": "100% compostable packaging, local ingredients",
        "menu": "Jackfruit Tacos, Tempeh Bowl, Sweet Potato Fries",
        "type": "Food Cart",
        "max_party_size": 10,
        "time_slot_interval": 30,
    },
]

async def seed(store: Store, sample_data: bool | None = None):
    await ensure_admin(store, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    if sample_data is None:
        sample_data = settings.SEED_SAMPLE_DATA
    if not sample_data:
        return
    if await store.restaurants.count() > 0:
        logger.info("Catalog already seeded")
        return
    for doc in SAMPLE_RESTAURANTS:
        await store.restaurants.insert(doc)
    logger.info(f"Seeded {len(SAMPLE_RESTAURANTS)} sample restaurants")

async def main():
    from db.db_operation import build_mongo_store
    store = await build_mongo_store()
    try:
        await seed(store)
    finally:
        await store.close()

if __name__ == "__main__":
    asyncio.run(main())
