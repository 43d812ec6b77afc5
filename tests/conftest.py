import pytest
import pytest_asyncio
import httpx

from db.memory_store import build_memory_store
from main import create_app
from scripts.seed_data import seed
from settings.config import settings

API = settings.API_PREFIX

RESTAURANT_PAYLOAD = {
    "name": "Sprout & Stone",
    "description": "Seasonal plant-based small plates",
    "address": "9 Orchard Lane, Green City",
    "hours": "Tue-Sun: 12:00-23:00",
    "imageUrl": "https://example.com/sprout.jpg",
    "latitude": 40.71,
    "longitude": -74.0,
    "sustainabilityInfo": "Rooftop garden, no single-use plastic",
    "menu": "Beet Tartare, Mushroom Risotto",
    "type": "Bistro",
    "maxPartySize": 4,
    "timeSlotInterval": 45,
}


@pytest_asyncio.fixture
async def store():
    s = build_memory_store()
    await seed(s, sample_data=False)
    return s


@pytest_asyncio.fixture
async def client(store):
    app = create_app(store=store)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest_asyncio.fixture
async def admin_headers(client):
    r = await client.post(
        f"{API}/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest_asyncio.fixture
async def restaurant(client, admin_headers):
    r = await client.post(f"{API}/restaurants", json=RESTAURANT_PAYLOAD, headers=admin_headers)
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def restaurant_payload():
    return dict(RESTAURANT_PAYLOAD)
