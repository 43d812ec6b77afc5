import pytest

from services.restaurant_service import generate_time_slots
from settings.config import settings

API = settings.API_PREFIX


@pytest.mark.asyncio
async def test_create_assigns_sequential_ids(client, admin_headers, restaurant_payload):
    first = await client.post(f"{API}/restaurants", json=restaurant_payload, headers=admin_headers)
    second = await client.post(f"{API}/restaurants", json=restaurant_payload, headers=admin_headers)
    assert first.status_code == 201
    assert second.json()["id"] == first.json()["id"] + 1
    assert first.json()["maxPartySize"] == 4
    assert first.json()["sustainabilityInfo"] == restaurant_payload["sustainabilityInfo"]


@pytest.mark.asyncio
async def test_defaults_for_party_size_and_interval(client, admin_headers, restaurant_payload):
    del restaurant_payload["maxPartySize"]
    del restaurant_payload["timeSlotInterval"]
    r = await client.post(f"{API}/restaurants", json=restaurant_payload, headers=admin_headers)
    assert r.status_code == 201
    assert (r.json()["maxPartySize"], r.json()["timeSlotInterval"]) == (10, 30)


@pytest.mark.asyncio
async def test_create_requires_admin(client, restaurant_payload):
    r = await client.post(f"{API}/restaurants", json=restaurant_payload)
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_create_rejects_blank_name_with_field_path(client, admin_headers, restaurant_payload):
    restaurant_payload["name"] = ""
    r = await client.post(f"{API}/restaurants", json=restaurant_payload, headers=admin_headers)
    assert r.status_code == 400
    assert ["name"] in [e["path"] for e in r.json()["errors"]]


@pytest.mark.asyncio
async def test_get_restaurant(client, restaurant):
    r = await client.get(f"{API}/restaurants/{restaurant['id']}")
    assert r.status_code == 200
    assert r.json() == restaurant


@pytest.mark.asyncio
async def test_get_bad_id_and_missing_id(client):
    assert (await client.get(f"{API}/restaurants/abc")).status_code == 400
    assert (await client.get(f"{API}/restaurants/999")).status_code == 404


@pytest.mark.asyncio
async def test_search_is_case_insensitive_over_name_and_description(client, restaurant):
    by_name = await client.get(f"{API}/restaurants/search/SPROUT")
    by_description = await client.get(f"{API}/restaurants/search/small%20plates")
    nothing = await client.get(f"{API}/restaurants/search/steakhouse")
    assert [r["id"] for r in by_name.json()] == [restaurant["id"]]
    assert [r["id"] for r in by_description.json()] == [restaurant["id"]]
    assert nothing.json() == []


@pytest.mark.asyncio
async def test_empty_search_matches_list(client, admin_headers, restaurant_payload):
    for name in ["Alpha Greens", "Beta Bowls", "Gamma Grill"]:
        await client.post(f"{API}/restaurants", json={**restaurant_payload, "name": name}, headers=admin_headers)
    listed = (await client.get(f"{API}/restaurants")).json()
    searched = (await client.get(f"{API}/restaurants", params={"q": ""})).json()
    assert len(listed) == 3
    assert sorted(r["id"] for r in searched) == sorted(r["id"] for r in listed)


@pytest.mark.asyncio
async def test_update_is_full_replace(client, admin_headers, restaurant, restaurant_payload):
    replacement = {**restaurant_payload, "name": "Sprout & Stone Cafe", "type": "Cafe"}
    del replacement["maxPartySize"]
    r = await client.patch(f"{API}/restaurants/{restaurant['id']}", json=replacement, headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == restaurant["id"]
    assert body["name"] == "Sprout & Stone Cafe"
    assert body["maxPartySize"] == 10


@pytest.mark.asyncio
async def test_update_missing_restaurant(client, admin_headers, restaurant_payload):
    r = await client.patch(f"{API}/restaurants/42", json=restaurant_payload, headers=admin_headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_delete_keeps_reviews(client, admin_headers, restaurant):
    await client.post(f"{API}/reviews", json={
        "restaurantId": restaurant["id"], "rating": 5, "comment": "Lovely beet tartare!",
    })
    r = await client.delete(f"{API}/restaurants/{restaurant['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert (await client.get(f"{API}/restaurants/{restaurant['id']}")).status_code == 404
    assert (await client.delete(f"{API}/restaurants/{restaurant['id']}", headers=admin_headers)).status_code == 404
    orphans = await client.get(f"{API}/restaurants/{restaurant['id']}/reviews")
    assert len(orphans.json()) == 1


@pytest.mark.asyncio
async def test_time_slots_endpoint(client, restaurant):
    r = await client.get(f"{API}/restaurants/{restaurant['id']}/time-slots")
    assert r.status_code == 200
    assert r.json()[:3] == ["11:00", "11:45", "12:30"]


def test_time_slots_cover_window_inclusive():
    slots = generate_time_slots(30)
    assert slots[0] == "11:00"
    assert slots[-1] == "22:00"
    assert len(slots) == 23


def test_time_slots_stop_before_window_end():
    assert generate_time_slots(45)[-1] == "21:30"
