from datetime import date, datetime, time, timedelta, timezone

import pytest

from core.exceptions import NotFoundError, ReservationStateError
from models.reservation import parse_reservation_day
from services.reservation_service import cancel_reservation, complete_reservation
from settings.config import settings

API = settings.API_PREFIX


def future_at(days: int, hour: int = 19) -> datetime:
    day = (datetime.now(timezone.utc) + timedelta(days=days)).date()
    return datetime.combine(day, time(hour, 0), tzinfo=timezone.utc)


def reservation_body(restaurant_id, when=None, party_size=2):
    return {
        "restaurantId": restaurant_id,
        "date": (when or future_at(2)).isoformat(),
        "partySize": party_size,
        "name": "Robin Ash",
        "email": "robin@example.com",
        "phone": "5551234567",
    }


@pytest.mark.asyncio
async def test_create_reservation_is_confirmed(client, restaurant):
    r = await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"]))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["status"] == "confirmed"
    assert body["partySize"] == 2
    assert "createdAt" in body


@pytest.mark.asyncio
async def test_party_size_above_restaurant_limit_is_rejected(client, store, restaurant):
    # restaurant fixture allows at most 4
    r = await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], party_size=5))
    assert r.status_code == 400
    assert await store.reservations.count() == 0


@pytest.mark.asyncio
async def test_party_size_at_limit_is_accepted(client, restaurant):
    r = await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], party_size=4))
    assert r.status_code == 201


@pytest.mark.asyncio
async def test_zero_party_size_is_rejected(client, restaurant):
    r = await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], party_size=0))
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["partySize"]


@pytest.mark.asyncio
async def test_past_date_is_rejected(client, restaurant):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    r = await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], when=past))
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["date"]


@pytest.mark.asyncio
async def test_invalid_email_and_short_phone(client, restaurant):
    body = {**reservation_body(restaurant["id"]), "email": "not-an-email", "phone": "123"}
    r = await client.post(f"{API}/reservations", json=body)
    assert r.status_code == 400
    assert sorted(e["path"][0] for e in r.json()["errors"]) == ["email", "phone"]


@pytest.mark.asyncio
async def test_unknown_restaurant_is_rejected(client):
    r = await client.post(f"{API}/reservations", json=reservation_body(999))
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_same_slot_can_be_booked_repeatedly(client, restaurant):
    when = future_at(3)
    for _ in range(3):
        r = await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], when=when))
        assert r.status_code == 201


@pytest.mark.asyncio
async def test_list_by_calendar_day_ignores_time(client, restaurant):
    lunch = future_at(2, hour=12)
    dinner = future_at(2, hour=20)
    next_day = future_at(3, hour=12)
    for when in (lunch, dinner, next_day):
        await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], when=when))

    r = await client.get(f"{API}/restaurants/{restaurant['id']}/reservations/{lunch.date().isoformat()}")
    assert r.status_code == 200
    assert len(r.json()) == 2

    other = await client.get(f"{API}/restaurants/{restaurant['id'] + 1}/reservations/{lunch.date().isoformat()}")
    assert other.json() == []


@pytest.mark.asyncio
async def test_list_with_bad_date(client, restaurant):
    r = await client.get(f"{API}/restaurants/{restaurant['id']}/reservations/not-a-date")
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_cancel_twice_stays_cancelled(client, restaurant):
    created = (await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"]))).json()
    first = await client.post(f"{API}/reservations/{created['id']}/cancel")
    second = await client.post(f"{API}/reservations/{created['id']}/cancel")
    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["status"] == "cancelled"
    assert second.json()["status"] == "cancelled"


@pytest.mark.asyncio
async def test_cancel_unknown_reservation(client):
    r = await client.post(f"{API}/reservations/77/cancel")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_complete_requires_admin(client, restaurant):
    created = (await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"]))).json()
    r = await client.post(f"{API}/reservations/{created['id']}/complete")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_complete_then_cancel_conflicts(client, admin_headers, restaurant):
    created = (await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"]))).json()
    r = await client.post(f"{API}/reservations/{created['id']}/complete", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["status"] == "completed"
    r = await client.post(f"{API}/reservations/{created['id']}/cancel")
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_completing_cancelled_reservation_fails(store):
    reservation = await store.reservations.insert({
        "restaurant_id": 1, "date": future_at(1), "party_size": 2, "name": "A",
        "email": "a@example.com", "phone": "5550000000", "status": "confirmed",
        "created_at": datetime.now(timezone.utc),
    })
    await cancel_reservation(store, reservation["id"])
    with pytest.raises(ReservationStateError):
        await complete_reservation(store, reservation["id"])
    with pytest.raises(NotFoundError):
        await complete_reservation(store, 12345)


@pytest.mark.asyncio
async def test_list_accepts_full_timestamp(client, restaurant):
    when = future_at(2, hour=19)
    created = (await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], when=when))).json()
    await client.post(f"{API}/reservations", json=reservation_body(restaurant["id"], when=future_at(3)))

    base = f"{API}/restaurants/{restaurant['id']}/reservations"
    by_own_date = await client.get(f"{base}/{created['date']}")
    assert by_own_date.status_code == 200, by_own_date.text
    assert [r["id"] for r in by_own_date.json()] == [created["id"]]

    morning = when.replace(hour=8, minute=15).isoformat()
    by_other_time = await client.get(f"{base}/{morning}")
    assert [r["id"] for r in by_other_time.json()] == [created["id"]]


@pytest.mark.asyncio
async def test_list_bad_date_reports_day_path(client, restaurant):
    r = await client.get(f"{API}/restaurants/{restaurant['id']}/reservations/2026-13-45")
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["day"]


def test_parse_reservation_day_uses_utc_calendar_day():
    assert parse_reservation_day("2030-05-01") == date(2030, 5, 1)
    assert parse_reservation_day("2030-05-01T23:30:00-02:00") == date(2030, 5, 2)
    assert parse_reservation_day("2030-05-01T19:00:00Z") == date(2030, 5, 1)
    with pytest.raises(ValueError):
        parse_reservation_day("tomorrow")
