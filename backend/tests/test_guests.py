"""
Tests for the guest directory and its endpoints.
"""

import pytest
from httpx import AsyncClient

from frontdesk.core.errors import GuestNotFoundError
from frontdesk.services.guest_service import GuestDirectory


def test_find_or_create_reuses_national_id():
    guests = GuestDirectory()
    first = guests.find_or_create("Ahmed Khan", "BX782435", "01712345678")
    again = guests.find_or_create("Someone Else", "BX782435", "01712345678")

    assert first == again
    assert len(guests) == 1
    assert guests.get_by_id(first).name == "Ahmed Khan"


def test_find_or_create_updates_phone():
    guests = GuestDirectory()
    guest_id = guests.find_or_create("Ahmed Khan", "BX782435", "01712345678")
    guests.find_or_create("Ahmed Khan", "BX782435", "01799999999")

    assert guests.get_by_id(guest_id).phone == "01799999999"


def test_get_or_raise():
    with pytest.raises(GuestNotFoundError):
        GuestDirectory().get_or_raise("missing")


@pytest.mark.asyncio
async def test_register_and_lookup(client: AsyncClient):
    response = await client.post(
        "/api/v1/guests/",
        json={"name": "Kamal Hossain", "national_id": "CY123456", "phone": "01612345678"},
    )
    assert response.status_code == 201
    guest_id = response.json()["id"]

    response = await client.get("/api/v1/guests/lookup", params={"national_id": "CY123456"})
    assert response.status_code == 200
    assert response.json() == {
        "id": guest_id,
        "name": "Kamal Hossain",
        "national_id": "CY123456",
        "phone": "01612345678",
    }


@pytest.mark.asyncio
async def test_lookup_unknown(client: AsyncClient):
    response = await client.get("/api/v1/guests/lookup", params={"national_id": "ZZ000000"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_guest_bookings_keep_snapshot(client: AsyncClient, booking_payload):
    booking = (await client.post("/api/v1/bookings/", json=booking_payload)).json()
    guest_id = booking["guest_id"]

    response = await client.patch(f"/api/v1/guests/{guest_id}", json={"phone": "0000"})
    assert response.status_code == 200
    assert response.json()["phone"] == "0000"

    response = await client.get(f"/api/v1/guests/{guest_id}/bookings")
    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [booking["id"]]
    assert response.json()[0]["phone"] == "01898765432"


@pytest.mark.asyncio
async def test_update_guest_ignores_nulls(client: AsyncClient):
    guest_id = (
        await client.post(
            "/api/v1/guests/",
            json={"name": "Kamal Hossain", "national_id": "CY123456", "phone": "01612345678"},
        )
    ).json()["id"]

    response = await client.patch(f"/api/v1/guests/{guest_id}", json={"name": None, "phone": "0000"})
    assert response.status_code == 200
    assert response.json()["name"] == "Kamal Hossain"
    assert response.json()["phone"] == "0000"

    response = await client.get(f"/api/v1/guests/{guest_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Kamal Hossain"


@pytest.mark.asyncio
async def test_delete_guest(client: AsyncClient):
    guest_id = (
        await client.post(
            "/api/v1/guests/",
            json={"name": "Kamal Hossain", "national_id": "CY123456", "phone": "01612345678"},
        )
    ).json()["id"]

    assert (await client.delete(f"/api/v1/guests/{guest_id}")).status_code == 204
    assert (await client.get(f"/api/v1/guests/{guest_id}")).status_code == 404
