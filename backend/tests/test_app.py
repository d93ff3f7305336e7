"""
Tests for health, metrics, error mapping and demo data wiring.
"""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient

from frontdesk.models.booking import BookingStatus
from frontdesk.services.front_desk import build_demo_front_desk


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["store"] == {"rooms": 3, "guests": 0, "bookings": 0}


@pytest.mark.asyncio
async def test_request_id_echoed(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


@pytest.mark.asyncio
async def test_metrics_count_commands(client: AsyncClient, booking_payload):
    booking_id = (await client.post("/api/v1/bookings/", json=booking_payload)).json()["id"]
    await client.post(f"/api/v1/bookings/{booking_id}/check-in")

    response = await client.get("/metrics")
    assert response.status_code == 200
    assert 'frontdesk_lifecycle_commands_total{command="check_in",result="success"}' in response.text


def test_demo_front_desk_covers_every_state():
    now = datetime(2024, 6, 10, 9, 0)
    desk = build_demo_front_desk(clock=lambda: now)

    statuses = {b.id: b.status for b in desk.bookings.list_all()}
    assert statuses == {
        "1": BookingStatus.ACTIVE,
        "2": BookingStatus.PENDING,
        "3": BookingStatus.COMPLETED,
    }
    assert desk.availability.occupied_room_ids() == ["1"]
    assert [b.id for b in desk.availability.future_bookings_for_room("2")] == ["2"]
    assert desk.availability.is_available("3", now.date(), now.date() + timedelta(days=1))
    assert len(desk.rooms) == 5
    assert desk.guests.lookup_by_national_id("AZ567890").name == "Fatima Rahman"
