"""
Pytest fixtures for a fresh in-memory front desk, an HTTP client bound to it,
and a frozen clock.

Each test gets its own desk, so there is nothing to roll back.
"""

from datetime import date, datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from frontdesk.main import app
from frontdesk.api.dependencies import get_front_desk
from frontdesk.models.room import Room, RoomCategory
from frontdesk.schemas.booking import BookingCreate
from frontdesk.services.front_desk import FrontDesk, build_front_desk

# Frozen "now" for every test: mid-afternoon on 2024-06-10
NOW = datetime(2024, 6, 10, 14, 30)
TODAY = NOW.date()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def rooms() -> list[Room]:
    return [
        Room(id="r1", room_number="101", floor=1, category=RoomCategory.DOUBLE, beds=2),
        Room(id="r2", room_number="102", floor=1, category=RoomCategory.COUPLE, beds=1),
        Room(id="r3", room_number="201", floor=2, category=RoomCategory.CONNECTING, beds=3),
    ]


@pytest.fixture
def desk(clock, rooms) -> FrontDesk:
    return build_front_desk(clock=clock, rooms=rooms)


@pytest.fixture
def make_booking(desk: FrontDesk):
    """Create a booking through the controller and return its id."""

    def _make(
        room_id: str = "r1",
        booking_date: date = date(2024, 6, 10),
        duration_days: int = 3,
        national_id: str = "BX782435",
        guest_name: str = "Ahmed Khan",
        phone: str = "01712345678",
        number_of_people: int = 2,
        total_amount: float = 3000,
        paid_amount: float = 0,
    ) -> str:
        return desk.booking_service.create_booking(
            BookingCreate(
                room_id=room_id,
                guest_name=guest_name,
                national_id=national_id,
                phone=phone,
                number_of_people=number_of_people,
                total_amount=total_amount,
                paid_amount=paid_amount,
                booking_date=booking_date,
                duration_days=duration_days,
            )
        )

    return _make


@pytest_asyncio.fixture(scope="function")
async def client(desk: FrontDesk) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose routes see the test's desk instead of the app's."""
    app.dependency_overrides[get_front_desk] = lambda: desk

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    return {"X-Staff-Role": "admin"}


@pytest.fixture
def booking_payload() -> dict:
    return {
        "room_id": "r1",
        "guest_name": "Fatima Rahman",
        "national_id": "AZ567890",
        "phone": "01898765432",
        "number_of_people": 2,
        "total_amount": 6000,
        "paid_amount": 1000,
        "booking_date": "2024-06-12",
        "duration_days": 2,
    }
