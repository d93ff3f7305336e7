"""
Tests for the booking repository: plain storage, no business rules.
"""

from datetime import date, datetime

import pytest

from frontdesk.services.booking_repository import BookingRepository


@pytest.fixture
def repo() -> BookingRepository:
    return BookingRepository()


@pytest.fixture
def data() -> dict:
    return {
        "room_id": "r1",
        "guest_id": "g1",
        "guest_name": "Ahmed Khan",
        "national_id": "BX782435",
        "phone": "01712345678",
        "number_of_people": 2,
        "total_amount": 5000,
        "paid_amount": 2500,
        "booking_date": date(2024, 6, 10),
        "duration_days": 3,
    }


def test_create_then_get_returns_submitted_fields(repo, data):
    booking_id = repo.create(data)
    booking = repo.get_by_id(booking_id)

    assert booking.id == booking_id
    for field, value in data.items():
        assert getattr(booking, field) == value
    assert booking.check_in_at is None
    assert booking.check_out_at is None


def test_create_assigns_unique_ids(repo, data):
    assert repo.create(data) != repo.create(data)
    assert len(repo) == 2


def test_update_merges_fields(repo, data):
    booking_id = repo.create(data)
    stamp = datetime(2024, 6, 10, 12, 0)

    assert repo.update(booking_id, check_in_at=stamp) is True

    booking = repo.get_by_id(booking_id)
    assert booking.check_in_at == stamp
    assert booking.paid_amount == 2500


def test_update_cannot_change_id(repo, data):
    booking_id = repo.create(data)
    repo.update(booking_id, id="other")
    assert repo.get_by_id(booking_id) is not None
    assert repo.get_by_id("other") is None


def test_update_unknown_id(repo):
    assert repo.update("missing", paid_amount=1) is False


def test_delete(repo, data):
    booking_id = repo.create(data)
    assert repo.delete(booking_id) is True
    assert repo.get_by_id(booking_id) is None
    assert repo.delete(booking_id) is False


def test_reads_are_snapshots(repo, data):
    booking_id = repo.create(data)
    snapshot = repo.get_by_id(booking_id)
    snapshot.paid_amount = 0

    assert repo.get_by_id(booking_id).paid_amount == 2500
    assert repo.list_all()[0].paid_amount == 2500


def test_list_by_room_and_guest_keep_insertion_order(repo, data):
    first = repo.create(data)
    repo.create({**data, "room_id": "r2", "guest_id": "g2"})
    third = repo.create({**data, "booking_date": date(2024, 7, 1)})

    assert [b.id for b in repo.list_by_room("r1")] == [first, third]
    assert [b.id for b in repo.list_by_guest("g1")] == [first, third]
    assert len(repo.list_by_guest("g2")) == 1
    assert repo.list_by_room("nowhere") == []
