"""
Tests for the calendar-day interval helpers.
"""

from datetime import date, datetime

import pytest

from frontdesk.core.errors import BookingValidationError
from frontdesk.services.intervals import (
    contains,
    occupied_interval,
    overlaps,
    parse_day,
    request_interval,
    to_day,
)


def test_one_day_booking_occupies_single_day():
    assert occupied_interval(date(2024, 6, 10), 1) == (date(2024, 6, 10), date(2024, 6, 10))


def test_occupied_interval_inclusive_end():
    assert occupied_interval("2024-06-10", 3) == (date(2024, 6, 10), date(2024, 6, 12))


def test_occupied_interval_crosses_month():
    assert occupied_interval(date(2024, 6, 29), 3)[1] == date(2024, 7, 1)


def test_request_interval_drops_exclusive_end():
    assert request_interval("2024-06-13", "2024-06-15") == (date(2024, 6, 13), date(2024, 6, 14))


@pytest.mark.parametrize("end", ["2024-06-13", "2024-06-12"])
def test_request_interval_rejects_empty_range(end):
    with pytest.raises(BookingValidationError):
        request_interval("2024-06-13", end)


def test_to_day_strips_time():
    assert to_day(datetime(2024, 6, 10, 23, 59)) == date(2024, 6, 10)
    assert to_day("2024-06-10T23:59:00Z") == date(2024, 6, 10)
    assert to_day(date(2024, 6, 10)) == date(2024, 6, 10)


def test_parse_day_rejects_garbage():
    with pytest.raises(BookingValidationError):
        parse_day("June 10th")


def test_contains_is_closed():
    start, end = date(2024, 6, 10), date(2024, 6, 12)
    assert contains(start, start, end)
    assert contains(end, start, end)
    assert not contains(date(2024, 6, 13), start, end)


class TestOverlaps:
    occ = (date(2024, 6, 10), date(2024, 6, 12))

    def test_request_start_inside(self):
        assert overlaps(date(2024, 6, 12), date(2024, 6, 13), *self.occ)

    def test_request_end_inside(self):
        assert overlaps(date(2024, 6, 8), date(2024, 6, 10), *self.occ)

    def test_request_swallows_occupied(self):
        assert overlaps(date(2024, 6, 1), date(2024, 6, 30), *self.occ)

    def test_request_inside_occupied(self):
        assert overlaps(date(2024, 6, 11), date(2024, 6, 11), *self.occ)

    def test_back_to_back_after(self):
        assert not overlaps(date(2024, 6, 13), date(2024, 6, 14), *self.occ)

    def test_back_to_back_before(self):
        assert not overlaps(date(2024, 6, 7), date(2024, 6, 9), *self.occ)
