"""
Calendar-day interval helpers.

A booking occupies `duration_days` whole days starting at `booking_date`:
the closed range [booking_date, booking_date + duration_days - 1].
Availability requests arrive half-open, [start, end), and are converted to
the closed range [start, end - 1] before testing overlap, so a stay that
ends the day another begins never collides with it.

Everything here works on `date` values; datetimes are truncated first.
"""

from datetime import date, datetime, timedelta
from typing import Union

from frontdesk.core.errors import BookingValidationError

DayLike = Union[date, datetime, str]


def parse_day(value: str) -> date:
    """Parse 'YYYY-MM-DD' or a full ISO date-time string down to its day."""
    try:
        if len(value) == 10:
            return date.fromisoformat(value)
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except (TypeError, ValueError):
        raise BookingValidationError(f"Invalid date: {value!r}")


def to_day(value: DayLike) -> date:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_day(value)


def occupied_interval(booking_date: DayLike, duration_days: int) -> tuple[date, date]:
    """Closed range of days a booking holds the room."""
    start = to_day(booking_date)
    return start, start + timedelta(days=duration_days - 1)


def request_interval(start_date: DayLike, end_date: DayLike) -> tuple[date, date]:
    """Convert a half-open [start, end) request into closed days [start, end - 1]."""
    start = to_day(start_date)
    end = to_day(end_date)
    if end <= start:
        raise BookingValidationError(
            f"End date {end.isoformat()} must be after start date {start.isoformat()}"
        )
    return start, end - timedelta(days=1)


def contains(day: DayLike, start: date, end: date) -> bool:
    """Closed-interval point test."""
    return start <= to_day(day) <= end


def overlaps(request_start: date, request_end: date, occ_start: date, occ_end: date) -> bool:
    """
    True if closed [request_start, request_end] intersects [occ_start, occ_end].

    Either request endpoint falling inside the occupied range is an overlap,
    as is the occupied range sitting strictly inside the request.
    """
    return (
        contains(request_start, occ_start, occ_end)
        or contains(request_end, occ_start, occ_end)
        or (request_start < occ_start and request_end > occ_end)
    )
