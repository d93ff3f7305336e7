"""
Availability engine.

Every answer is recomputed from the booking repository on each call; there
is no occupancy index to keep in sync. Checked-out bookings release their
room immediately, whatever their planned duration.

Two notions of "today" are in play:
  - is_available / available_room_ids / booked_room_ids look only at dates
  - current_* / occupied_room_ids also require the guest to be checked in
"""

from datetime import date, datetime
from typing import Callable, Iterable, Optional

from frontdesk.core.logging import get_logger
from frontdesk.core.metrics import record_availability
from frontdesk.models.booking import Booking
from frontdesk.services.booking_repository import BookingRepository
from frontdesk.services.intervals import (
    DayLike,
    contains,
    occupied_interval,
    overlaps,
    request_interval,
    to_day,
)

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def _blocks(booking: Booking, start: date, end: date) -> bool:
    if booking.check_out_at is not None:
        return False
    occ_start, occ_end = occupied_interval(booking.booking_date, booking.duration_days)
    return overlaps(start, end, occ_start, occ_end)


def _covers(booking: Booking, day: date) -> bool:
    occ_start, occ_end = occupied_interval(booking.booking_date, booking.duration_days)
    return contains(day, occ_start, occ_end)


class AvailabilityService:
    def __init__(
        self,
        bookings: BookingRepository,
        clock: Clock = datetime.now,
        room_ids: Optional[Callable[[], Iterable[str]]] = None,
    ):
        self.bookings = bookings
        self.clock = clock
        # Source of the full room list for system-wide scans; falls back to
        # the rooms that appear in bookings.
        self._room_ids = room_ids

    def today(self) -> date:
        return self.clock().date()

    def is_available(
        self,
        room_id: str,
        start_date: DayLike,
        end_date: DayLike,
        exclude_booking_id: Optional[str] = None,
    ) -> bool:
        """True if no live booking for the room overlaps [start_date, end_date)."""
        start, end = request_interval(start_date, end_date)
        conflict = next(
            (
                booking
                for booking in self.bookings.list_by_room(room_id)
                if booking.id != exclude_booking_id and _blocks(booking, start, end)
            ),
            None,
        )
        available = conflict is None
        record_availability(available)
        if not available:
            logger.debug(
                "room_unavailable",
                room_id=room_id,
                start=start.isoformat(),
                end=end.isoformat(),
                conflicting_booking_id=conflict.id,
            )
        return available

    def current_bookings_for_room(self, room_id: str) -> list[Booking]:
        today = self.today()
        return [
            booking
            for booking in self.bookings.list_by_room(room_id)
            if booking.check_in_at is not None
            and booking.check_out_at is None
            and _covers(booking, today)
        ]

    def future_bookings_for_room(self, room_id: str) -> list[Booking]:
        today = self.today()
        return [
            booking
            for booking in self.bookings.list_by_room(room_id)
            if booking.check_in_at is None
            and booking.check_out_at is None
            and booking.booking_date > today
        ]

    def past_bookings_for_room(self, room_id: str) -> list[Booking]:
        return [b for b in self.bookings.list_by_room(room_id) if b.check_out_at is not None]

    def active_booking_for_room(self, room_id: str) -> Optional[Booking]:
        """The checked-in, not checked-out booking for the room, on any date."""
        for booking in self.bookings.list_by_room(room_id):
            if booking.check_in_at is not None and booking.check_out_at is None:
                return booking
        return None

    def _all_room_ids(self, bookings: list[Booking]) -> list[str]:
        if self._room_ids is not None:
            return list(self._room_ids())
        # dict keeps first-seen order while dropping duplicates
        return list(dict.fromkeys(booking.room_id for booking in bookings))

    def available_room_ids(self, start_date: DayLike, end_date: DayLike) -> list[str]:
        start, end = request_interval(start_date, end_date)
        bookings = self.bookings.list_all()
        taken = {booking.room_id for booking in bookings if _blocks(booking, start, end)}
        return [room_id for room_id in self._all_room_ids(bookings) if room_id not in taken]

    def occupied_room_ids(self) -> list[str]:
        today = self.today()
        occupied = {
            booking.room_id
            for booking in self.bookings.list_all()
            if booking.check_in_at is not None
            and booking.check_out_at is None
            and _covers(booking, today)
        }
        return sorted(occupied)

    def booked_room_ids(self, day: DayLike) -> list[str]:
        target = to_day(day)
        booked = {
            booking.room_id
            for booking in self.bookings.list_all()
            if booking.check_out_at is None and _covers(booking, target)
        }
        return sorted(booked)
