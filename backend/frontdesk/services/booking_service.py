"""
Booking lifecycle controller.

STATE MACHINE
=============

  pending --check_in--> active --check_out--> completed

  No transition skips a state and none is reversible. Status is derived from
  the check_in_at / check_out_at timestamps on the record.

CONCURRENCY STRATEGY: one lock around every command
====================================================

Problem:
  Sync FastAPI endpoints run in a thread pool. Two front-desk clerks press
  "check in" on the same booking at the same moment. Both read
  check_in_at=None, both write a timestamp, both report success.

Solution:
  Every command does its read, precondition checks and write while holding
  a single re-entrant lock owned by the controller. The repository has its
  own lock as well, but that only makes individual reads and writes atomic,
  not the read-check-write sequence.

  The lock is global, so commands on different rooms also run one at a time.

FAILURE REPORTING
=================

  - missing booking            -> False
  - state precondition failed  -> False (check_in / check_out)
  - invalid input              -> BookingValidationError, nothing written
"""

import threading
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from frontdesk.core.errors import (
    BookingValidationError,
    RoomUnavailableError,
)
from frontdesk.core.logging import get_logger
from frontdesk.core.metrics import lifecycle_latency, record_command
from frontdesk.models.booking import Booking
from frontdesk.schemas.booking import BookingCreate
from frontdesk.services.availability_service import AvailabilityService
from frontdesk.services.booking_repository import BookingRepository
from frontdesk.services.guest_service import GuestDirectory
from frontdesk.services.room_service import RoomInventory

logger = get_logger(__name__)


class BookingService:
    def __init__(
        self,
        bookings: BookingRepository,
        availability: AvailabilityService,
        rooms: RoomInventory,
        guests: GuestDirectory,
        clock: Callable[[], datetime] = datetime.now,
        enforce_single_occupancy: bool = True,
    ):
        self.bookings = bookings
        self.availability = availability
        self.rooms = rooms
        self.guests = guests
        self.clock = clock
        self.enforce_single_occupancy = enforce_single_occupancy
        self._lock = threading.RLock()

    def _load(self, command: str, booking_id: str) -> Optional[Booking]:
        booking = self.bookings.get_by_id(booking_id)
        if booking is None:
            logger.warning(f"{command}_failed", booking_id=booking_id, reason="not_found")
            record_command(command, "not_found")
        return booking

    def _reject(self, command: str, booking: Booking, reason: str) -> bool:
        logger.warning(f"{command}_rejected", booking_id=booking.id, reason=reason)
        record_command(command, "rejected")
        return False

    def _invalid(self, command: str, detail: str, **context) -> BookingValidationError:
        logger.warning(f"{command}_rejected", reason=detail, **context)
        record_command(command, "rejected")
        return BookingValidationError(detail)

    def _stay_end(self, command: str, start: date, days: int, **context) -> date:
        try:
            return start + timedelta(days=days)
        except OverflowError:
            raise self._invalid(
                command,
                f"A stay of {days} days from {start.isoformat()} runs past the calendar",
                **context,
            )

    def create_booking(self, data: BookingCreate) -> str:
        """
        Validate a new stay, resolve the guest and store the booking.
        Returns the new booking id.
        """
        room = self.rooms.get_or_raise(data.room_id)

        if data.number_of_people > room.max_guests:
            raise self._invalid(
                "create",
                f"{room.category.value} rooms allow at most {room.max_guests} guests",
                room_id=room.id,
            )
        if data.paid_amount > data.total_amount:
            raise self._invalid("create", "Paid amount cannot exceed total amount", room_id=room.id)

        end_date = self._stay_end("create", data.booking_date, data.duration_days, room_id=room.id)

        with self._lock, lifecycle_latency.labels(command="create").time():
            # The room may have been removed since the capacity check
            self.rooms.get_or_raise(room.id)
            if not self.availability.is_available(room.id, data.booking_date, end_date):
                record_command("create", "rejected")
                raise RoomUnavailableError("Room is not available for the selected dates")

            guest_id = self.guests.find_or_create(
                name=data.guest_name,
                national_id=data.national_id,
                phone=data.phone,
            )
            booking_id = self.bookings.create(
                {
                    **data.model_dump(),
                    "guest_id": guest_id,
                }
            )

        record_command("create", "success")
        logger.info(
            "booking_created",
            booking_id=booking_id,
            room_id=room.id,
            guest_id=guest_id,
            booking_date=data.booking_date.isoformat(),
            duration_days=data.duration_days,
        )
        return booking_id

    def check_in(self, booking_id: str) -> bool:
        with self._lock, lifecycle_latency.labels(command="check_in").time():
            booking = self._load("check_in", booking_id)
            if booking is None:
                return False
            if booking.check_in_at is not None:
                return self._reject("check_in", booking, "already_checked_in")
            if self.enforce_single_occupancy:
                occupant = self.availability.active_booking_for_room(booking.room_id)
                if occupant is not None:
                    return self._reject("check_in", booking, f"room_occupied_by:{occupant.id}")

            checked_in_at = self.clock()
            self.bookings.update(booking_id, check_in_at=checked_in_at)

        record_command("check_in", "success")
        logger.info("booking_checked_in", booking_id=booking_id, room_id=booking.room_id)
        return True

    def check_out(self, booking_id: str) -> bool:
        with self._lock, lifecycle_latency.labels(command="check_out").time():
            booking = self._load("check_out", booking_id)
            if booking is None:
                return False
            if booking.check_in_at is None:
                return self._reject("check_out", booking, "not_checked_in")
            if booking.check_out_at is not None:
                return self._reject("check_out", booking, "already_checked_out")

            self.bookings.update(booking_id, check_out_at=self.clock())

        record_command("check_out", "success")
        logger.info(
            "booking_checked_out",
            booking_id=booking_id,
            room_id=booking.room_id,
            balance_due=booking.balance_due,
        )
        return True

    def update_payment(self, booking_id: str, new_paid_amount: float) -> bool:
        """Raise the paid amount. Payments never go down and never exceed the total."""
        with self._lock, lifecycle_latency.labels(command="payment").time():
            booking = self._load("payment", booking_id)
            if booking is None:
                return False
            if booking.check_out_at is not None:
                raise self._invalid("payment", "Booking is already checked out", booking_id=booking_id)
            if new_paid_amount < booking.paid_amount:
                raise self._invalid(
                    "payment",
                    f"Paid amount cannot decrease below {booking.paid_amount}",
                    booking_id=booking_id,
                )
            if new_paid_amount > booking.total_amount:
                raise self._invalid(
                    "payment",
                    f"Paid amount cannot exceed total amount {booking.total_amount}",
                    booking_id=booking_id,
                )

            self.bookings.update(booking_id, paid_amount=new_paid_amount)

        record_command("payment", "success")
        logger.info(
            "payment_updated",
            booking_id=booking_id,
            previous=booking.paid_amount,
            paid=new_paid_amount,
        )
        return True

    def extend(self, booking_id: str, extra_days: int, extra_amount: float) -> bool:
        """
        Lengthen a stay by `extra_days` and add `extra_amount` to the total.
        The room must be free for [current end, current end + extra_days),
        ignoring this booking itself.
        """
        if extra_days < 1:
            raise self._invalid("extend", "Extension must be at least one day", booking_id=booking_id)
        if extra_amount < 0:
            raise self._invalid("extend", "Extension amount cannot be negative", booking_id=booking_id)

        with self._lock, lifecycle_latency.labels(command="extend").time():
            booking = self._load("extend", booking_id)
            if booking is None:
                return False
            if booking.check_out_at is not None:
                raise self._invalid("extend", "Booking is already checked out", booking_id=booking_id)

            old_end = booking.end_date
            new_end = self._stay_end("extend", old_end, extra_days, booking_id=booking_id)
            if not self.availability.is_available(
                booking.room_id, old_end, new_end, exclude_booking_id=booking_id
            ):
                raise self._invalid(
                    "extend",
                    f"Room is not available from {old_end.isoformat()} to {new_end.isoformat()}",
                    booking_id=booking_id,
                )

            self.bookings.update(
                booking_id,
                duration_days=booking.duration_days + extra_days,
                total_amount=booking.total_amount + extra_amount,
            )

        record_command("extend", "success")
        logger.info(
            "booking_extended",
            booking_id=booking_id,
            extra_days=extra_days,
            extra_amount=extra_amount,
            new_end=new_end.isoformat(),
        )
        return True

    def remove_room(self, room_id: str) -> None:
        """Guarded room delete, serialized with booking creation and extension."""
        with self._lock:
            self.rooms.remove(room_id)

    def delete_booking(self, booking_id: str) -> bool:
        """Direct removal; callers decide whether the booking may go."""
        with self._lock:
            deleted = self.bookings.delete(booking_id)
        record_command("delete", "success" if deleted else "not_found")
        if deleted:
            logger.info("booking_deleted", booking_id=booking_id)
        return deleted
