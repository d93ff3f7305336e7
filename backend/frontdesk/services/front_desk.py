"""
Wiring for one front desk: booking repository, room inventory, guest
directory, availability engine and lifecycle controller sharing one clock.

Built once by the application lifespan (or once per test) and handed to the
API through a dependency; there is no module-level instance.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from frontdesk.core.logging import get_logger
from frontdesk.models.booking import Booking
from frontdesk.models.guest import Guest
from frontdesk.models.room import Room, RoomCategory
from frontdesk.services.availability_service import AvailabilityService
from frontdesk.services.booking_repository import BookingRepository
from frontdesk.services.booking_service import BookingService
from frontdesk.services.guest_service import GuestDirectory
from frontdesk.services.room_service import RoomInventory

logger = get_logger(__name__)


@dataclass
class FrontDesk:
    bookings: BookingRepository
    rooms: RoomInventory
    guests: GuestDirectory
    availability: AvailabilityService
    booking_service: BookingService


def build_front_desk(
    clock: Callable[[], datetime] = datetime.now,
    enforce_single_occupancy: bool = True,
    rooms=(),
    guests=(),
    bookings=(),
) -> FrontDesk:
    booking_repo = BookingRepository(bookings)
    room_inventory = RoomInventory(rooms)
    guest_directory = GuestDirectory(guests)
    availability = AvailabilityService(booking_repo, clock=clock, room_ids=room_inventory.room_ids)
    room_inventory.availability = availability
    controller = BookingService(
        booking_repo,
        availability,
        room_inventory,
        guest_directory,
        clock=clock,
        enforce_single_occupancy=enforce_single_occupancy,
    )
    return FrontDesk(
        bookings=booking_repo,
        rooms=room_inventory,
        guests=guest_directory,
        availability=availability,
        booking_service=controller,
    )


def demo_records(now: datetime) -> tuple[list[Room], list[Guest], list[Booking]]:
    """Sample inventory: five rooms, three guests, one booking in each lifecycle state."""
    today = now.date()
    rooms = [
        Room(id="1", room_number="101", floor=1, category=RoomCategory.DOUBLE, beds=2,
             bathrooms=1, has_ac=True, description="Spacious room with ocean view"),
        Room(id="2", room_number="102", floor=1, category=RoomCategory.COUPLE, beds=1,
             bathrooms=1, has_ac=True, description="Cozy room for couples with private balcony"),
        Room(id="3", room_number="201", floor=2, category=RoomCategory.CONNECTING, beds=3,
             bathrooms=2, has_ac=True, description="Two connected rooms ideal for families",
             problems=["TV remote not working"]),
        Room(id="4", room_number="202", floor=2, category=RoomCategory.DOUBLE, beds=2,
             bathrooms=1, has_ac=True, description="Mountain view room with extra space"),
        Room(id="5", room_number="301", floor=3, category=RoomCategory.COUPLE, beds=1,
             bathrooms=1, has_ac=True, description="Premium couple room with sea view"),
    ]
    guests = [
        Guest(id="1", name="Ahmed Khan", national_id="BX782435", phone="01712345678"),
        Guest(id="2", name="Fatima Rahman", national_id="AZ567890", phone="01898765432"),
        Guest(id="3", name="Kamal Hossain", national_id="CY123456", phone="01612345678"),
    ]
    bookings = [
        # checked in today
        Booking(id="1", room_id="1", guest_id="1", guest_name="Ahmed Khan",
                national_id="BX782435", phone="01712345678", number_of_people=2,
                total_amount=5000, paid_amount=2500, booking_date=today,
                duration_days=3, check_in_at=now),
        # arriving in two days
        Booking(id="2", room_id="2", guest_id="2", guest_name="Fatima Rahman",
                national_id="AZ567890", phone="01898765432", number_of_people=2,
                total_amount=6000, paid_amount=6000, booking_date=today + timedelta(days=2),
                duration_days=2),
        # left early today
        Booking(id="3", room_id="3", guest_id="3", guest_name="Kamal Hossain",
                national_id="CY123456", phone="01612345678", number_of_people=4,
                total_amount=8000, paid_amount=4000, booking_date=today - timedelta(days=2),
                duration_days=5, check_in_at=now - timedelta(days=2), check_out_at=now),
    ]
    return rooms, guests, bookings


def build_demo_front_desk(
    clock: Callable[[], datetime] = datetime.now,
    enforce_single_occupancy: bool = True,
) -> FrontDesk:
    rooms, guests, bookings = demo_records(clock())
    desk = build_front_desk(
        clock=clock,
        enforce_single_occupancy=enforce_single_occupancy,
        rooms=rooms,
        guests=guests,
        bookings=bookings,
    )
    logger.info("demo_data_loaded", rooms=len(rooms), guests=len(guests), bookings=len(bookings))
    return desk
