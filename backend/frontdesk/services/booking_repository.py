"""
Authoritative collection of booking records.

The repository never validates business rules: `create` always succeeds and
`update` merges whatever it is given. The lifecycle controller in
booking_service is responsible for keeping the invariants intact.
"""

from frontdesk.core.metrics import bookings_stored
from frontdesk.models.booking import Booking
from frontdesk.services.store import InMemoryStore


class BookingRepository(InMemoryStore[Booking]):
    record_type = Booking
    record_name = "booking"

    def create(self, data) -> str:
        booking_id = super().create(data)
        bookings_stored.set(len(self))
        return booking_id

    def delete(self, booking_id: str) -> bool:
        deleted = super().delete(booking_id)
        bookings_stored.set(len(self))
        return deleted

    def list_by_room(self, room_id: str) -> list[Booking]:
        return self.filter(lambda booking: booking.room_id == room_id)

    def list_by_guest(self, guest_id: str) -> list[Booking]:
        return self.filter(lambda booking: booking.guest_id == guest_id)
